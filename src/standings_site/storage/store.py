# src/standings_site/storage/store.py
from typing import Dict, Iterable, List, Optional, Tuple

import httpx
from loguru import logger

from standings_site.config.settings import AppSettings
from standings_site.models.standing import StandingRecord
from standings_site.models.team import Team
from standings_site.normalization.normalizer import Normalizer
from standings_site.storage.json_loader import load_json_list


def _distinct(values: Iterable) -> Tuple:
    """Distinct values in first-seen order."""
    return tuple(dict.fromkeys(values))


class TeamCatalog:
    """Read-only lookup of team metadata by code."""

    def __init__(self, teams: Iterable[Team]):
        self._teams: Tuple[Team, ...] = tuple(teams)
        self._by_code: Dict[str, Team] = {}
        for team in self._teams:
            if team.code in self._by_code:
                logger.warning(
                    f"Duplicate team code '{team.code}' in catalog; keeping the first entry."
                )
                continue
            self._by_code[team.code] = team

    @property
    def teams(self) -> Tuple[Team, ...]:
        return self._teams

    @property
    def codes(self) -> frozenset:
        return frozenset(self._by_code)

    def find_team(self, code: str) -> Optional[Team]:
        """Returns the team whose code equals `code` exactly, or None."""
        return self._by_code.get(code)

    def __len__(self) -> int:
        return len(self._teams)


class StandingsRepository:
    """Read-only collection of standing records plus the values derived from it."""

    def __init__(self, records: Iterable[StandingRecord]):
        self._records: Tuple[StandingRecord, ...] = tuple(records)
        self._years: Tuple[int, ...] = _distinct(r.year for r in self._records)
        self._leagues: Tuple[str, ...] = _distinct(r.league for r in self._records)
        self._divisions: Tuple[str, ...] = _distinct(
            r.division for r in self._records
        )

    @property
    def records(self) -> Tuple[StandingRecord, ...]:
        return self._records

    @property
    def years(self) -> Tuple[int, ...]:
        return self._years

    @property
    def leagues(self) -> Tuple[str, ...]:
        return self._leagues

    @property
    def divisions(self) -> Tuple[str, ...]:
        return self._divisions

    def years_descending(self) -> List[int]:
        return sorted(self._years, reverse=True)

    def divisions_for(self, year: int, league: str) -> List[str]:
        """Divisions that have records in the given season and league."""
        return list(
            _distinct(
                r.division
                for r in self._records
                if r.year == year and r.league == league
            )
        )

    def __len__(self) -> int:
        return len(self._records)


class DataStore:
    """Everything a request needs, built once at startup and never mutated."""

    def __init__(self, catalog: TeamCatalog, standings: StandingsRepository):
        self._catalog = catalog
        self._standings = standings

    @property
    def catalog(self) -> TeamCatalog:
        return self._catalog

    @property
    def standings(self) -> StandingsRepository:
        return self._standings

    @classmethod
    def from_raw(cls, raw_teams: List, raw_standings: List) -> "DataStore":
        """Builds a store from decoded JSON lists."""
        normalizer = Normalizer()
        catalog = TeamCatalog(normalizer.normalize_teams(raw_teams))
        records = normalizer.normalize_standings(raw_standings, set(catalog.codes))
        return cls(catalog, StandingsRepository(records))


def load_store(
    app_settings: AppSettings, client: Optional[httpx.Client] = None
) -> DataStore:
    """Loads both datasets from the configured sources.

    Raises:
        DataLoadError: If either source cannot be loaded.
    """
    logger.info(
        f"Loading teams from {app_settings.teams_source} and standings from "
        f"{app_settings.standings_source}"
    )
    raw_teams = load_json_list(
        app_settings.teams_source,
        client=client,
        max_attempts=app_settings.fetch_max_attempts,
        timeout=app_settings.fetch_timeout_seconds,
    )
    raw_standings = load_json_list(
        app_settings.standings_source,
        client=client,
        max_attempts=app_settings.fetch_max_attempts,
        timeout=app_settings.fetch_timeout_seconds,
    )
    store = DataStore.from_raw(raw_teams, raw_standings)
    logger.success(
        f"Data store ready: {len(store.catalog)} teams, {len(store.standings)} records, "
        f"seasons {list(store.standings.years_descending())}"
    )
    return store
