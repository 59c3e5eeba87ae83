from typing import Any, Dict, Iterable, List, Set

from loguru import logger
from pydantic import ValidationError

from standings_site.models.standing import StandingRecord
from standings_site.models.team import Team


class NormalizationError(Exception):
    """Custom exception for data normalization errors."""

    pass


class Normalizer:
    """Turns raw JSON entries from the static datasets into validated models."""

    def normalize_teams(self, raw_teams: Iterable[Any]) -> List[Team]:
        """Validates raw team entries, skipping the ones that cannot be used."""
        teams: List[Team] = []
        for index, raw in enumerate(raw_teams):
            try:
                teams.append(Team.model_validate(self._as_mapping(raw, index)))
            except (NormalizationError, ValidationError) as e:
                logger.warning(f"Skipping team entry #{index}: {e}")
        logger.debug(f"Normalized {len(teams)} team(s).")
        return teams

    def normalize_standings(
        self, raw_standings: Iterable[Any], known_codes: Set[str]
    ) -> List[StandingRecord]:
        """Validates raw standing entries.

        Unparseable wins/losses are kept as None and unknown team codes are
        kept as-is; both are only reported.
        """
        records: List[StandingRecord] = []
        for index, raw in enumerate(raw_standings):
            try:
                mapping = self._as_mapping(raw, index)
                record = StandingRecord.model_validate(mapping)
            except (NormalizationError, ValidationError) as e:
                logger.warning(f"Skipping standings entry #{index}: {e}")
                continue

            if not record.has_valid_counts:
                logger.warning(
                    f"Non-numeric wins/losses for {record.team} in {record.year} "
                    f"(wins={mapping.get('wins')!r}, losses={mapping.get('losses')!r}); "
                    "value will display as NaN."
                )
            if record.team not in known_codes:
                logger.warning(
                    f"Standings entry #{index} references unknown team code '{record.team}'."
                )
            records.append(record)

        logger.debug(f"Normalized {len(records)} standings record(s).")
        return records

    @staticmethod
    def _as_mapping(raw: Any, index: int) -> Dict[str, Any]:
        if not isinstance(raw, dict):
            raise NormalizationError(
                f"Entry #{index} is a {type(raw).__name__}, expected an object."
            )
        return raw
