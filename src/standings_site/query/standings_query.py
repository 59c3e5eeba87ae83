from typing import Any, Iterable, List, Optional, Tuple, Union

from loguru import logger

from standings_site.models.data_models import RenderRow
from standings_site.models.standing import StandingRecord
from standings_site.storage.store import StandingsRepository, TeamCatalog
from standings_site.utils.misc_utils import is_blank


def _matches(value: Any, wanted: Any) -> bool:
    return is_blank(wanted) or value == wanted


def filter_standings(
    repository: StandingsRepository,
    year: Union[int, str, None] = None,
    league: Optional[str] = None,
    division: Optional[str] = None,
) -> List[StandingRecord]:
    """
    Selects the records matching every given filter.

    A missing or empty filter matches everything on its dimension; a given
    filter must equal the record's field exactly.

    Args:
        repository: The standings to search.
        year: Season to keep. A non-int value never matches.
        league: League to keep (e.g. "AL").
        division: Division to keep (e.g. "East").

    Returns:
        The matching records in repository order.
    """
    return [
        record
        for record in repository.records
        if _matches(record.year, year)
        and _matches(record.league, league)
        and _matches(record.division, division)
    ]


def _wins_descending(row: RenderRow) -> Tuple[bool, int]:
    # Rows without a numeric wins value go last
    if row.wins is None:
        return (True, 0)
    return (False, -row.wins)


def build_standings_data(
    records: Iterable[StandingRecord], catalog: TeamCatalog
) -> List[RenderRow]:
    """
    Joins records with their teams and orders them by wins, highest first.

    Every record yields a row; an unknown team code gives a row without team
    fields. The sort is stable, so equal wins keep their input order.
    """
    rows = [RenderRow.join(record, catalog.find_team(record.team)) for record in records]
    unresolved = sum(1 for row in rows if not row.resolved)
    if unresolved:
        logger.debug(f"{unresolved} of {len(rows)} standings rows have no team match.")
    return sorted(rows, key=_wins_descending)
