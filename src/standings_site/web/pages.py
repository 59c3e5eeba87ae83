# src/standings_site/web/pages.py
from typing import Any, Dict, List, Union

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from standings_site.models.enums import PageKind
from standings_site.models.routes import (
    HomeRoute,
    NotFoundRoute,
    Route,
    StandingsRoute,
    TeamsRoute,
)
from standings_site.query.standings_query import (
    build_standings_data,
    filter_standings,
)
from standings_site.routing.router import NOT_FOUND_TITLE
from standings_site.storage.store import DataStore

ERROR_TITLE = "Error"
ERROR_MESSAGE = "An error occurred while processing your request."
NOT_FOUND_MESSAGE = "Page not found"


class Page(BaseModel):
    """Title plus the data a template needs to draw one page."""

    model_config = ConfigDict(frozen=True)

    kind: PageKind
    title: str
    context: Dict[str, Any] = Field(default_factory=dict)


class PageSuccess(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: Page


class PageFailure(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    title: str
    error: Exception

    @property
    def cause(self) -> str:
        return f"{type(self.error).__name__}: {self.error}"


PageResult = Union[PageSuccess, PageFailure]


def _home_sections(store: DataStore) -> List[Dict[str, Any]]:
    standings = store.standings
    return [
        {
            "year": year,
            "leagues": [
                {"name": league, "divisions": standings.divisions_for(year, league)}
                for league in standings.leagues
            ],
        }
        for year in standings.years_descending()
    ]


def _build(route: Route, title: str, store: DataStore) -> Page:
    if isinstance(route, HomeRoute):
        return Page(
            kind=PageKind.HOME,
            title=title,
            context={"seasons": _home_sections(store)},
        )
    if isinstance(route, TeamsRoute):
        return Page(
            kind=PageKind.TEAMS, title=title, context={"teams": store.catalog.teams}
        )
    if isinstance(route, StandingsRoute):
        records = filter_standings(
            store.standings, route.season, route.league, route.division
        )
        rows = build_standings_data(records, store.catalog)
        return Page(kind=PageKind.STANDINGS, title=title, context={"rows": rows})
    if isinstance(route, NotFoundRoute):
        return Page(
            kind=PageKind.NOT_FOUND,
            title=NOT_FOUND_TITLE,
            context={"message": NOT_FOUND_MESSAGE},
        )
    raise TypeError(f"Unhandled route type: {type(route).__name__}")


def build_page(route: Route, title: str, store: DataStore) -> PageResult:
    """
    Computes the page for a route.

    Errors never escape: they are logged and returned as a PageFailure so the
    caller only has to turn them into an error response.
    """
    try:
        page = _build(route, title, store)
    except Exception as e:
        logger.exception(
            f"Failed to build {route.kind.value} page for /{'/'.join(route.parts)}: {e}"
        )
        return PageFailure(title=title, error=e)
    logger.debug(f"Built {page.kind.value} page '{page.title}'")
    return PageSuccess(page=page)
