"""URL path to route parsing and page titles."""

from typing import List, Sequence
from urllib.parse import unquote

from standings_site.models.routes import (
    HomeRoute,
    NotFoundRoute,
    Route,
    StandingsRoute,
    TeamsRoute,
)

HOME_TITLE = "MLB Standings Home"
TEAMS_TITLE = "All Teams"
STANDINGS_TITLE = "Standings"
DEFAULT_TITLE = "MLB Standings"
NOT_FOUND_TITLE = "404 - Page Not Found"


def split_path(path: str) -> List[str]:
    """Splits a URL path on '/' and drops empty segments."""
    return [part for part in path.split("/") if part != ""]


def split_raw_path(raw_path: str) -> List[str]:
    """Splits a still-encoded path, then decodes each segment.

    Encoded separators such as %2F or %3F stay inside their segment.
    """
    path = raw_path.split("?", 1)[0]
    return [unquote(part) for part in split_path(path)]


def _part(parts: Sequence[str], index: int):
    return parts[index] if len(parts) > index and parts[index] else None


def route_from_parts(parts: Sequence[str]) -> Route:
    parts = tuple(parts)
    if len(parts) == 0 or parts[0] == "":
        return HomeRoute(parts=parts)
    if parts[0] == "teams":
        return TeamsRoute(parts=parts)
    if parts[0] == "standings":
        return StandingsRoute(
            parts=parts,
            year=_part(parts, 1),
            league=_part(parts, 2),
            division=_part(parts, 3),
        )
    return NotFoundRoute(parts=parts)


def parse_route(path: str) -> Route:
    """Maps a URL path (no query string) to a route. Never raises."""
    return route_from_parts(split_path(path))


def parse_raw_route(raw_path: str) -> Route:
    """Like parse_route, for a path whose segments are still percent-encoded."""
    return route_from_parts(split_raw_path(raw_path))


def generate_title(parts: Sequence[str]) -> str:
    """Derives the page title from path segments alone.

    Unmatched paths get the default title here; the page builder replaces it
    with the 404 title.
    """
    if len(parts) == 0 or parts[0] == "":
        return HOME_TITLE
    if parts[0] == "teams":
        return TEAMS_TITLE
    if parts[0] == "standings":
        title = STANDINGS_TITLE
        if _part(parts, 1):
            title += f" - {parts[1]}"
        if _part(parts, 2):
            title += f" {parts[2]}"
        if _part(parts, 3):
            title += f" {parts[3]}"
        return title
    return DEFAULT_TITLE
