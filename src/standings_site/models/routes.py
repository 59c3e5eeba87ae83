# src/standings_site/models/routes.py
import re
from typing import Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

from .enums import PageKind

_INTEGER = re.compile(r"-?[0-9]+")


class _Route(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Non-empty path segments the route was parsed from
    parts: Tuple[str, ...] = ()


class HomeRoute(_Route):
    kind: Literal[PageKind.HOME] = PageKind.HOME


class TeamsRoute(_Route):
    kind: Literal[PageKind.TEAMS] = PageKind.TEAMS


class StandingsRoute(_Route):
    kind: Literal[PageKind.STANDINGS] = PageKind.STANDINGS

    year: Optional[str] = None
    league: Optional[str] = None
    division: Optional[str] = None

    @property
    def season(self) -> Union[int, str, None]:
        """The year segment as an int when it is written as one, otherwise unchanged.

        Only canonical integers convert ("2023", not "02023" or "+2023"), so the
        filter always agrees with the title. Anything else stays a string and
        can never equal a record's integer year.
        """
        if not self.year:
            return None
        if _INTEGER.fullmatch(self.year) and str(int(self.year)) == self.year:
            return int(self.year)
        return self.year


class NotFoundRoute(_Route):
    kind: Literal[PageKind.NOT_FOUND] = PageKind.NOT_FOUND


Route = Union[HomeRoute, TeamsRoute, StandingsRoute, NotFoundRoute]
