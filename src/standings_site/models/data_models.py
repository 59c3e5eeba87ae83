from typing import Optional

from pydantic import BaseModel, ConfigDict

from standings_site.models.standing import StandingRecord
from standings_site.models.team import Team

NOT_A_NUMBER = "NaN"


class RenderRow(BaseModel):
    """A standing record joined with its team, ready for display."""

    model_config = ConfigDict(frozen=True)  # Make instances immutable

    # Standing fields
    year: int
    league: str
    division: str
    team: str
    wins: Optional[int] = None
    losses: Optional[int] = None

    # Team fields, absent when the team code does not resolve
    code: Optional[str] = None
    name: Optional[str] = None
    city: Optional[str] = None
    logo: Optional[str] = None

    @classmethod
    def join(cls, record: StandingRecord, team: Optional[Team]) -> "RenderRow":
        """Builds a row from a record and its (possibly missing) team.

        Standing fields are applied last so they win over team fields.
        """
        fields = team.model_dump() if team is not None else {}
        fields.update(
            year=record.year,
            league=record.league,
            division=record.division,
            team=record.team,
            wins=record.wins,
            losses=record.losses,
        )
        return cls(**fields)

    @property
    def resolved(self) -> bool:
        return self.code is not None

    @property
    def wins_display(self) -> str:
        return NOT_A_NUMBER if self.wins is None else str(self.wins)

    @property
    def losses_display(self) -> str:
        return NOT_A_NUMBER if self.losses is None else str(self.losses)
