# src/standings_site/models/standing.py
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from standings_site.utils.misc_utils import parse_leading_int


class StandingRecord(BaseModel):
    """One team's record for one season, as stored in the standings dataset."""

    model_config = ConfigDict(frozen=True)

    year: int
    league: str
    division: str
    team: str = Field(..., description="Foreign key into Team.code.")
    # Stored as strings in the source data; None means "not a number"
    wins: Optional[int] = None
    losses: Optional[int] = None

    @field_validator("wins", "losses", mode="before")
    @classmethod
    def _parse_count(cls, value: Any) -> Optional[int]:
        return parse_leading_int(value)

    @computed_field  # type: ignore[misc]
    @property
    def has_valid_counts(self) -> bool:
        return self.wins is not None and self.losses is not None
