# src/standings_site/models/team.py
from pydantic import BaseModel, ConfigDict


class Team(BaseModel):
    """Represents a team in the catalog, keyed by its code (e.g. NYY)."""

    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    city: str
    logo: str  # Image URL
