from enum import Enum


class PageKind(str, Enum):
    HOME = "home"
    TEAMS = "teams"
    STANDINGS = "standings"
    NOT_FOUND = "not_found"
    ERROR = "error"
