import copy
from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient
from loguru import logger

from standings_site.config.settings import AppSettings
from standings_site.storage.store import DataStore
from standings_site.web.app import create_app

RAW_TEAMS: List[Dict[str, Any]] = [
    {"code": "NYY", "name": "Yankees", "city": "New York", "logo": "https://img.test/nyy.svg"},
    {"code": "BOS", "name": "Red Sox", "city": "Boston", "logo": "https://img.test/bos.svg"},
    {"code": "TOR", "name": "Blue Jays", "city": "Toronto", "logo": "https://img.test/tor.svg"},
    {"code": "LAD", "name": "Dodgers", "city": "Los Angeles", "logo": "https://img.test/lad.svg"},
    {"code": "SF", "name": "Giants", "city": "San Francisco", "logo": "https://img.test/sf.svg"},
]

RAW_STANDINGS: List[Dict[str, Any]] = [
    {"year": 2023, "league": "AL", "division": "East", "team": "NYY", "wins": "95", "losses": "67"},
    {"year": 2023, "league": "AL", "division": "East", "team": "BOS", "wins": "78", "losses": "84"},
    {"year": 2023, "league": "AL", "division": "East", "team": "TOR", "wins": "89", "losses": "73"},
    {"year": 2023, "league": "NL", "division": "West", "team": "LAD", "wins": "100", "losses": "62"},
    {"year": 2023, "league": "NL", "division": "West", "team": "SF", "wins": "79", "losses": "83"},
    {"year": 2022, "league": "AL", "division": "East", "team": "NYY", "wins": "99", "losses": "63"},
    {"year": 2022, "league": "NL", "division": "West", "team": "LAD", "wins": "111", "losses": "51"},
    {"year": 2022, "league": "NL", "division": "West", "team": "SF", "wins": "81", "losses": "81"},
]


@pytest.fixture
def raw_teams() -> List[Dict[str, Any]]:
    return copy.deepcopy(RAW_TEAMS)


@pytest.fixture
def raw_standings() -> List[Dict[str, Any]]:
    return copy.deepcopy(RAW_STANDINGS)


@pytest.fixture
def store(raw_teams, raw_standings) -> DataStore:
    return DataStore.from_raw(raw_teams, raw_standings)


@pytest.fixture
def app_settings() -> AppSettings:
    return AppSettings(_env_file=None, stylesheet_url="https://css.test/site.css")


@pytest.fixture
def client(store, app_settings) -> TestClient:
    return TestClient(create_app(store, app_settings))


@pytest.fixture
def log_messages():
    """Collects loguru messages emitted during a test."""
    messages: List[str] = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]), level="DEBUG"
    )
    yield messages
    logger.remove(handler_id)
