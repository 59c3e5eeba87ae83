from standings_site.models.enums import PageKind
from standings_site.routing.router import generate_title, parse_route
from standings_site.storage.store import DataStore
from standings_site.web import pages
from standings_site.web.pages import PageFailure, PageSuccess, build_page


def _build(path, store):
    route = parse_route(path)
    return build_page(route, generate_title(route.parts), store)


def test_home_page_lists_seasons_leagues_and_divisions(store):
    result = _build("/", store)

    assert isinstance(result, PageSuccess)
    page = result.page
    assert page.kind == PageKind.HOME
    assert page.title == "MLB Standings Home"
    seasons = page.context["seasons"]
    assert [s["year"] for s in seasons] == [2023, 2022]
    assert seasons[0]["leagues"] == [
        {"name": "AL", "divisions": ["East"]},
        {"name": "NL", "divisions": ["West"]},
    ]


def test_teams_page(store):
    page = _build("/teams", store).page
    assert page.kind == PageKind.TEAMS
    assert page.context["teams"] == store.catalog.teams


def test_standings_page_rows(store):
    page = _build("/standings/2022", store).page
    assert page.kind == PageKind.STANDINGS
    assert page.title == "Standings - 2022"
    assert [row.team for row in page.context["rows"]] == ["LAD", "NYY", "SF"]


def test_single_record_scenario():
    store = DataStore.from_raw(
        [{"code": "NYY", "name": "Yankees", "city": "New York", "logo": "https://img.test/nyy.svg"}],
        [{"team": "NYY", "wins": "95", "losses": "67", "year": 2023, "league": "AL", "division": "East"}],
    )
    rows = _build("/standings/2023/AL/East", store).page.context["rows"]

    assert len(rows) == 1
    assert rows[0].wins == 95
    assert rows[0].losses == 67
    assert rows[0].name == "Yankees"


def test_not_found_title_is_overridden(store):
    page = _build("/bogus/path", store).page
    assert page.kind == PageKind.NOT_FOUND
    assert page.title == "404 - Page Not Found"
    assert page.context["message"] == "Page not found"


def test_errors_become_failures(store, monkeypatch, log_messages):
    def boom(*args, **kwargs):
        raise RuntimeError("malformed query")

    monkeypatch.setattr(pages, "build_standings_data", boom)
    result = _build("/standings/2023", store)

    assert isinstance(result, PageFailure)
    assert result.title == "Standings - 2023"
    assert isinstance(result.error, RuntimeError)
    assert result.cause == "RuntimeError: malformed query"
    assert any("Failed to build standings page" in m for m in log_messages)
