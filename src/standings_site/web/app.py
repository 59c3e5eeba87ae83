"""
MLB Standings site: FastAPI application.

Every GET path goes through one handler that parses the route, builds the
page from the in-memory DataStore and renders it with Jinja2. Pages are
rendered to a full string before the response starts, so a failure can still
become a clean 500 page.
"""

import os
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from loguru import logger
from starlette.templating import Jinja2Templates

from standings_site.config.settings import AppSettings, settings
from standings_site.models.enums import PageKind
from standings_site.models.routes import Route
from standings_site.routing.router import generate_title, parse_raw_route, parse_route
from standings_site.storage.store import DataStore
from standings_site.web.pages import (
    ERROR_MESSAGE,
    ERROR_TITLE,
    Page,
    PageFailure,
    build_page,
)

TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "templates")
templates = Jinja2Templates(directory=TEMPLATES_DIR)

FALLBACK_ERROR_HTML = (
    "<!doctype html><html><head><title>Error</title></head><body>"
    "<a href='/'>Home</a><br/><h1>Error</h1>"
    f"<p>{ERROR_MESSAGE}</p></body></html>"
)

TEMPLATES_BY_KIND = {
    PageKind.HOME: "home.html",
    PageKind.TEAMS: "teams.html",
    PageKind.STANDINGS: "standings.html",
    PageKind.NOT_FOUND: "not_found.html",
    PageKind.ERROR: "error.html",
}


def _render(request: Request, page: Page, app_settings: AppSettings) -> HTMLResponse:
    status_code = 200
    if page.kind == PageKind.NOT_FOUND:
        status_code = app_settings.not_found_status_code
    elif page.kind == PageKind.ERROR:
        status_code = 500
    # TemplateResponse renders eagerly, so template errors surface here
    return templates.TemplateResponse(
        request,
        TEMPLATES_BY_KIND[page.kind],
        {
            "title": page.title,
            "stylesheet_url": app_settings.stylesheet_url,
            **page.context,
        },
        status_code=status_code,
    )


def _error_response(request: Request, app_settings: AppSettings) -> HTMLResponse:
    page = Page(
        kind=PageKind.ERROR, title=ERROR_TITLE, context={"message": ERROR_MESSAGE}
    )
    try:
        return _render(request, page, app_settings)
    except Exception as e:
        logger.exception(f"Error page template failed, using fallback: {e}")
        return HTMLResponse(FALLBACK_ERROR_HTML, status_code=500)


def _route_for(request: Request) -> Route:
    raw_path = request.scope.get("raw_path")
    if raw_path:
        return parse_raw_route(raw_path.decode("utf-8", "replace"))
    return parse_route(request.url.path)


def create_app(store: DataStore, app_settings: Optional[AppSettings] = None) -> FastAPI:
    """Builds the site around an already loaded DataStore."""
    app_settings = app_settings or settings
    app = FastAPI(
        title="MLB Standings",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.store = store
    app.state.settings = app_settings

    @app.get("/{path:path}", response_class=HTMLResponse)
    async def serve(request: Request, path: str):
        route = _route_for(request)
        title = generate_title(route.parts)

        result = build_page(route, title, store)
        if isinstance(result, PageFailure):
            logger.error(f"Serving error page for {request.url.path}: {result.cause}")
            return _error_response(request, app_settings)

        try:
            return _render(request, result.page, app_settings)
        except Exception as e:
            logger.exception(f"Error rendering {request.url.path}: {e}")
            return _error_response(request, app_settings)

    return app
