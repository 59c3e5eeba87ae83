import sys

# --- Settings/Logging ---
from standings_site.logging.setup import setup_logging
from standings_site.config.settings import settings

setup_logging()

from loguru import logger

# --- End Settings/Logging ---

import uvicorn
from rich import print
from rich.panel import Panel

from standings_site.storage.json_loader import DataLoadError
from standings_site.storage.store import load_store
from standings_site.web.app import create_app


def main() -> None:
    """Main entry point for the application."""
    logger.info("Starting MLB Standings site")

    try:
        store = load_store(settings)
    except DataLoadError as e:
        logger.critical(f"Could not load static data: {e}")
        sys.exit(1)

    app = create_app(store, settings)

    print(
        Panel(
            f"[bold]{len(store.catalog)}[/bold] teams, "
            f"[bold]{len(store.standings)}[/bold] standings records\n"
            f"Serving on [cyan]http://{settings.host}:{settings.port}/[/cyan]",
            title="MLB Standings",
        )
    )

    # log_config=None keeps uvicorn on the intercepted standard logging
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Unhandled exception in main execution: {e}")
        sys.exit(1)
