"""Entry point for the Alumni Search Engine backend.

Serves the FastAPI application with Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``5050``); the alumni collection is read from
``DATABASE_PATH`` (default ``Database.json`` in the working
directory).

Usage:
    python run.py
"""
import logging

from uvicorn import Config, Server

from alumni_search_api.app.core.config import settings
from alumni_search_api.app.core.logging_config import setup_logging
from alumni_search_api.app.main import app


def main() -> None:
    """Start the API server and block until it stops."""
    setup_logging(settings.log_level, settings.log_file or None)
    logging.getLogger(__name__).info("Backend server running on port %s", settings.port)
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        # keep the root handlers from setup_logging for uvicorn's loggers
        log_config=None,
    )
    Server(config).run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
