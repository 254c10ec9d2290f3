"""
Main entrypoint for the Alumni Search Engine API.

This module assembles the FastAPI application: it sets up logging,
attaches the JSON store, installs the CORS middleware, maps storage
failures on lookups to HTTP 500 and includes the endpoint routers.
``create_app`` builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn alumni_search_api.app.main:app --port 5050
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request

from .api.cors import cors_middleware
from .api.responses import AlumniJSONResponse, json_reply
from .api.router import router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.store import AlumniStore, StoreError
from .schemas.replies import AppError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("Serving alumni from %s", app.state.store.path)
    yield


def create_app(store: Optional[AlumniStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[AlumniStore]
        Store to serve.  When omitted, one is created for
        ``settings.database_path``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the store and
    # routers can log during setup.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        default_response_class=AlumniJSONResponse,
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else AlumniStore()

    app.middleware("http")(cors_middleware)

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> AlumniJSONResponse:
        logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
        return json_reply(AppError(message="Storage failure"), status_code=500)

    app.include_router(router)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
