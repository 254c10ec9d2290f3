"""FastAPI dependencies."""

from fastapi import Request

from alumni_search_api.app.core.store import AlumniStore


def get_store(request: Request) -> AlumniStore:
    """Return the store attached to the running application."""
    return request.app.state.store
