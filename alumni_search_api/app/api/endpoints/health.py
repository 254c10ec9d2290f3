"""
Liveness endpoint.

``GET /`` answers with a fixed plain-text message so that load
balancers and the frontend can check that the backend is up.  It does
not touch the store.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

LIVENESS_MESSAGE = "Alumni Search Engine Backend Active 🚀"


@router.get("/", response_class=PlainTextResponse)
async def root() -> PlainTextResponse:
    return PlainTextResponse(LIVENESS_MESSAGE)
