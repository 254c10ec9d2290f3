"""
Endpoints for adding alumni.

``POST /add`` takes one JSON object and ``POST /add-bulk`` a JSON
array of objects.  Objects use the same keys as the records returned
by the API (``Name``, ``Department`` ...); lowercase names are
accepted as well.  Ids are assigned by the server.

Both answer ``{"Status": "Success"}`` or ``{"Status": "Error"}``.  An
error is returned for a body that cannot be parsed (including the
non-standard ``NaN``/``Infinity`` literals) and for a collection that
cannot be read or written.  The cause is logged and not returned to
the client.
"""

import logging

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from alumni_search_api.app.api.deps import get_store
from alumni_search_api.app.api.responses import AlumniJSONResponse, json_reply
from alumni_search_api.app.core.store import AlumniStore, StoreError, loads_strict
from alumni_search_api.app.schemas.replies import StatusReply
from alumni_search_api.app.services.alumni_service import AlumniService, parse_many, parse_single

logger = logging.getLogger(__name__)

router = APIRouter()


async def _read_json(request: Request):
    raw = await request.body()
    return loads_strict(raw.decode("utf-8"))


@router.post("/add")
async def add_alumni(request: Request, store: AlumniStore = Depends(get_store)) -> AlumniJSONResponse:
    try:
        record = parse_single(await _read_json(request))
    except (ValueError, ValidationError):
        logger.exception("Rejected /add payload")
        return json_reply(StatusReply.error())
    try:
        await AlumniService.add_alumni(store, record)
    except StoreError:
        logger.exception("Could not store /add payload")
        return json_reply(StatusReply.error())
    return json_reply(StatusReply.success())


@router.post("/add-bulk")
async def add_alumni_bulk(request: Request, store: AlumniStore = Depends(get_store)) -> AlumniJSONResponse:
    try:
        records = parse_many(await _read_json(request))
    except (ValueError, ValidationError):
        logger.exception("Rejected /add-bulk payload")
        return json_reply(StatusReply.error())
    try:
        await AlumniService.add_many(store, records)
    except StoreError:
        logger.exception("Could not store /add-bulk payload")
        return json_reply(StatusReply.error())
    return json_reply(StatusReply.success())
