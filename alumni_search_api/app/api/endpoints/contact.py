"""
Contact lookup endpoint.

``GET /contact?id=<n>`` returns the name, email and phone of the first
record carrying that id.  Problems with the request are reported in
the body with status 200:

* ``{"Error": "Missing ID parameter"}`` when ``id`` is absent or blank;
* ``{"Error": "Invalid ID"}`` when ``id`` is not an integer;
* ``{"Error": "Alumni not found"}`` when no record matches.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from alumni_search_api.app.api.deps import get_store
from alumni_search_api.app.api.responses import AlumniJSONResponse, json_reply
from alumni_search_api.app.core.store import AlumniStore
from alumni_search_api.app.schemas.alumni import format_contact
from alumni_search_api.app.schemas.replies import AppError
from alumni_search_api.app.services.search_service import SearchService, parse_int

router = APIRouter()


@router.get("/contact")
async def get_contact(
    alumni_id: Optional[str] = Query(None, alias="id"),
    store: AlumniStore = Depends(get_store),
) -> AlumniJSONResponse:
    if alumni_id is None or not alumni_id.strip():
        return json_reply(AppError(message="Missing ID parameter"))
    parsed = parse_int(alumni_id)
    if parsed is None:
        return json_reply(AppError(message="Invalid ID"))
    record = await SearchService.find_by_id(store, parsed)
    if record is None:
        return json_reply(AppError(message="Alumni not found"))
    return json_reply(format_contact(record))
