"""
Download endpoint.

``GET /download?id=<n>`` returns every record with that id (ids are
not guaranteed unique); otherwise ``GET /download?batch=<year>``
returns every record of that graduation year.  ``id`` wins when both
are given.  With neither, or with a value that is not an integer, the
result is an empty list.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from alumni_search_api.app.api.deps import get_store
from alumni_search_api.app.api.responses import AlumniJSONResponse, json_reply
from alumni_search_api.app.core.store import AlumniStore
from alumni_search_api.app.schemas.alumni import AlumniRecord, format_alumni
from alumni_search_api.app.services.search_service import SearchService, parse_int

router = APIRouter()


@router.get("/download")
async def download_alumni(
    alumni_id: Optional[str] = Query(None, alias="id"),
    batch: Optional[str] = Query(None),
    store: AlumniStore = Depends(get_store),
) -> AlumniJSONResponse:
    records: List[AlumniRecord] = []
    if alumni_id and alumni_id.strip():
        parsed = parse_int(alumni_id)
        if parsed is not None:
            records = await SearchService.find_all_by_id(store, parsed)
    elif batch and batch.strip():
        parsed = parse_int(batch)
        if parsed is not None:
            records = await SearchService.find_by_year(store, parsed)
    return json_reply([format_alumni(r) for r in records])
