"""
Search endpoint.

``GET /search`` filters the collection by any combination of ``id``,
``name``, ``department``, ``year``, ``location`` and ``company``.
Text filters are case-insensitive substring matches; ``id`` and
``year`` must match exactly.  A record is returned only if it
satisfies every filter supplied.  With no filters, every valid record
is returned.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from alumni_search_api.app.api.deps import get_store
from alumni_search_api.app.api.responses import AlumniJSONResponse, json_reply
from alumni_search_api.app.core.store import AlumniStore
from alumni_search_api.app.schemas.alumni import format_alumni
from alumni_search_api.app.services.search_service import SearchFilters, SearchService

router = APIRouter()


@router.get("/search")
async def search_alumni(
    alumni_id: Optional[str] = Query(None, alias="id"),
    name: Optional[str] = Query(None),
    department: Optional[str] = Query(None),
    year: Optional[str] = Query(None),
    location: Optional[str] = Query(None, description="Matched against the address"),
    company: Optional[str] = Query(None),
    store: AlumniStore = Depends(get_store),
) -> AlumniJSONResponse:
    filters = SearchFilters(
        id=alumni_id,
        name=name,
        department=department,
        year=year,
        location=location,
        company=company,
    )
    records = await SearchService.search(store, filters)
    return json_reply([format_alumni(r) for r in records])
