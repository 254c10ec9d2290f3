"""
Statistics endpoint.

``GET /stats`` returns totals and grouped counts for the home page;
see ``StatisticsService.compute_stats`` for the rules.
"""

from fastapi import APIRouter, Depends

from alumni_search_api.app.api.deps import get_store
from alumni_search_api.app.api.responses import AlumniJSONResponse, json_reply
from alumni_search_api.app.core.store import AlumniStore
from alumni_search_api.app.services.statistics_service import StatisticsService

router = APIRouter()


@router.get("/stats")
async def get_stats(store: AlumniStore = Depends(get_store)) -> AlumniJSONResponse:
    report = await StatisticsService.overview(store)
    return json_reply(report)
