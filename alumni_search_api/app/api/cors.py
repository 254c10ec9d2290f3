"""
CORS handling.

Every response carries the same permissive CORS headers.  Preflight
``OPTIONS`` requests to any path are answered here with an empty 204
and never reach the routers.
"""

from fastapi import Request, Response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


async def cors_middleware(request: Request, call_next) -> Response:
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=CORS_HEADERS)
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response
