"""
Response helpers shared by all endpoints.

Every JSON reply, including application errors, is sent with status
200 and ``application/json; charset=UTF-8``.  Pydantic models are
dumped by alias so the external key names are used.
"""

import json
from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel


class AlumniJSONResponse(JSONResponse):
    """JSON response with an explicit charset and indented output."""

    media_type = "application/json; charset=UTF-8"

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, allow_nan=False, indent=2).encode("utf-8")


def json_reply(content: Any, status_code: int = 200) -> AlumniJSONResponse:
    """Wrap ``content`` (a model, dict or list) in an ``AlumniJSONResponse``."""
    if isinstance(content, BaseModel):
        content = content.model_dump(by_alias=True)
    return AlumniJSONResponse(content=content, status_code=status_code)
