"""
Reply envelopes for application-level outcomes.

The service reports lookup and validation problems inside a normal
HTTP 200 response rather than through status codes: query endpoints
answer ``{"Error": "<message>"}`` and mutation endpoints answer
``{"Status": "Success"}`` or ``{"Status": "Error"}``.
"""

from pydantic import BaseModel, ConfigDict, Field

STATUS_SUCCESS = "Success"
STATUS_ERROR = "Error"


class AppError(BaseModel):
    """An application error carried in a 200 response."""

    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(..., alias="Error")


class StatusReply(BaseModel):
    """Outcome of an add operation."""

    model_config = ConfigDict(populate_by_name=True)

    status: str = Field(..., alias="Status")

    @classmethod
    def success(cls) -> "StatusReply":
        return cls(status=STATUS_SUCCESS)

    @classmethod
    def error(cls) -> "StatusReply":
        return cls(status=STATUS_ERROR)
