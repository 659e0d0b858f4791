"""Pydantic DTO documenting the TMF error envelope in OpenAPI."""

from pydantic import Field

from .common import TMFModel


class ErrorResponse(TMFModel):
    """Body of every non-2xx response."""

    code: str = Field(..., examples=["60"])
    reason: str = Field(..., examples=["Not Found"])
    message: str | None = Field(None, examples=["Catalog with id 42 not found"])
    status: str = Field(..., examples=["404"])
    reference_error: str | None = None
    type: str = Field("Error", alias="@type")
