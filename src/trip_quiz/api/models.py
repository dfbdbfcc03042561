"""Pydantic models for quiz API payloads."""

from typing import Any

from pydantic import BaseModel, Field


class SelectVenueRequest(BaseModel):
    """Body of a venue selection."""

    venue_id: str = Field(min_length=1)


class ScreenResponse(BaseModel):
    """Screen identifier with its render data."""

    screen: str
    view: dict[str, Any] | None = None


class ErrorResponse(BaseModel):
    """Error body returned for rejected actions."""

    error: str
    detail: str
