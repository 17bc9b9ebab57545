"""Pydantic DTOs for the travel map endpoints."""

from typing import Any

from pydantic import BaseModel, Field


class TravelRecordsResponse(BaseModel):
    success: bool = True
    data: Any = Field(default_factory=list)
    visible: bool = False


class TravelRecordsUpdate(BaseModel):
    """``data`` is either a JSON string or an already-decoded list of places."""

    data: Any = None
    visible: bool = True
