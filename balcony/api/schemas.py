"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from balcony.models import BalconyParams, BalconyLayout, GenerationConfig


class LayoutRequest(BaseModel):
    """Request body for the /layout endpoint."""
    params: BalconyParams = BalconyParams()
    preset_id: str | None = None
    config: GenerationConfig = GenerationConfig()


class LayoutResponse(BaseModel):
    """Response from the /layout endpoint."""
    layout: BalconyLayout
    params: BalconyParams   # As used, after preset sanitising
    rule_count: int


class RuleInfo(BaseModel):
    id: str
    name: str


class ErrorResponse(BaseModel):
    detail: str
    error: str
