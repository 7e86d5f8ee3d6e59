"""
API Layer - Request/Response Schemas

Pydantic models for API request and response validation.
"""

from typing import Optional, Any

from pydantic import BaseModel, Field


class ScheduleRequest(BaseModel):
    stash: dict[str, Any] = Field(default_factory=dict)


class ScheduleResponse(BaseModel):
    scheduled_states: list[str]
    flow_error: Optional[str] = None
    already_scheduled: bool
    stash: dict[str, Any]
    # Set when the device onboarding hook failed (HTTP 502).
    detail: Optional[str] = None
