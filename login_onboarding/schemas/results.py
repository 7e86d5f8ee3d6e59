"""
Schemas - Onboarding Results

This module defines the Pydantic model describing the outcome of one
onboarding scheduling pass, as handed back to hosts and API clients.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ..domain.models import FlowErrorCode, StateName


class OnboardingResult(BaseModel):
    scheduled_states: List[StateName] = Field(
        default_factory=list,
        description="States appended to the flow queue, in presentation order."
    )
    flow_error: Optional[FlowErrorCode] = Field(
        None,
        description="Terminal error code set for the host's error state, if any."
    )
    already_scheduled: bool = Field(
        False,
        description="True when the flow had been scheduled before and this pass was a no-op."
    )
    stash: Dict[str, Any] = Field(
        default_factory=dict,
        description="The flow stash after scheduling."
    )
    hook_error: Optional[str] = Field(
        None,
        description="Set when the device onboarding hook failed. Scheduling stopped before 'success', but the stash already carries the idempotency flag."
    )
