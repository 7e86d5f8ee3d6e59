"""
Login Onboarding Policy Engine

Decides which additional authentication and profile states a user must pass
through after a successful login, and in which order.
"""

from login_onboarding.domain import (
    AcquirePolicy,
    FlowErrorCode,
    PolicyConfig,
    StateName,
)
from login_onboarding.state import (
    InMemoryStash,
    LoginSnapshot,
    Stash,
    StashPath,
)
from login_onboarding.schemas import OnboardingResult
from login_onboarding.execution import (
    HookExecutionContext,
    OnboardingHook,
    OnboardingPolicyEngine,
)

__all__ = [
    # Domain Layer
    "AcquirePolicy",
    "FlowErrorCode",
    "PolicyConfig",
    "StateName",
    # State Layer
    "InMemoryStash",
    "LoginSnapshot",
    "Stash",
    "StashPath",
    # Schemas
    "OnboardingResult",
    # Execution Layer
    "HookExecutionContext",
    "OnboardingHook",
    "OnboardingPolicyEngine",
]
