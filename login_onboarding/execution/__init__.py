"""
Execution Layer - Onboarding Evaluation and Scheduling

Defines the OnboardingPolicyEngine (orchestrator) and the three pure
evaluators it delegates to.
"""

from login_onboarding.execution.context import (
    HookExecutionContext,
    InMemoryStateScheduler,
    NoopDeviceOnboardingHook,
    OnboardingHook,
    StateScheduler,
)
from login_onboarding.execution.credentials import CredentialOnboardingEvaluator, CredentialPlan
from login_onboarding.execution.engine import OnboardingPolicyEngine
from login_onboarding.execution.mfa import MFARequirement, MFARequirementEvaluator
from login_onboarding.execution.user_details import UserDetailOnboardingEvaluator


__all__ = [
    "CredentialOnboardingEvaluator",
    "CredentialPlan",
    "HookExecutionContext",
    "InMemoryStateScheduler",
    "MFARequirement",
    "MFARequirementEvaluator",
    "NoopDeviceOnboardingHook",
    "OnboardingHook",
    "OnboardingPolicyEngine",
    "StateScheduler",
    "UserDetailOnboardingEvaluator",
]
