"""
Service Layer Exceptions

Custom exceptions raised while scheduling login onboarding.
"""


class OnboardingError(Exception):
    """Base class for all onboarding failures."""
    pass


class StashWriteError(OnboardingError):
    """Raised when a value cannot be persisted to the flow stash."""
    pass


class OnboardingScheduleError(OnboardingError):
    """Raised when the engine cannot commit its idempotency flag."""
    pass


class HookError(OnboardingError):
    """Raised by a delegated hook that failed to complete."""
    pass


class PolicyConfigError(OnboardingError):
    """Raised when a policy file cannot be read or validated."""
    pass
