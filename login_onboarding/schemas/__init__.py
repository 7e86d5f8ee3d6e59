"""
Schemas - Result Models

Defines Pydantic models describing onboarding scheduling outcomes.
"""

from login_onboarding.schemas.results import OnboardingResult

__all__ = [
    "OnboardingResult",
]
