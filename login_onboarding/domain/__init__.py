"""
Domain Layer - Static Policy Models

Defines the tenant onboarding policy and the catalog of flow states.
"""

from login_onboarding.domain.models import (
    AcquirePolicy,
    EmailConfig,
    FlowErrorCode,
    MFAConfig,
    PasskeyConfig,
    PasswordConfig,
    PolicyConfig,
    SecurityKeysConfig,
    StateName,
    TOTPConfig,
    UsernameConfig,
)

__all__ = [
    "AcquirePolicy",
    "EmailConfig",
    "FlowErrorCode",
    "MFAConfig",
    "PasskeyConfig",
    "PasswordConfig",
    "PolicyConfig",
    "SecurityKeysConfig",
    "StateName",
    "TOTPConfig",
    "UsernameConfig",
]
