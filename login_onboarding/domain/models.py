"""
Domain Layer - Static Policy Models

This module defines the tenant policy that drives login onboarding, and the
closed catalog of flow states the engine may schedule. The policy is loaded
once per process and never mutated, so every model here is frozen.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class AcquirePolicy(str, Enum):
    """
    Governs whether a credential is collected during login.

    ALWAYS: Creation is required.
    CONDITIONAL: Creation is offered, but the user may skip it.
    NEVER: The user is never prompted.
    """
    ALWAYS = "always"
    CONDITIONAL = "conditional"
    NEVER = "never"


class StateName(str, Enum):
    """States the host flow runtime knows how to present."""

    LOGIN_OTP = "login_otp"
    LOGIN_SECURITY_KEY = "login_security_key"
    LOGIN_PASSWORD_RECOVERY = "login_password_recovery"
    ONBOARDING_CREATE_PASSKEY = "onboarding_create_passkey"
    PASSWORD_CREATION = "password_creation"
    CREDENTIAL_ONBOARDING_CHOOSER = "credential_onboarding_chooser"
    ONBOARDING_USERNAME = "onboarding_username"
    ONBOARDING_EMAIL = "onboarding_email"
    MFA_TRUST_DEVICE = "mfa_trust_device"  # scheduled by the trust-device hook
    ERROR = "error"
    SUCCESS = "success"


class FlowErrorCode(str, Enum):
    """Terminal error codes rendered by the host's error state."""

    PLATFORM_AUTHENTICATOR_REQUIRED = "platform_authenticator_required"


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class TOTPConfig(_FrozenModel):
    enabled: bool = True


class SecurityKeysConfig(_FrozenModel):
    enabled: bool = True


class MFAConfig(_FrozenModel):
    enabled: bool = True
    totp: TOTPConfig = Field(default_factory=TOTPConfig)
    security_keys: SecurityKeysConfig = Field(default_factory=SecurityKeysConfig)


class PasskeyConfig(_FrozenModel):
    """
    Attributes:
        enabled: Passkeys are offered by the tenant. They are only usable
            when the client also reports WebAuthn support.
        optional: The user may end up without a passkey. Only affects the
            order in which both credentials are requested.
        acquire_on_login: Whether to collect a passkey after login.
    """
    enabled: bool = True
    optional: bool = True
    acquire_on_login: AcquirePolicy = AcquirePolicy.ALWAYS


class PasswordConfig(_FrozenModel):
    enabled: bool = True
    optional: bool = True
    acquire_on_login: AcquirePolicy = AcquirePolicy.CONDITIONAL


class UsernameConfig(_FrozenModel):
    enabled: bool = False
    acquire_on_login: bool = False


class EmailConfig(_FrozenModel):
    enabled: bool = True
    acquire_on_login: bool = False


class PolicyConfig(_FrozenModel):
    """
    The complete onboarding policy of a tenant.
    """
    mfa: MFAConfig = Field(default_factory=MFAConfig)
    passkey: PasskeyConfig = Field(default_factory=PasskeyConfig)
    password: PasswordConfig = Field(default_factory=PasswordConfig)
    username: UsernameConfig = Field(default_factory=UsernameConfig)
    email: EmailConfig = Field(default_factory=EmailConfig)
