from uuid import UUID

import pytest

from login_onboarding.domain.models import (
    AcquirePolicy,
    EmailConfig,
    MFAConfig,
    PasskeyConfig,
    PasswordConfig,
    PolicyConfig,
    SecurityKeysConfig,
    TOTPConfig,
    UsernameConfig,
)
from login_onboarding.execution.context import HookExecutionContext, InMemoryStateScheduler
from login_onboarding.services.device_trust import DeviceTrustService
from login_onboarding.state.stash import InMemoryStash, StashPath

USER_ID = "6f1c2a3e-8d2b-4b7a-9c1e-0a2b3c4d5e6f"


class FakeDeviceTrust(DeviceTrustService):
    def __init__(self, trusted: bool = False):
        self.trusted = trusted
        self.calls = []

    def check_device_trust(self, user_id: UUID) -> bool:
        self.calls.append(user_id)
        return self.trusted


def make_policy(
    mfa=True,
    totp=True,
    security_keys=True,
    passkey_enabled=True,
    passkey_optional=True,
    passkey_acquire=AcquirePolicy.NEVER,
    password_enabled=True,
    password_optional=True,
    password_acquire=AcquirePolicy.NEVER,
    username_enabled=False,
    username_acquire=False,
    email_enabled=False,
    email_acquire=False,
) -> PolicyConfig:
    """Builds a policy that schedules nothing unless told otherwise."""
    return PolicyConfig(
        mfa=MFAConfig(
            enabled=mfa,
            totp=TOTPConfig(enabled=totp),
            security_keys=SecurityKeysConfig(enabled=security_keys),
        ),
        passkey=PasskeyConfig(
            enabled=passkey_enabled, optional=passkey_optional, acquire_on_login=passkey_acquire
        ),
        password=PasswordConfig(
            enabled=password_enabled, optional=password_optional, acquire_on_login=password_acquire
        ),
        username=UsernameConfig(enabled=username_enabled, acquire_on_login=username_acquire),
        email=EmailConfig(enabled=email_enabled, acquire_on_login=email_acquire),
    )


def make_stash_data(**overrides) -> dict:
    """A password login by a user who owns a password and an email, nothing else."""
    data = {
        StashPath.LOGIN_METHOD: "password",
        StashPath.USER_ID: USER_ID,
        StashPath.USER_HAS_PASSWORD: True,
        StashPath.USER_HAS_EMAILS: True,
        StashPath.WEBAUTHN_AVAILABLE: True,
    }
    data.update(overrides)
    return data


@pytest.fixture
def device_trust():
    return FakeDeviceTrust()


@pytest.fixture
def scheduler():
    return InMemoryStateScheduler()


@pytest.fixture
def make_context(scheduler):
    def _make(read_only=False, **stash_values):
        stash = InMemoryStash(make_stash_data(**stash_values), read_only=read_only)
        return HookExecutionContext(stash=stash, scheduler=scheduler)
    return _make
