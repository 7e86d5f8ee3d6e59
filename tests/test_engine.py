from unittest.mock import MagicMock

import pytest

from login_onboarding.domain.models import AcquirePolicy, FlowErrorCode, StateName
from login_onboarding.execution.context import OnboardingHook
from login_onboarding.execution.engine import OnboardingPolicyEngine
from login_onboarding.services.exceptions import HookError, OnboardingScheduleError, StashWriteError
from login_onboarding.state.stash import StashPath

from conftest import FakeDeviceTrust, make_policy

MFA_STATES = {StateName.LOGIN_OTP, StateName.LOGIN_SECURITY_KEY, StateName.ERROR}
DETAIL_STATES = {StateName.ONBOARDING_USERNAME, StateName.ONBOARDING_EMAIL}
CREDENTIAL_STATES = {
    StateName.ONBOARDING_CREATE_PASSKEY,
    StateName.PASSWORD_CREATION,
    StateName.CREDENTIAL_ONBOARDING_CHOOSER,
}


class TrustDeviceHook(OnboardingHook):
    def execute(self, context):
        context.schedule_states(StateName.MFA_TRUST_DEVICE)


class FailingHook(OnboardingHook):
    def __init__(self, error):
        self.error = error

    def execute(self, context):
        raise self.error


def make_engine(policy=None, trusted=False, hook=None):
    return OnboardingPolicyEngine(
        config=policy or make_policy(),
        device_trust=FakeDeviceTrust(trusted),
        device_onboarding=hook,
    )


# --- Scenarios ---

def test_passkey_login_without_gaps_only_succeeds(make_context, scheduler):
    engine = make_engine(make_policy(mfa=False))
    engine.execute(make_context(login_method="passkey", user_has_otp_secret=True))
    assert scheduler.scheduled == [StateName.SUCCESS]


def test_security_key_without_attachment_routes_to_error(make_context, scheduler):
    engine = make_engine(make_policy(totp=False))
    context = make_context(user_has_security_key=True, security_key_attachment_supported=False)

    engine.execute(context)

    assert StateName.ERROR in scheduler.scheduled
    assert context.flow_error == FlowErrorCode.PLATFORM_AUTHENTICATOR_REQUIRED


def test_mandatory_password_then_optional_passkey(make_context, scheduler):
    policy = make_policy(
        mfa=False,
        passkey_acquire=AcquirePolicy.ALWAYS, passkey_optional=True,
        password_acquire=AcquirePolicy.ALWAYS, password_optional=False,
    )
    make_engine(policy).execute(make_context(user_has_password=False))

    assert scheduler.scheduled == [
        StateName.PASSWORD_CREATION,
        StateName.ONBOARDING_CREATE_PASSKEY,
        StateName.SUCCESS,
    ]


def test_conditional_credentials_offer_chooser(make_context, scheduler):
    policy = make_policy(
        passkey_acquire=AcquirePolicy.CONDITIONAL,
        password_acquire=AcquirePolicy.CONDITIONAL,
    )
    make_engine(policy).execute(make_context(user_has_password=False))
    assert StateName.CREDENTIAL_ONBOARDING_CHOOSER in scheduler.scheduled


def test_missing_username_is_collected_but_present_email_is_not(make_context, scheduler):
    policy = make_policy(
        username_enabled=True, username_acquire=True,
        email_enabled=True, email_acquire=True,
    )
    make_engine(policy).execute(make_context(user_has_username=False, user_has_emails=True))

    assert StateName.ONBOARDING_USERNAME in scheduler.scheduled
    assert StateName.ONBOARDING_EMAIL not in scheduler.scheduled


# --- Idempotency ---

def test_second_run_is_a_noop(make_context, scheduler):
    engine = make_engine(make_policy())
    context = make_context(user_has_otp_secret=True)

    engine.execute(context)
    first = scheduler.scheduled
    engine.execute(context)

    assert first == [StateName.LOGIN_OTP, StateName.SUCCESS]
    assert scheduler.scheduled == first
    assert context.stash.get_bool(StashPath.LOGIN_ONBOARDING_SCHEDULED) is True


def test_already_scheduled_flow_is_left_alone(make_context, scheduler):
    hook = MagicMock(spec=OnboardingHook)
    engine = make_engine(hook=hook)
    engine.execute(make_context(**{StashPath.LOGIN_ONBOARDING_SCHEDULED: True}))

    assert scheduler.scheduled == []
    hook.execute.assert_not_called()


def test_flag_is_written_before_the_hook_runs(make_context):
    seen = []

    class RecordingHook(OnboardingHook):
        def execute(self, context):
            seen.append(context.stash.get_bool(StashPath.LOGIN_ONBOARDING_SCHEDULED))

    make_engine(hook=RecordingHook()).execute(make_context())
    assert seen == [True]


# --- Errors ---

def test_stash_write_failure_schedules_nothing(make_context, scheduler):
    engine = make_engine(make_policy())
    context = make_context(read_only=True, user_has_otp_secret=True)

    with pytest.raises(OnboardingScheduleError) as exc_info:
        engine.execute(context)

    assert isinstance(exc_info.value.__cause__, StashWriteError)
    assert scheduler.scheduled == []


def test_hook_error_propagates_unchanged_without_rollback(make_context, scheduler):
    error = HookError("trust device lookup failed")
    engine = make_engine(make_policy(), hook=FailingHook(error))

    with pytest.raises(HookError) as exc_info:
        engine.execute(make_context(user_has_otp_secret=True))

    assert exc_info.value is error
    assert scheduler.scheduled == [StateName.LOGIN_OTP]
    assert StateName.SUCCESS not in scheduler.scheduled


# --- Properties ---

def test_mfa_disabled_never_schedules_mfa(make_context, scheduler):
    engine = make_engine(make_policy(mfa=False))
    engine.execute(make_context(
        user_has_security_key=True,
        security_key_attachment_supported=False,
        user_has_otp_secret=True,
    ))
    assert not MFA_STATES & set(scheduler.scheduled)


def test_trusted_device_skips_mfa(make_context, scheduler):
    engine = make_engine(make_policy(), trusted=True)
    engine.execute(make_context(
        user_has_security_key=True,
        security_key_attachment_supported=True,
    ))
    assert scheduler.scheduled == [StateName.SUCCESS]


def test_recovery_pending_schedules_recovery_not_password(make_context, scheduler):
    policy = make_policy(
        passkey_acquire=AcquirePolicy.ALWAYS,
        password_acquire=AcquirePolicy.ALWAYS,
    )
    make_engine(policy).execute(make_context(
        user_has_password=False,
        password_recovery_pending=True,
    ))

    assert StateName.LOGIN_PASSWORD_RECOVERY in scheduler.scheduled
    assert StateName.PASSWORD_CREATION not in scheduler.scheduled


def test_global_ordering(make_context, scheduler):
    policy = make_policy(
        passkey_acquire=AcquirePolicy.ALWAYS,
        password_acquire=AcquirePolicy.ALWAYS,
        username_enabled=True, username_acquire=True,
        email_enabled=True, email_acquire=True,
    )
    engine = make_engine(policy, hook=TrustDeviceHook())
    engine.execute(make_context(
        user_has_password=False,
        user_has_emails=False,
        user_has_security_key=True,
        security_key_attachment_supported=True,
        password_recovery_pending=True,
    ))

    assert scheduler.scheduled == [
        StateName.LOGIN_SECURITY_KEY,
        StateName.LOGIN_PASSWORD_RECOVERY,
        StateName.ONBOARDING_USERNAME,
        StateName.ONBOARDING_EMAIL,
        StateName.ONBOARDING_CREATE_PASSKEY,
        StateName.MFA_TRUST_DEVICE,
        StateName.SUCCESS,
    ]


def test_group_order_holds_across_policies(make_context, scheduler):
    rank = {}
    for state in MFA_STATES:
        rank[state] = 0
    rank[StateName.LOGIN_PASSWORD_RECOVERY] = 1
    for state in DETAIL_STATES:
        rank[state] = 2
    for state in CREDENTIAL_STATES:
        rank[state] = 3
    rank[StateName.SUCCESS] = 4

    for passkey_policy in AcquirePolicy:
        for password_policy in AcquirePolicy:
            for recovery in (True, False):
                policy = make_policy(
                    passkey_acquire=passkey_policy,
                    password_acquire=password_policy,
                    username_enabled=True, username_acquire=True,
                    email_enabled=True, email_acquire=True,
                )
                sched_before = len(scheduler.scheduled)
                make_engine(policy).execute(make_context(
                    user_has_password=False,
                    user_has_emails=False,
                    user_has_otp_secret=True,
                    password_recovery_pending=recovery,
                ))
                states = scheduler.scheduled[sched_before:]
                ranks = [rank[s] for s in states]
                assert ranks == sorted(ranks)
                assert states[-1] == StateName.SUCCESS
