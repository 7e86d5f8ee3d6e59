"""
Engine - Onboarding Scheduling Layer

The OnboardingPolicyEngine is the hook the login flow runs once the first
factor has succeeded. It asks three independent evaluators what the user
still needs to do, merges their answers into one ordered list and appends it
to the host's state queue.
-----------------------------------------------

Scheduling order is fixed:

1. MFA state (security key, OTP, or the fatal error state)
2. Password recovery, if one is pending
3. User details (username, then email)
4. Credentials (passkey and/or password, or the chooser)
5. Whatever the delegated device onboarding hook schedules
6. Success

The engine runs at most once per flow. The idempotency flag is written
BEFORE anything is computed, so a failure halfway through never leads to a
second, inconsistent pass.
"""

import logging
from typing import Optional

from ..domain.models import PolicyConfig, StateName
from ..services.device_trust import DeviceTrustService
from ..services.exceptions import OnboardingScheduleError, StashWriteError
from ..state.models import LoginSnapshot
from ..state.stash import StashPath
from .context import HookExecutionContext, NoopDeviceOnboardingHook, OnboardingHook
from .credentials import CredentialOnboardingEvaluator
from .mfa import MFARequirementEvaluator
from .schemas.state_machine import OnboardingPhase, read_phase
from .user_details import UserDetailOnboardingEvaluator

logger = logging.getLogger(__name__)


class OnboardingPolicyEngine(OnboardingHook):
    def __init__(
        self,
        config: PolicyConfig,
        device_trust: DeviceTrustService,
        device_onboarding: Optional[OnboardingHook] = None,
    ):
        self.config = config
        self.mfa_evaluator = MFARequirementEvaluator(config, device_trust)
        self.user_detail_evaluator = UserDetailOnboardingEvaluator(config)
        self.credential_evaluator = CredentialOnboardingEvaluator(config)
        self.device_onboarding = device_onboarding or NoopDeviceOnboardingHook()

    def execute(self, context: HookExecutionContext) -> None:
        """
        Schedules the onboarding states for this flow.

        Raises:
            OnboardingScheduleError: The idempotency flag could not be stored.
                Nothing has been scheduled.
            Exception: Anything raised by the device onboarding hook, unchanged.
                States scheduled before the hook remain scheduled.
        """
        if read_phase(context.stash) == OnboardingPhase.SCHEDULED:
            logger.debug("Onboarding already scheduled for this flow, skipping")
            return

        try:
            context.stash.set(StashPath.LOGIN_ONBOARDING_SCHEDULED, True)
        except StashWriteError as e:
            logger.error(f"Failed to persist onboarding flag: {e}")
            raise OnboardingScheduleError(
                f"failed to set {StashPath.LOGIN_ONBOARDING_SCHEDULED} to the stash: {e}"
            ) from e

        snapshot = LoginSnapshot.from_stash(context.stash)

        # 1. Evaluate (pure, no side effects)
        mfa = self.mfa_evaluator.evaluate(snapshot)
        user_detail_states = self.user_detail_evaluator.evaluate(snapshot)
        credential_states = self.credential_evaluator.evaluate(snapshot)

        # 2. Schedule in fixed order
        if mfa.flow_error is not None:
            context.set_flow_error(mfa.flow_error)
        context.schedule_states(*mfa.states)

        if snapshot.password_recovery_pending:
            context.schedule_states(StateName.LOGIN_PASSWORD_RECOVERY)

        context.schedule_states(*user_detail_states)
        context.schedule_states(*credential_states)

        # 3. Delegate (errors propagate, no rollback)
        context.execute_hook(self.device_onboarding)

        context.schedule_states(StateName.SUCCESS)

        logger.info(
            f"Scheduled onboarding for user {snapshot.user_id}: "
            f"mfa={[s.value for s in mfa.states]} "
            f"details={[s.value for s in user_detail_states]} "
            f"credentials={[s.value for s in credential_states]}"
        )
