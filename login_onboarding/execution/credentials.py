"""
Credential Onboarding Evaluator

Decides which credentials (password, passkey) the user still has to create.
-----------------------------------------------

When both credential types are enabled, the decision is a pure lookup in
CREDENTIAL_PLANS, keyed by:

    (passkey_policy, password_policy, has_passkey, has_password)

Keys missing from the table mean "nothing to collect". The table yields a
CredentialPlan rather than states, because the BOTH plan is ordered by the
tenant's 'optional' flags:

- password mandatory and passkey optional -> password first
- any other combination                   -> passkey first

A pending password recovery forces the password policy to NEVER, so a reset
in progress is never interrupted by a password creation prompt.
"""

import logging
from enum import Enum, auto
from typing import Dict, List, Tuple

from ..domain.models import AcquirePolicy, PolicyConfig, StateName
from ..state.models import LoginSnapshot

logger = logging.getLogger(__name__)


class CredentialPlan(Enum):
    PASSKEY = auto()  # Create a passkey
    PASSWORD = auto()  # Create a password
    CHOOSER = auto()  # Let the user pick one (skippable)
    BOTH = auto()  # Create both, order depends on 'optional' flags


ALWAYS = AcquirePolicy.ALWAYS
CONDITIONAL = AcquirePolicy.CONDITIONAL
NEVER = AcquirePolicy.NEVER

PlanKey = Tuple[AcquirePolicy, AcquirePolicy, bool, bool]

CREDENTIAL_PLANS: Dict[PlanKey, CredentialPlan] = {
    # passkey      password     has_pk has_pw
    (ALWAYS,       ALWAYS,      False, False): CredentialPlan.BOTH,
    (ALWAYS,       ALWAYS,      True,  False): CredentialPlan.PASSWORD,
    (ALWAYS,       ALWAYS,      False, True):  CredentialPlan.PASSKEY,
    # Skipping the passkey here is expected to lead to password onboarding.
    (ALWAYS,       CONDITIONAL, False, False): CredentialPlan.PASSKEY,
    (ALWAYS,       CONDITIONAL, False, True):  CredentialPlan.PASSKEY,
    # Skipping the password here is expected to lead to passkey onboarding.
    (CONDITIONAL,  ALWAYS,      False, False): CredentialPlan.PASSWORD,
    (CONDITIONAL,  ALWAYS,      True,  False): CredentialPlan.PASSWORD,
    (CONDITIONAL,  CONDITIONAL, False, False): CredentialPlan.CHOOSER,
    (CONDITIONAL,  NEVER,       False, False): CredentialPlan.PASSKEY,
    (NEVER,        CONDITIONAL, False, False): CredentialPlan.PASSWORD,
    (NEVER,        ALWAYS,      False, False): CredentialPlan.PASSWORD,
    (NEVER,        ALWAYS,      True,  False): CredentialPlan.PASSWORD,
    (ALWAYS,       NEVER,       False, False): CredentialPlan.PASSKEY,
    (ALWAYS,       NEVER,       False, True):  CredentialPlan.PASSKEY,
}

ACQUIRING_POLICIES = frozenset({ALWAYS, CONDITIONAL})


class CredentialOnboardingEvaluator:
    def __init__(self, config: PolicyConfig):
        self.config = config

    def evaluate(self, snapshot: LoginSnapshot) -> List[StateName]:
        passkey_enabled = self.config.passkey.enabled and snapshot.webauthn_available
        password_enabled = self.config.password.enabled

        passkey_policy = self.config.passkey.acquire_on_login
        password_policy = self.config.password.acquire_on_login
        if snapshot.password_recovery_pending:
            password_policy = NEVER

        has_passkey = snapshot.user_has_passkey
        has_password = snapshot.user_has_password

        if passkey_enabled and password_enabled:
            key = (passkey_policy, password_policy, has_passkey, has_password)
            plan = CREDENTIAL_PLANS.get(key)
            if plan is None:
                return []
            logger.debug(f"Credential plan for {key}: {plan.name}")
            return self._states_for(plan)

        if passkey_enabled:
            if passkey_policy in ACQUIRING_POLICIES and not has_passkey:
                return [StateName.ONBOARDING_CREATE_PASSKEY]
            return []

        if password_enabled:
            if password_policy in ACQUIRING_POLICIES and not has_password:
                return [StateName.PASSWORD_CREATION]
            return []

        return []

    def _states_for(self, plan: CredentialPlan) -> List[StateName]:
        if plan == CredentialPlan.PASSKEY:
            return [StateName.ONBOARDING_CREATE_PASSKEY]
        if plan == CredentialPlan.PASSWORD:
            return [StateName.PASSWORD_CREATION]
        if plan == CredentialPlan.CHOOSER:
            return [StateName.CREDENTIAL_ONBOARDING_CHOOSER]

        password_first = not self.config.password.optional and self.config.passkey.optional
        if password_first:
            return [StateName.PASSWORD_CREATION, StateName.ONBOARDING_CREATE_PASSKEY]
        return [StateName.ONBOARDING_CREATE_PASSKEY, StateName.PASSWORD_CREATION]
