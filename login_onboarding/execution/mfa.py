"""
MFA Requirement Evaluator

Decides which second factor, if any, the user must present after the first
factor succeeded. At most one state is produced.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..domain.models import FlowErrorCode, PolicyConfig, StateName
from ..services.device_trust import DeviceTrustService
from ..state.models import LoginSnapshot

logger = logging.getLogger(__name__)

# A passkey login already satisfies a second factor.
STRONG_LOGIN_METHODS = frozenset({"passkey"})


@dataclass
class MFARequirement:
    states: List[StateName] = field(default_factory=list)
    flow_error: Optional[FlowErrorCode] = None


class MFARequirementEvaluator:
    def __init__(self, config: PolicyConfig, device_trust: DeviceTrustService):
        self.config = config
        self.device_trust = device_trust

    def evaluate(self, snapshot: LoginSnapshot) -> MFARequirement:
        mfa = self.config.mfa

        if not mfa.enabled:
            return MFARequirement()

        if snapshot.login_method in STRONG_LOGIN_METHODS:
            return MFARequirement()

        if self.device_trust.check_device_trust(snapshot.user_id):
            logger.debug(f"Device trusted for user {snapshot.user_id}, skipping MFA")
            return MFARequirement()

        can_use_otp = mfa.totp.enabled and snapshot.user_has_otp_secret

        if mfa.security_keys.enabled and snapshot.user_has_security_key:
            if snapshot.security_key_attachment_supported:
                return MFARequirement(states=[StateName.LOGIN_SECURITY_KEY])
            if can_use_otp:
                return MFARequirement(states=[StateName.LOGIN_OTP])

            logger.warning(
                f"User {snapshot.user_id} has only a security key and the "
                "client cannot use it; no OTP fallback available"
            )
            return MFARequirement(
                states=[StateName.ERROR],
                flow_error=FlowErrorCode.PLATFORM_AUTHENTICATOR_REQUIRED,
            )

        if can_use_otp:
            return MFARequirement(states=[StateName.LOGIN_OTP])

        return MFARequirement()
