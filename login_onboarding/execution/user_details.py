"""
User-Detail Onboarding Evaluator

Collects missing profile details (username, email) right after login.
Username is always asked for before email.
"""

from typing import List

from ..domain.models import PolicyConfig, StateName
from ..state.models import LoginSnapshot


class UserDetailOnboardingEvaluator:
    def __init__(self, config: PolicyConfig):
        self.config = config

    def evaluate(self, snapshot: LoginSnapshot) -> List[StateName]:
        username, email = self.config.username, self.config.email

        acquire_username = (
            username.enabled and username.acquire_on_login and not snapshot.user_has_username
        )
        acquire_email = email.enabled and email.acquire_on_login and not snapshot.user_has_emails

        states = []
        if acquire_username:
            states.append(StateName.ONBOARDING_USERNAME)
        if acquire_email:
            states.append(StateName.ONBOARDING_EMAIL)
        return states
