"""
Onboarding Phases - FSM State Definitions

Type definitions for the two-state machine guarding onboarding scheduling.
The phase is persisted in the stash as a single boolean flag.
"""

from enum import Enum, auto

from ...state.stash import Stash, StashPath


class OnboardingPhase(Enum):
    """
    PENDING: Onboarding states have not been scheduled for this flow.
    SCHEDULED: Terminal. Scheduling already happened (or was attempted).
    """

    PENDING = auto()
    SCHEDULED = auto()


def read_phase(stash: Stash) -> OnboardingPhase:
    if stash.get_bool(StashPath.LOGIN_ONBOARDING_SCHEDULED):
        return OnboardingPhase.SCHEDULED
    return OnboardingPhase.PENDING
