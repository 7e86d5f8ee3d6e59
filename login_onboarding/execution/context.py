"""
Hook Execution Context

The context is the only handle a hook has on the running flow: it exposes the
stash, an append-only state queue and the flow error slot. Hosts pass one
context per login transition; nothing here is global.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from ..domain.models import FlowErrorCode, StateName
from ..state.stash import Stash

logger = logging.getLogger(__name__)


class StateScheduler(ABC):
    """
    The host's queue of states to present next.
    States are appended in order and never reordered afterwards.
    """

    @abstractmethod
    def schedule_states(self, *states: StateName) -> None:
        pass


class InMemoryStateScheduler(StateScheduler):
    def __init__(self):
        self._scheduled: List[StateName] = []

    def schedule_states(self, *states: StateName) -> None:
        self._scheduled.extend(states)

    @property
    def scheduled(self) -> List[StateName]:
        return list(self._scheduled)


class OnboardingHook(ABC):
    """
    A unit of scheduling logic run against a flow context.
    Implementations raise HookError when they cannot complete.
    """

    @abstractmethod
    def execute(self, context: "HookExecutionContext") -> None:
        pass


class NoopDeviceOnboardingHook(OnboardingHook):
    """
    Temporary Stub: never schedules a trust-device state.
    Hosts with a remembered-device feature inject their own hook.
    """

    def execute(self, context: "HookExecutionContext") -> None:
        return None


class HookExecutionContext:
    def __init__(self, stash: Stash, scheduler: Optional[StateScheduler] = None):
        self.stash = stash
        self.scheduler = scheduler or InMemoryStateScheduler()
        self._flow_error: Optional[FlowErrorCode] = None

    @property
    def flow_error(self) -> Optional[FlowErrorCode]:
        return self._flow_error

    def set_flow_error(self, code: FlowErrorCode) -> None:
        self._flow_error = code

    def schedule_states(self, *states: StateName) -> None:
        if states:
            logger.debug(f"Scheduling states: {[s.value for s in states]}")
        self.scheduler.schedule_states(*states)

    def execute_hook(self, hook: OnboardingHook) -> None:
        # Errors raised by the hook reach the caller untouched.
        hook.execute(self)
