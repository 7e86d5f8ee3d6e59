"""
Onboarding Service - Application Orchestration Layer

This service is the entry point for hosts that hold the flow stash as plain
data (e.g. the HTTP preview API). It builds a context around the stash, runs
the engine and reports what was scheduled.
"""

import logging
from typing import Any, Dict

from ..execution.context import HookExecutionContext, InMemoryStateScheduler
from ..execution.engine import OnboardingPolicyEngine
from ..execution.schemas.state_machine import OnboardingPhase, read_phase
from ..schemas.results import OnboardingResult
from .exceptions import HookError
from ..state.stash import InMemoryStash

logger = logging.getLogger(__name__)


class OnboardingService:
    def __init__(self, engine: OnboardingPolicyEngine):
        self.engine = engine

    def schedule(self, stash_data: Dict[str, Any]) -> OnboardingResult:
        """
        Runs one scheduling pass over a copy of stash_data.

        A failing device onboarding hook is reported on the result rather
        than raised, so the caller keeps the flagged stash and never runs a
        second pass. All other engine errors propagate to the caller.
        """
        stash = InMemoryStash(stash_data)
        scheduler = InMemoryStateScheduler()
        context = HookExecutionContext(stash=stash, scheduler=scheduler)

        already_scheduled = read_phase(stash) == OnboardingPhase.SCHEDULED
        if already_scheduled:
            logger.info("Flow already scheduled, returning without changes")

        hook_error = None
        try:
            self.engine.execute(context)
        except HookError as e:
            logger.error(f"Device onboarding hook failed: {e}")
            hook_error = str(e)

        return OnboardingResult(
            scheduled_states=scheduler.scheduled,
            flow_error=context.flow_error,
            already_scheduled=already_scheduled,
            stash=stash.to_dict(),
            hook_error=hook_error,
        )
