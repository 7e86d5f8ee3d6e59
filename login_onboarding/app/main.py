import logging

from fastapi import FastAPI, HTTPException, Depends, status
from fastapi.responses import JSONResponse

from .dependencies import get_onboarding_service, get_policy_config
from ..config import settings
from ..domain.models import PolicyConfig
from ..services.exceptions import OnboardingError
from ..services.onboarding import OnboardingService
from .schemas import ScheduleRequest, ScheduleResponse

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_TITLE)

# --- Endpoints ---

@app.get("/policy", response_model=PolicyConfig)
def get_policy(config: PolicyConfig = Depends(get_policy_config)):
    """Returns the onboarding policy this process was started with."""
    return config


@app.post("/onboarding/schedule", response_model=ScheduleResponse)
def schedule_onboarding(
    request: ScheduleRequest,
    service: OnboardingService = Depends(get_onboarding_service)
):
    """
    Computes the onboarding states for the given flow stash.
    The returned stash carries the idempotency flag; sending it back
    yields an empty schedule.
    """
    try:
        result = service.schedule(request.stash)
    except OnboardingError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

    # Explicitly Map: OnboardingResult (Service) -> ScheduleResponse (API)
    response = ScheduleResponse(
        scheduled_states=[s.value for s in result.scheduled_states],
        flow_error=result.flow_error.value if result.flow_error else None,
        already_scheduled=result.already_scheduled,
        stash=result.stash,
        detail=result.hook_error,
    )

    # The hook failed after the flag was written: the client still needs the
    # flagged stash so a retry does not schedule a second time.
    if result.hook_error is not None:
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content=response.model_dump(mode="json"),
        )
    return response
