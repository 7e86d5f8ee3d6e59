"""
Dependency Injection Wiring (Composition Root).

This module acts as the central "container" for the application's services.
It is responsible for:
1. Loading the tenant policy once per process.
2. Instantiating the collaborators (device trust, device onboarding hook).
3. Wiring them into the OnboardingPolicyEngine and the OnboardingService.

Every provider is wrapped in @lru_cache so it is built once per process, and
tests can swap any of them with app.dependency_overrides.
"""


from functools import lru_cache
from fastapi import Depends

from ..config import settings, load_policy_config
from ..domain.models import PolicyConfig
from ..execution.context import OnboardingHook, NoopDeviceOnboardingHook
from ..execution.engine import OnboardingPolicyEngine
from ..services.device_trust import DeviceTrustService, UntrustedDeviceService
from ..services.onboarding import OnboardingService


# Tenant Policy (Singleton)
@lru_cache()
def get_policy_config() -> PolicyConfig:
    return load_policy_config(settings.POLICY_FILE)

# Device Trust (Singleton)
@lru_cache()
def get_device_trust_service() -> DeviceTrustService:
    return UntrustedDeviceService()

# Device Onboarding Hook (Singleton)
@lru_cache()
def get_device_onboarding_hook() -> OnboardingHook:
    return NoopDeviceOnboardingHook()

# The Engine (Singleton Service)
@lru_cache()
def get_onboarding_engine(
    config: PolicyConfig = Depends(get_policy_config),
    device_trust: DeviceTrustService = Depends(get_device_trust_service),
    device_onboarding: OnboardingHook = Depends(get_device_onboarding_hook),
) -> OnboardingPolicyEngine:
    return OnboardingPolicyEngine(
        config=config,
        device_trust=device_trust,
        device_onboarding=device_onboarding,
    )

# The Onboarding Service (Singleton Service)
@lru_cache()
def get_onboarding_service(
    engine: OnboardingPolicyEngine = Depends(get_onboarding_engine),
) -> OnboardingService:
    return OnboardingService(engine=engine)
