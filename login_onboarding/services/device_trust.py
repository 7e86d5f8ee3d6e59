"""
Device Trust Service Interface.

Defines the contract for the remembered-device check that lets a user skip
MFA on a device they previously marked as trusted. The lookup itself (cookies,
persisted device tokens, expiry) belongs to the host.
"""
from abc import ABC, abstractmethod
from uuid import UUID


class DeviceTrustService(ABC):
    @abstractmethod
    def check_device_trust(self, user_id: UUID) -> bool:
        """
        Returns True if the current device is trusted for user_id.
        Must not have side effects visible to the onboarding engine.
        """
        pass


class UntrustedDeviceService(DeviceTrustService):
    """
    Temporary Stub: no device is ever trusted, so MFA is never skipped.
    """
    def check_device_trust(self, user_id: UUID) -> bool:
        return False
