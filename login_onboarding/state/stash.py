"""
Stash - Per-Flow Key-Value Store

The stash carries state across the states of a single login flow. It is owned
by the host runtime; the onboarding engine only reads credential facts from
it and writes its idempotency flag. Paths are dotted strings that address
nested mappings (e.g. "user.profile.email").
"""

import copy
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..services.exceptions import StashWriteError


class StashPath:
    """Stash path constants. Use these instead of raw strings."""

    LOGIN_METHOD = "login_method"
    USER_ID = "user_id"
    LOGIN_ONBOARDING_SCHEDULED = "login_onboarding_scheduled"
    USER_HAS_SECURITY_KEY = "user_has_security_key"
    USER_HAS_OTP_SECRET = "user_has_otp_secret"
    SECURITY_KEY_ATTACHMENT_SUPPORTED = "security_key_attachment_supported"
    USER_HAS_PASSWORD = "user_has_password"
    USER_HAS_PASSKEY = "user_has_passkey"
    WEBAUTHN_AVAILABLE = "webauthn_available"
    USER_HAS_USERNAME = "user_has_username"
    USER_HAS_EMAILS = "user_has_emails"
    PASSWORD_RECOVERY_PENDING = "password_recovery_pending"


class Stash(ABC):
    """
    Defines how the engine reads and writes flow state.
    Hosts may back this with whatever store their flow runtime uses.
    """

    @abstractmethod
    def get(self, path: str) -> Any:
        """Returns the raw value at path, or None if absent."""
        pass

    @abstractmethod
    def set(self, path: str, value: Any) -> None:
        """
        Stores value at path.
        Raises StashWriteError if the value cannot be persisted.
        """
        pass

    def get_bool(self, path: str) -> bool:
        """
        Reads path as a boolean. The strings "true"/"false" (any case) are
        accepted, any other string reads as False.
        """
        value = self.get(path)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.strip().lower() == "true"
        if isinstance(value, (int, float)):
            return value != 0
        return False

    def get_str(self, path: str) -> str:
        value = self.get(path)
        if value is None:
            return ""
        return str(value)


class InMemoryStash(Stash):
    """
    Dictionary-backed stash for tests, previews and single-process hosts.

    A read-only stash rejects every write, which is how callers simulate a
    persistence failure.
    """

    def __init__(self, data: Optional[Dict[str, Any]] = None, read_only: bool = False):
        self._data: Dict[str, Any] = copy.deepcopy(data) if data else {}
        self.read_only = read_only

    def get(self, path: str) -> Any:
        node: Any = self._data
        for key in path.split("."):
            if not isinstance(node, dict) or key not in node:
                return None
            node = node[key]
        return node

    def set(self, path: str, value: Any) -> None:
        if self.read_only:
            raise StashWriteError(f"stash is read-only, cannot set '{path}'")

        *parents, leaf = path.split(".")
        node = self._data
        for key in parents:
            child = node.setdefault(key, {})
            if not isinstance(child, dict):
                raise StashWriteError(f"cannot set '{path}': '{key}' is not an object")
            node = child
        node[leaf] = value

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self._data)
