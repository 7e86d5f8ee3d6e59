"""
State Layer - Runtime Data Models

This module defines the read-only view of a login flow that the onboarding
evaluators work on. The snapshot is projected from the stash once per engine
invocation, so evaluators never touch the stash directly.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict

from .stash import Stash, StashPath

NIL_USER_ID = UUID(int=0)


def _parse_user_id(raw: str) -> UUID:
    try:
        return UUID(raw)
    except ValueError:
        return NIL_USER_ID


class LoginSnapshot(BaseModel):
    """
    Credential and profile facts about the user who just logged in.
    """
    model_config = ConfigDict(frozen=True)

    login_method: str = ""
    user_id: UUID = NIL_USER_ID
    user_has_security_key: bool = False
    user_has_otp_secret: bool = False
    security_key_attachment_supported: bool = False
    user_has_password: bool = False
    user_has_passkey: bool = False
    webauthn_available: bool = False
    user_has_username: bool = False
    user_has_emails: bool = False
    password_recovery_pending: bool = False

    @classmethod
    def from_stash(cls, stash: Stash) -> "LoginSnapshot":
        return cls(
            login_method=stash.get_str(StashPath.LOGIN_METHOD),
            user_id=_parse_user_id(stash.get_str(StashPath.USER_ID)),
            user_has_security_key=stash.get_bool(StashPath.USER_HAS_SECURITY_KEY),
            user_has_otp_secret=stash.get_bool(StashPath.USER_HAS_OTP_SECRET),
            security_key_attachment_supported=stash.get_bool(
                StashPath.SECURITY_KEY_ATTACHMENT_SUPPORTED
            ),
            user_has_password=stash.get_bool(StashPath.USER_HAS_PASSWORD),
            user_has_passkey=stash.get_bool(StashPath.USER_HAS_PASSKEY),
            webauthn_available=stash.get_bool(StashPath.WEBAUTHN_AVAILABLE),
            user_has_username=stash.get_bool(StashPath.USER_HAS_USERNAME),
            user_has_emails=stash.get_bool(StashPath.USER_HAS_EMAILS),
            password_recovery_pending=stash.get_bool(StashPath.PASSWORD_RECOVERY_PENDING),
        )
