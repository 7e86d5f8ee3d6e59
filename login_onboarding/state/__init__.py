"""
State Layer - Runtime Data Models

Defines the per-flow stash and the read-only login snapshot projected from it.
"""

from login_onboarding.state.models import LoginSnapshot, NIL_USER_ID
from login_onboarding.state.stash import InMemoryStash, Stash, StashPath

__all__ = [
    "InMemoryStash",
    "LoginSnapshot",
    "NIL_USER_ID",
    "Stash",
    "StashPath",
]
