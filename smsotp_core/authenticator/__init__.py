"""
SMS OTP Authenticator
=====================
Flow-engine facing challenge/verify step.
"""

from .context import (
    AuthenticationContext,
    ExecutionRequirement,
    InMemorySessionNotes,
    RealmInfo,
    SessionNotes,
    UserRecord,
)
from .outcomes import CODE_FORM, AuthenticationOutcome, FailureKind, OutcomeStatus
from .authenticator import NOTE_CODE, NOTE_EXPIRY, OtpAuthenticator

__all__ = [
    # Context
    "AuthenticationContext",
    "ExecutionRequirement",
    "InMemorySessionNotes",
    "RealmInfo",
    "SessionNotes",
    "UserRecord",
    # Outcomes
    "CODE_FORM",
    "AuthenticationOutcome",
    "FailureKind",
    "OutcomeStatus",
    # Authenticator
    "NOTE_CODE",
    "NOTE_EXPIRY",
    "OtpAuthenticator",
]
