"""
Authentication Outcomes
=======================
Results returned to the flow engine.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

CODE_FORM = "login-otp-sms.ftl"


class OutcomeStatus(str, Enum):
    CHALLENGE_PRESENTED = "challenge_presented"
    SUCCESS = "success"
    FAILURE = "failure"
    ATTEMPTED = "attempted"


class FailureKind(str, Enum):
    MISSING_DESTINATION = "missing_destination"
    INVALID_FORMAT = "invalid_format"
    DELIVERY_FAILED = "delivery_failed"
    INTERNAL_ERROR = "internal_error"
    EXPIRED = "expired"
    CODE_MISMATCH = "code_mismatch"


@dataclass(frozen=True)
class AuthenticationOutcome:
    """
    Result of an authenticator step.

    `message` is a catalog key shown to the user (already resolved into
    `text` when a catalog was available); `detail` is an internal cause
    for operators and must never be rendered to the user.
    """
    status: OutcomeStatus
    kind: Optional[FailureKind] = None
    message: Optional[str] = None
    text: Optional[str] = None
    detail: Optional[str] = None
    http_status: Optional[int] = None
    form: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status is OutcomeStatus.SUCCESS

    @classmethod
    def challenge(cls, form: str = CODE_FORM) -> "AuthenticationOutcome":
        return cls(OutcomeStatus.CHALLENGE_PRESENTED, form=form)

    @classmethod
    def success(cls) -> "AuthenticationOutcome":
        return cls(OutcomeStatus.SUCCESS)

    @classmethod
    def attempted(cls) -> "AuthenticationOutcome":
        return cls(OutcomeStatus.ATTEMPTED)
