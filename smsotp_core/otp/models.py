"""
OTP Models
==========
Data classes for OTP challenges.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class OtpChallenge:
    """A one-time code and the instant it stops being valid."""
    code: str
    expires_at_millis: int  # epoch milliseconds

    def __repr__(self) -> str:
        return f"OtpChallenge(code='{'*' * len(self.code)}', expires_at_millis={self.expires_at_millis})"
