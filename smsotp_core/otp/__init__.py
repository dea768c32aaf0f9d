"""
OTP Challenges
==============
Numeric one-time code generation and expiry.
"""

from .models import OtpChallenge
from .generator import current_millis, generate_code, generate_challenge, is_expired

__all__ = [
    # Models
    "OtpChallenge",
    # Generator
    "current_millis",
    "generate_code",
    "generate_challenge",
    "is_expired",
]
