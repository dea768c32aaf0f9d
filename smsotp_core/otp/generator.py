"""
OTP Generator
=============
Secure code generation and expiry checks.
"""

import secrets
import string
import time
from typing import Optional

from ..exceptions import ConfigurationError
from .models import OtpChallenge


def current_millis() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def generate_code(length: int = 6) -> str:
    """
    Generate a numeric one-time code.

    Each digit is drawn independently from the OS CSPRNG.

    Args:
        length: Number of digits

    Returns:
        Code string of exactly `length` digits
    """
    if length <= 0:
        raise ConfigurationError(f"Code length must be positive, got {length}")
    return "".join(secrets.choice(string.digits) for _ in range(length))


def generate_challenge(
    length: int = 6,
    ttl_seconds: int = 300,
    now_millis: Optional[int] = None,
) -> OtpChallenge:
    """
    Create a fresh challenge valid for `ttl_seconds`.

    Args:
        length: Number of digits
        ttl_seconds: Validity window in seconds
        now_millis: Creation instant; defaults to the wall clock

    Returns:
        OtpChallenge
    """
    if ttl_seconds <= 0:
        raise ConfigurationError(f"Code TTL must be positive, got {ttl_seconds}")
    code = generate_code(length)
    if now_millis is None:
        now_millis = current_millis()
    return OtpChallenge(code=code, expires_at_millis=now_millis + ttl_seconds * 1000)


def is_expired(challenge: OtpChallenge, now_millis: Optional[int] = None) -> bool:
    """True once `now_millis` reaches the challenge expiry."""
    if now_millis is None:
        now_millis = current_millis()
    return now_millis >= challenge.expires_at_millis
