"""
Phone Utilities
===============
Destination number validation and masking.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

E164_PATTERN = re.compile(r"^\+[1-9][0-9]{7,14}$")
SEPARATORS = re.compile(r"[\s\-]")


class DestinationStatus(str, Enum):
    VALID = "valid"
    INVALID_FORMAT = "invalid_format"
    MISSING = "missing"


@dataclass(frozen=True)
class DestinationCheck:
    """Outcome of validating a destination number."""
    status: DestinationStatus
    number: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.status is DestinationStatus.VALID


def validate_destination(raw: Optional[str]) -> DestinationCheck:
    """
    Validate an E.164-like destination number.

    Whitespace and hyphens are stripped before matching. A leading `+`,
    a first digit 1-9 and 7 to 14 further digits are required.

    Args:
        raw: Phone number as stored on the user

    Returns:
        DestinationCheck with the cleaned number when valid
    """
    if raw is None or not raw.strip():
        return DestinationCheck(DestinationStatus.MISSING)

    clean = SEPARATORS.sub("", raw)
    if not E164_PATTERN.match(clean):
        return DestinationCheck(DestinationStatus.INVALID_FORMAT)
    return DestinationCheck(DestinationStatus.VALID, clean)


def mask_phone(phone: Optional[str]) -> str:
    """
    Mask a phone number for logs.

    Keeps up to four characters at each end, e.g. "+551******0000".
    """
    if phone is None or len(phone) <= 4:
        return "****"
    visible = min(4, len(phone) // 3)
    return phone[:visible] + "*" * (len(phone) - 2 * visible) + phone[-visible:]
