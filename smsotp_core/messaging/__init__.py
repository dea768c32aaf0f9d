"""
Messaging Utilities
===================
Destination validation, masking and message templates.
"""

from .phone_utils import (
    DestinationCheck,
    DestinationStatus,
    validate_destination,
    mask_phone,
)
from .templates import MessageCatalog, DEFAULT_MESSAGES, DEFAULT_LOCALE, DEFAULT_THEME

__all__ = [
    # Phone
    "DestinationCheck",
    "DestinationStatus",
    "validate_destination",
    "mask_phone",
    # Templates
    "MessageCatalog",
    "DEFAULT_MESSAGES",
    "DEFAULT_LOCALE",
    "DEFAULT_THEME",
]
