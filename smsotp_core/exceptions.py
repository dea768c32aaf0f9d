"""
SMS OTP Exceptions
==================
Error taxonomy for configuration, broker resolution and delivery failures.
"""

from typing import Optional, Any


class SmsOtpError(Exception):
    """Base exception for the SMS OTP core."""
    def __init__(self, message: str, details: Any = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ConfigurationError(SmsOtpError):
    """Raised when authenticator configuration is malformed (setup bug)."""
    pass


class BrokerError(SmsOtpError):
    """Base exception for broker resolution and delivery errors."""
    def __init__(self, message: str, provider: str = "unknown", details: Any = None):
        self.provider = provider
        super().__init__(f"[{provider}] {message}", details=details)


class UnsupportedProviderError(BrokerError):
    """Raised when a provider name is not a known provider."""
    def __init__(self, name: Optional[str]):
        self.name = name
        super().__init__(f"Unsupported broker: {name!r}", provider=str(name))


class ProviderNotImplementedError(BrokerError, NotImplementedError):
    """Raised when a known provider has no implementation yet."""
    def __init__(self, provider: str):
        super().__init__(f"{provider} broker not implemented yet", provider=provider)


class InvalidBrokerConfig(BrokerError):
    """Raised when a broker is missing a required configuration field."""
    def __init__(self, provider: str, field: str):
        self.field = field
        super().__init__(f"{field} cannot be null or empty", provider=provider)


class DeliveryError(BrokerError):
    """Raised when a provider fails to accept a message."""
    def __init__(
        self,
        message: str,
        provider: str = "unknown",
        status_code: Optional[int] = None,
        details: Any = None,
    ):
        self.status_code = status_code
        super().__init__(message, provider=provider, details=details)


class MessageTemplateError(SmsOtpError):
    """Raised when a message template cannot be rendered."""
    def __init__(self, key: str, reason: str):
        self.key = key
        super().__init__(f"Cannot render message '{key}': {reason}")
