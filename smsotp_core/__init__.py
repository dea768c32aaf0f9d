"""
SMS OTP Core Library
====================
One-time SMS codes for authentication flows: challenge generation,
provider dispatch and verification.
"""

__version__ = "0.1.0"

# Errors
from smsotp_core.exceptions import (
    SmsOtpError,
    ConfigurationError,
    BrokerError,
    UnsupportedProviderError,
    ProviderNotImplementedError,
    InvalidBrokerConfig,
    DeliveryError,
    MessageTemplateError,
)

# Configuration
from smsotp_core.config import AuthenticatorSettings

# OTP
from smsotp_core.otp import (
    OtpChallenge,
    current_millis,
    generate_code,
    generate_challenge,
    is_expired,
)

# Messaging
from smsotp_core.messaging import (
    DestinationCheck,
    DestinationStatus,
    validate_destination,
    mask_phone,
    MessageCatalog,
)

# Brokers
from smsotp_core.brokers import (
    BaseBrokerService,
    BrokerConfig,
    SendResult,
    mask_secret,
    SimulateBrokerService,
    ZenviaBrokerService,
    BrokerDispatcher,
    BrokerRegistry,
    ProviderIdentity,
    default_registry,
)

# Authenticator
from smsotp_core.authenticator import (
    AuthenticationContext,
    AuthenticationOutcome,
    ExecutionRequirement,
    FailureKind,
    InMemorySessionNotes,
    OtpAuthenticator,
    OutcomeStatus,
    RealmInfo,
    SessionNotes,
    UserRecord,
)

__all__ = [
    # Errors
    "SmsOtpError",
    "ConfigurationError",
    "BrokerError",
    "UnsupportedProviderError",
    "ProviderNotImplementedError",
    "InvalidBrokerConfig",
    "DeliveryError",
    "MessageTemplateError",
    # Configuration
    "AuthenticatorSettings",
    # OTP
    "OtpChallenge",
    "current_millis",
    "generate_code",
    "generate_challenge",
    "is_expired",
    # Messaging
    "DestinationCheck",
    "DestinationStatus",
    "validate_destination",
    "mask_phone",
    "MessageCatalog",
    # Brokers
    "BaseBrokerService",
    "BrokerConfig",
    "SendResult",
    "mask_secret",
    "SimulateBrokerService",
    "ZenviaBrokerService",
    "BrokerDispatcher",
    "BrokerRegistry",
    "ProviderIdentity",
    "default_registry",
    # Authenticator
    "AuthenticationContext",
    "AuthenticationOutcome",
    "ExecutionRequirement",
    "FailureKind",
    "InMemorySessionNotes",
    "OtpAuthenticator",
    "OutcomeStatus",
    "RealmInfo",
    "SessionNotes",
    "UserRecord",
]
