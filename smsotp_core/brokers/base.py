"""
Broker Service Base
===================
Credential bundle and abstract base for SMS delivery providers.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import structlog

from ..exceptions import InvalidBrokerConfig

logger = structlog.get_logger(__name__)


def mask_secret(value: Optional[str]) -> str:
    """
    Mask a credential for display.

    Returns:
        Masked value (e.g., "ab********yz")
    """
    if not value or len(value) <= 4:
        return "****"
    return value[:2] + "*" * (len(value) - 4) + value[-2:]


@dataclass(frozen=True)
class BrokerConfig:
    """Provider credentials and sender address for one attempt."""
    short_code: Optional[str] = None
    key: Optional[str] = None
    secret: Optional[str] = None

    def __repr__(self) -> str:
        return (
            f"BrokerConfig(short_code={self.short_code!r}, "
            f"key={mask_secret(self.key)!r}, secret={mask_secret(self.secret)!r})"
        )


@dataclass
class SendResult:
    """Result of a successful delivery request."""
    success: bool
    provider: str
    status_code: Optional[int] = None


class BaseBrokerService(ABC):
    """
    Abstract base class for SMS broker services.

    Subclasses declare the BrokerConfig fields they need in
    `required_fields`; missing ones fail at construction time.
    """

    name: str = "base"
    required_fields: Tuple[str, ...] = ()

    def __init__(self, config: BrokerConfig):
        self.validate_config(config)
        self.config = config

    def validate_config(self, config: Optional[BrokerConfig]) -> None:
        """Raise InvalidBrokerConfig for the first missing required field."""
        if config is None:
            raise InvalidBrokerConfig(self.name, "config")
        for field in self.required_fields:
            value = getattr(config, field, None)
            if value is None or not str(value).strip():
                logger.error("Broker config incomplete", provider=self.name, field=field)
                raise InvalidBrokerConfig(self.name, field)

    def describe(self) -> Dict[str, Any]:
        """Config summary safe for logs."""
        return {
            "provider": self.name,
            "short_code": self.config.short_code,
            "key": mask_secret(self.config.key),
            "secret": mask_secret(self.config.secret),
        }

    @abstractmethod
    def send(self, destination: str, message: str) -> SendResult:
        """
        Deliver an SMS message.

        Args:
            destination: Validated E.164 number
            message: Message text

        Returns:
            SendResult on success

        Raises:
            DeliveryError: if the provider did not accept the message
        """
        pass
