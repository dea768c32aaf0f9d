"""
Authenticator Configuration
===========================
Parses the flow engine's string-keyed authenticator config.
"""

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError

from .brokers.base import BrokerConfig
from .exceptions import ConfigurationError

DEFAULT_PHONE_ATTRIBUTE = "mobile_number"


class AuthenticatorSettings(BaseModel):
    """Settings for one SMS OTP authenticator execution."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    length: int = Field(6, ge=1)
    ttl: int = Field(300, ge=1)  # seconds
    sender_name: str = Field("Keycloak", alias="senderName")
    simulation: bool = True
    phone_attribute_name: str = DEFAULT_PHONE_ATTRIBUTE
    broker: Optional[str] = Field(None, alias="brokers")
    broker_key: Optional[str] = None
    broker_secret: Optional[SecretStr] = None
    broker_short_code: Optional[str] = None

    @classmethod
    def from_mapping(cls, config: Optional[Mapping[str, Any]]) -> "AuthenticatorSettings":
        """
        Build settings from raw config values.

        Blank values are treated as unset so defaults apply.

        Raises:
            ConfigurationError: if a value cannot be parsed
        """
        values = {
            key: value
            for key, value in (config or {}).items()
            if value is not None and not (isinstance(value, str) and not value.strip())
        }
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            error = e.errors()[0]
            key = ".".join(str(part) for part in error["loc"]) or "config"
            raise ConfigurationError(
                f"Invalid value for '{key}': {error['msg']}",
                details=e.errors(),
            ) from e

    def broker_config(self) -> BrokerConfig:
        """Build the provider credential bundle for this attempt."""
        return BrokerConfig(
            short_code=self.broker_short_code,
            key=self.broker_key,
            secret=self.broker_secret.get_secret_value() if self.broker_secret else None,
        )
