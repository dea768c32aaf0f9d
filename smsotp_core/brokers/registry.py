"""
Broker Registry and Dispatcher
==============================
Resolves a configured provider name to a broker service.
"""

from enum import Enum
from typing import Dict, List, Optional, Type

import structlog

from ..exceptions import ProviderNotImplementedError, UnsupportedProviderError
from .base import BaseBrokerService, BrokerConfig
from .simulate import SimulateBrokerService
from .zenvia import ZenviaBrokerService

logger = structlog.get_logger(__name__)


class ProviderIdentity(str, Enum):
    ZENVIA = "zenvia"
    TWILIO = "twilio"
    SIMULATE = "simulate"

    @classmethod
    def parse(cls, name: Optional[str]) -> "ProviderIdentity":
        """Case-insensitive lookup; unknown names are an error."""
        try:
            return cls((name or "").strip().lower())
        except ValueError:
            raise UnsupportedProviderError(name) from None


class BrokerRegistry:
    """
    Registry of broker service classes by provider.

    A provider registered with `None` is known but has no implementation.
    """

    def __init__(self):
        self._services: Dict[ProviderIdentity, Optional[Type[BaseBrokerService]]] = {}

    def register(
        self,
        provider: ProviderIdentity,
        service_cls: Optional[Type[BaseBrokerService]],
    ) -> None:
        self._services[provider] = service_cls
        logger.debug(
            "Broker registered",
            provider=provider.value,
            implemented=service_cls is not None,
        )

    def get(self, provider: ProviderIdentity) -> Type[BaseBrokerService]:
        if provider not in self._services:
            raise UnsupportedProviderError(provider.value)
        service_cls = self._services[provider]
        if service_cls is None:
            raise ProviderNotImplementedError(provider.value)
        return service_cls

    def list(self) -> List[str]:
        """List registered provider names."""
        return [provider.value for provider in self._services]


def default_registry() -> BrokerRegistry:
    """Registry with every built-in provider."""
    registry = BrokerRegistry()
    registry.register(ProviderIdentity.ZENVIA, ZenviaBrokerService)
    registry.register(ProviderIdentity.TWILIO, None)
    registry.register(ProviderIdentity.SIMULATE, SimulateBrokerService)
    return registry


class BrokerDispatcher:
    """
    Picks the broker service for an authentication attempt.

    With `simulation` set, the simulate broker is returned whatever
    provider is configured.
    """

    def __init__(self, registry: Optional[BrokerRegistry] = None, simulation: bool = False):
        self.registry = registry or default_registry()
        self.simulation = simulation

    def resolve(self, provider_name: Optional[str], config: BrokerConfig) -> BaseBrokerService:
        """
        Build the broker service for `provider_name`.

        Raises:
            UnsupportedProviderError: unknown provider name
            ProviderNotImplementedError: known provider without implementation
            InvalidBrokerConfig: required credential missing
        """
        if self.simulation:
            provider = ProviderIdentity.SIMULATE
        else:
            provider = ProviderIdentity.parse(provider_name)

        logger.debug("Resolving broker service", requested=provider_name, provider=provider.value)
        return self.registry.get(provider)(config)
