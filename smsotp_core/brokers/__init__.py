"""
SMS Brokers
===========
Delivery providers behind a common `send(destination, message)` interface.
"""

from .base import BaseBrokerService, BrokerConfig, SendResult, mask_secret
from .simulate import SimulateBrokerService, SimulatedDelivery
from .zenvia import ZenviaBrokerService
from .registry import BrokerDispatcher, BrokerRegistry, ProviderIdentity, default_registry

__all__ = [
    # Base
    "BaseBrokerService",
    "BrokerConfig",
    "SendResult",
    "mask_secret",
    # Providers
    "SimulateBrokerService",
    "SimulatedDelivery",
    "ZenviaBrokerService",
    # Dispatch
    "BrokerDispatcher",
    "BrokerRegistry",
    "ProviderIdentity",
    "default_registry",
]
