"""
Simulated SMS Broker
====================
Records messages instead of sending them. Development and tests only.
"""

from dataclasses import dataclass
from typing import List, Optional

import structlog

from ..messaging import mask_phone
from .base import BaseBrokerService, BrokerConfig, SendResult, mask_secret

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SimulatedDelivery:
    destination: Optional[str]
    message: Optional[str]
    key: str
    secret: str
    short_code: Optional[str]


class SimulateBrokerService(BaseBrokerService):
    """Broker that never touches the network and always succeeds."""

    name = "simulate"

    def __init__(self, config: Optional[BrokerConfig] = None):
        super().__init__(config or BrokerConfig())
        self.outbox: List[SimulatedDelivery] = []

    def send(self, destination: str, message: str) -> SendResult:
        delivery = SimulatedDelivery(
            destination=destination,
            message=message,
            key=mask_secret(self.config.key),
            secret=mask_secret(self.config.secret),
            short_code=self.config.short_code,
        )
        self.outbox.append(delivery)

        logger.warning("Simulate mode, use only in development environments")
        logger.info(
            "Simulated SMS delivery",
            phone=mask_phone(destination),
            key=delivery.key,
            secret=delivery.secret,
            short_code=delivery.short_code,
        )
        return SendResult(success=True, provider=self.name)
