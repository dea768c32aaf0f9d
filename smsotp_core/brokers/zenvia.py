"""
Zenvia SMS Broker
=================
Delivery through the Zenvia classic REST API.
"""

from base64 import b64encode
from typing import Any, Dict, Optional

import httpx
import structlog

from ..exceptions import DeliveryError
from ..messaging import mask_phone
from .base import BaseBrokerService, BrokerConfig, SendResult

logger = structlog.get_logger(__name__)

ZENVIA_API_URL = "https://api-rest.zenvia.com/services/send-sms"
CONNECT_TIMEOUT = 30.0
REQUEST_TIMEOUT = 30.0


class ZenviaBrokerService(BaseBrokerService):
    """
    Zenvia SMS broker.

    Authenticates with HTTP Basic (key:secret) and sends the short code as
    the sender.
    """

    name = "zenvia"
    required_fields = ("key", "secret", "short_code")

    def __init__(
        self,
        config: BrokerConfig,
        transport: Optional[httpx.BaseTransport] = None,
        url: str = ZENVIA_API_URL,
    ):
        super().__init__(config)
        self.url = url
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        auth = b64encode(f"{self.config.key}:{self.config.secret}".encode("utf-8")).decode()
        return {
            "Authorization": f"Basic {auth}",
            "Content-Type": "application/json",
        }

    def build_payload(self, destination: str, message: str) -> Dict[str, Any]:
        return {
            "sendSmsRequest": {
                "to": destination,
                "msg": message,
                "sender": self.config.short_code,
            }
        }

    def send(self, destination: str, message: str) -> SendResult:
        """Send SMS via Zenvia."""
        logger.debug("Sending SMS via Zenvia", phone=mask_phone(destination))

        timeout = httpx.Timeout(REQUEST_TIMEOUT, connect=CONNECT_TIMEOUT)
        try:
            with httpx.Client(timeout=timeout, transport=self._transport) as client:
                response = client.post(
                    self.url,
                    json=self.build_payload(destination, message),
                    headers=self._headers(),
                )
        except httpx.TimeoutException as e:
            logger.error("Zenvia request timed out", error=str(e))
            raise DeliveryError("Request timed out", provider=self.name) from e
        except httpx.HTTPError as e:
            logger.error("Zenvia request failed", error=str(e))
            raise DeliveryError(f"Failed to connect: {e}", provider=self.name) from e

        if not response.is_success:
            logger.error(
                "Zenvia SMS send failed",
                status_code=response.status_code,
                body=response.text,
            )
            raise DeliveryError(
                f"Failed to send SMS. HTTP Status: {response.status_code}",
                provider=self.name,
                status_code=response.status_code,
            )

        logger.info("SMS sent via Zenvia", phone=mask_phone(destination))
        return SendResult(success=True, provider=self.name, status_code=response.status_code)
