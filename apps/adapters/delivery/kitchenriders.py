# apps/adapters/delivery/kitchenriders.py
"""
Kitchenriders Delivery Agency Adapter

Implements IDeliveryAgency by posting delivery requests to the
Kitchenriders API. Without a configured endpoint the request is only
logged, which is how local development runs.
"""
import logging
from decimal import Decimal
from typing import Optional
from uuid import UUID

import requests

from apps.core.exceptions import KitchenridersError

logger = logging.getLogger(__name__)


class KitchenridersClient:
    """
    Kitchenriders API adapter
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: float = 10.0,
        session: requests.Session = None,
    ):
        """
        Initialize Kitchenriders client

        Args:
            base_url: API base URL; None disables outbound calls
            api_key: Optional bearer token
            timeout: Request timeout in seconds
            session: Optional requests session
        """
        self.base_url = base_url.rstrip("/") if base_url else None
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

        if not self.base_url:
            logger.warning("Kitchenriders base URL is not set, delivery requests will only be logged")

    def request_delivery(self, order_id: UUID, amount: Decimal, delivery_address: str) -> None:
        """
        Request delivery of an accepted order

        Args:
            order_id: UUID of the order
            amount: Amount to collect
            delivery_address: Destination address

        Raises:
            KitchenridersError: If the API call fails
        """
        logger.info(f"Delivery request: order={order_id} amount={amount} address={delivery_address!r}")

        if not self.base_url:
            return

        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        payload = {
            "orderId": str(order_id),
            "amount": str(amount),
            "deliveryAddress": delivery_address,
        }

        try:
            r = self.session.post(
                f"{self.base_url}/deliveries",
                headers=headers,
                json=payload,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Kitchenriders request failed: {e}")
            raise KitchenridersError(f"Delivery request failed: {e}") from e

        if r.status_code >= 400:
            logger.error(f"Kitchenriders API error: {r.status_code} - {r.text[:200]}")
            raise KitchenridersError(f"Delivery request returned status {r.status_code}")
