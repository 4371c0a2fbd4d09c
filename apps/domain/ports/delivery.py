# apps/domain/ports/delivery.py

"""
Delivery Agency Port - Interface for dispatching delivery orders
"""

from decimal import Decimal
from typing import Protocol
from uuid import UUID


class IDeliveryAgency(Protocol):
    """
    Interface for the external delivery agency

    Called once when a delivery order is accepted.
    """

    def request_delivery(
            self,
            order_id: UUID,
            amount: Decimal,
            delivery_address: str
    ) -> None:
        """
        Ask the agency to pick up and deliver an order

        Args:
            order_id: UUID of the accepted order
            amount: Total order price to collect
            delivery_address: Where to deliver

        Raises:
            KitchenridersError: If the agency rejects the request
        """
        ...
