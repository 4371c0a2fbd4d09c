# apps/adapters/delivery/fake.py
"""
Fake Delivery Agency for testing

Records delivery requests instead of sending them.
"""
from decimal import Decimal
from typing import List, Tuple
from uuid import UUID


class FakeDeliveryAgency:
    """
    Fake delivery agency implementation for unit testing
    """

    def __init__(self):
        self.requests: List[Tuple[UUID, Decimal, str]] = []

    def request_delivery(self, order_id: UUID, amount: Decimal, delivery_address: str) -> None:
        """Store the request for later inspection"""
        self.requests.append((order_id, amount, delivery_address))

    @property
    def request_delivery_called(self) -> bool:
        return len(self.requests) > 0
