# apps/domain/services/order_table_service.py

"""
Order Table Service - Tracks table occupancy and guests

A table is either empty or occupied:
    empty --sit--> occupied --clear--> empty
Guests can only be changed while the table is occupied, and a table
can only be cleared once all of its orders are completed.
"""

import logging
from typing import List
from uuid import UUID, uuid4

from apps.domain.models import (
    InvalidNameError,
    InvalidStateError,
    NotFoundError,
    OrderStatus,
    OrderTable,
    ValidationError,
)
from apps.domain.ports.repositories import IOrderRepository, IOrderTableRepository

logger = logging.getLogger(__name__)


class OrderTableService:
    """
    Order table service

    Responsibilities:
    - Register tables
    - Seat and clear tables
    - Track the number of guests
    """

    def __init__(
        self,
        order_table_repo: IOrderTableRepository,
        order_repo: IOrderRepository,
    ):
        """
        Initialize order table service

        Args:
            order_table_repo: Repository for table persistence
            order_repo: Repository used to check for open orders
        """
        self._order_table_repo = order_table_repo
        self._order_repo = order_repo

    def create(self, request: OrderTable) -> OrderTable:
        """
        Register a new table

        New tables start empty with no guests.

        Raises:
            InvalidNameError: If name is missing or empty
        """
        name = request.name
        if not name:
            raise InvalidNameError("Order table name is required")

        order_table = OrderTable(id=uuid4(), name=name, number_of_guests=0, empty=True)
        order_table = self._order_table_repo.save(order_table)
        logger.info(f"Created order table {order_table.id}")

        return order_table

    def sit(self, order_table_id: UUID) -> OrderTable:
        """
        Mark a table as occupied

        Raises:
            NotFoundError: If table doesn't exist
        """
        order_table = self._get_order_table(order_table_id)
        order_table.empty = False
        return self._order_table_repo.save(order_table)

    def clear(self, order_table_id: UUID) -> OrderTable:
        """
        Empty a table and reset its guests

        Raises:
            NotFoundError: If table doesn't exist
            InvalidStateError: If the table still has uncompleted orders
        """
        order_table = self._get_order_table(order_table_id)

        if self._order_repo.exists_by_order_table_and_status_not(
                order_table_id, OrderStatus.COMPLETED
        ):
            logger.warning(f"Refused to clear order table {order_table_id} with open orders")
            raise InvalidStateError(f"Order table {order_table_id} has uncompleted orders")

        order_table.clear()
        return self._order_table_repo.save(order_table)

    def change_number_of_guests(self, order_table_id: UUID, request: OrderTable) -> OrderTable:
        """
        Change the number of guests at an occupied table

        Args:
            order_table_id: UUID of the table
            request: Carries the new number of guests

        Returns:
            Updated table

        Raises:
            ValidationError: If number of guests is negative
            NotFoundError: If table doesn't exist
            InvalidStateError: If the table is empty
        """
        number_of_guests = request.number_of_guests
        if number_of_guests < 0:
            raise ValidationError(f"Number of guests must not be negative: {number_of_guests}")

        order_table = self._get_order_table(order_table_id)
        if order_table.empty:
            raise InvalidStateError(f"Order table {order_table_id} is empty")

        order_table.number_of_guests = number_of_guests
        return self._order_table_repo.save(order_table)

    def find_all(self) -> List[OrderTable]:
        return self._order_table_repo.find_all()

    def _get_order_table(self, order_table_id: UUID) -> OrderTable:
        order_table = self._order_table_repo.find_by_id(order_table_id)
        if not order_table:
            raise NotFoundError(f"Order table {order_table_id} not found")
        return order_table
