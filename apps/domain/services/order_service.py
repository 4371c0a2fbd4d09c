# apps/domain/services/order_service.py

"""
Order Service - Takes orders and drives them through their lifecycle

Lifecycle:
    WAITING -> ACCEPTED -> SERVED -> COMPLETED            (TAKEOUT, EAT_IN)
    WAITING -> ACCEPTED -> SERVED -> DELIVERING
            -> DELIVERED -> COMPLETED                     (DELIVERY)
"""

import logging
from datetime import datetime, timezone
from typing import List
from uuid import UUID, uuid4

from apps.domain.models import (
    InvalidPriceError,
    InvalidQuantityError,
    InvalidStateError,
    NotFoundError,
    Order,
    OrderLineItem,
    OrderStatus,
    OrderType,
    ValidationError,
)
from apps.domain.ports.delivery import IDeliveryAgency
from apps.domain.ports.repositories import (
    IMenuRepository,
    IOrderRepository,
    IOrderTableRepository,
)

logger = logging.getLogger(__name__)


class OrderService:
    """
    Order service

    Responsibilities:
    - Validate and register orders
    - Enforce status transitions
    - Request delivery for accepted delivery orders
    - Free eat-in tables once their orders are completed
    """

    def __init__(
        self,
        order_repo: IOrderRepository,
        menu_repo: IMenuRepository,
        order_table_repo: IOrderTableRepository,
        delivery_agency: IDeliveryAgency,
    ):
        """
        Initialize order service

        Args:
            order_repo: Repository for order persistence
            menu_repo: Repository to resolve ordered menus
            order_table_repo: Repository to resolve eat-in tables
            delivery_agency: Agency notified when delivery orders are accepted
        """
        self._order_repo = order_repo
        self._menu_repo = menu_repo
        self._order_table_repo = order_table_repo
        self._delivery_agency = delivery_agency

    def create(self, request: Order) -> Order:
        """
        Register a new order

        Args:
            request: Candidate order

        Returns:
            Persisted order in WAITING status

        Raises:
            ValidationError: If type, line items, menus or delivery address are invalid
            InvalidQuantityError: If a takeout/delivery quantity is negative
            InvalidStateError: If a menu is hidden or the eat-in table is empty
            InvalidPriceError: If a line item price differs from the menu price
            NotFoundError: If the eat-in table doesn't exist
        """
        order_type = request.type
        if order_type is None:
            raise ValidationError("Order type is required")

        if not request.order_line_items:
            raise ValidationError("Order must contain at least one line item")

        menus = {m.id: m for m in self._menu_repo.find_all_by_id_in(request.menu_ids)}
        if len(menus) != len(request.order_line_items):
            raise ValidationError("Order references unknown or duplicate menus")

        order_line_items = []
        for seq, item_request in enumerate(request.order_line_items, start=1):
            quantity = item_request.quantity
            # eat-in orders may carry negative quantities to cancel items
            if order_type != OrderType.EAT_IN and quantity < 0:
                raise InvalidQuantityError(f"Quantity must not be negative: {quantity}")

            menu = menus[item_request.menu_id]
            if not menu.displayed:
                raise InvalidStateError(f"Menu {menu.id} is not displayed")
            if item_request.price is None or menu.price != item_request.price:
                raise InvalidPriceError(f"Line item price does not match menu {menu.id}")

            order_line_items.append(
                OrderLineItem(
                    seq=seq,
                    menu_id=menu.id,
                    quantity=quantity,
                    price=menu.price,
                    menu=menu,
                )
            )

        order = Order(
            id=uuid4(),
            type=order_type,
            status=OrderStatus.WAITING,
            order_date_time=datetime.now(timezone.utc),
            order_line_items=order_line_items,
        )

        if order_type == OrderType.DELIVERY:
            if not request.delivery_address:
                raise ValidationError("Delivery address is required")
            order.delivery_address = request.delivery_address

        if order_type == OrderType.EAT_IN:
            order_table = self._order_table_repo.find_by_id(request.order_table_id)
            if not order_table:
                raise NotFoundError(f"Order table {request.order_table_id} not found")
            if order_table.empty:
                raise InvalidStateError(f"Order table {order_table.id} is empty")
            order.order_table_id = order_table.id

        order = self._order_repo.save(order)
        logger.info(f"Created {order_type.value} order {order.id}")

        return order

    def accept(self, order_id: UUID) -> Order:
        """
        Accept a waiting order

        Delivery orders are handed to the delivery agency with their
        total price before the status changes.

        Raises:
            NotFoundError: If order doesn't exist
            InvalidStateError: If the order is not WAITING
        """
        order = self._get_order(order_id)
        self._require_status(order, OrderStatus.WAITING)

        if order.type == OrderType.DELIVERY:
            self._delivery_agency.request_delivery(
                order.id, order.total_price(), order.delivery_address
            )

        return self._transition(order, OrderStatus.ACCEPTED)

    def serve(self, order_id: UUID) -> Order:
        order = self._get_order(order_id)
        self._require_status(order, OrderStatus.ACCEPTED)
        return self._transition(order, OrderStatus.SERVED)

    def start_delivery(self, order_id: UUID) -> Order:
        """
        Hand a served delivery order to the rider

        Raises:
            NotFoundError: If order doesn't exist
            InvalidStateError: If the order is not a served delivery order
        """
        order = self._get_order(order_id)
        if order.type != OrderType.DELIVERY:
            raise InvalidStateError(f"Order {order_id} is not a delivery order")
        self._require_status(order, OrderStatus.SERVED)
        return self._transition(order, OrderStatus.DELIVERING)

    def complete_delivery(self, order_id: UUID) -> Order:
        order = self._get_order(order_id)
        self._require_status(order, OrderStatus.DELIVERING)
        return self._transition(order, OrderStatus.DELIVERED)

    def complete(self, order_id: UUID) -> Order:
        """
        Complete an order

        Delivery orders must be DELIVERED, takeout and eat-in orders
        SERVED. Completing the last open eat-in order of a table
        clears the table.

        Raises:
            NotFoundError: If order doesn't exist
            InvalidStateError: If the order is not ready to complete
        """
        order = self._get_order(order_id)

        if order.type == OrderType.DELIVERY:
            self._require_status(order, OrderStatus.DELIVERED)
        else:
            self._require_status(order, OrderStatus.SERVED)

        order = self._transition(order, OrderStatus.COMPLETED)

        if order.type == OrderType.EAT_IN:
            if not self._order_repo.exists_by_order_table_and_status_not(
                    order.order_table_id, OrderStatus.COMPLETED
            ):
                order_table = self._order_table_repo.find_by_id(order.order_table_id)
                if order_table:
                    order_table.clear()
                    self._order_table_repo.save(order_table)
                    logger.info(f"Cleared order table {order_table.id}")

        return order

    def find_all(self) -> List[Order]:
        return self._order_repo.find_all()

    def _get_order(self, order_id: UUID) -> Order:
        order = self._order_repo.find_by_id(order_id)
        if not order:
            raise NotFoundError(f"Order {order_id} not found")
        return order

    def _require_status(self, order: Order, expected: OrderStatus) -> None:
        if order.status != expected:
            logger.warning(f"Rejected transition of order {order.id} from {order.status.value}")
            raise InvalidStateError(
                f"Order {order.id} is {order.status.value}, expected {expected.value}"
            )

    def _transition(self, order: Order, status: OrderStatus) -> Order:
        order.status = status
        order = self._order_repo.save(order)
        logger.info(f"Order {order.id} is now {status.value}")
        return order
