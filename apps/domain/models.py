# apps/domain/models.py

"""
Domain Models - Entities, Enums and Exceptions

Entities: Have identity (id), mutable (e.g., Product, Menu, Order)
Identifiers are assigned by the services on creation, so a request
object carries id=None until it is persisted.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional
from uuid import UUID


class OrderType(str, Enum):
    """How an order is fulfilled"""
    DELIVERY = "DELIVERY"
    TAKEOUT = "TAKEOUT"
    EAT_IN = "EAT_IN"


class OrderStatus(str, Enum):
    """Order lifecycle status"""
    WAITING = "WAITING"
    ACCEPTED = "ACCEPTED"
    SERVED = "SERVED"
    DELIVERING = "DELIVERING"
    DELIVERED = "DELIVERED"
    COMPLETED = "COMPLETED"


# ============================================================
# ENTITIES (Have Identity, Mutable)
# ============================================================

@dataclass
class Product:
    """
    A sellable product

    Price must be present and non-negative, name must pass the
    profanity check. Both are enforced by ProductService.
    """
    id: Optional[UUID] = None
    name: Optional[str] = None
    price: Optional[Decimal] = None


@dataclass
class MenuGroup:
    """A named category of menus"""
    id: Optional[UUID] = None
    name: Optional[str] = None


@dataclass
class MenuProduct:
    """
    A product and its quantity inside a menu

    `product` is a snapshot filled in when the menu is created; the
    authoritative price always comes from the product repository.
    """
    product_id: Optional[UUID] = None
    quantity: int = 0
    seq: Optional[int] = None
    product: Optional[Product] = None


@dataclass
class Menu:
    """
    A menu made of one or more products

    A displayed menu's price must not exceed the sum of its
    products' prices times quantities.
    """
    id: Optional[UUID] = None
    name: Optional[str] = None
    price: Optional[Decimal] = None
    menu_group_id: Optional[UUID] = None
    displayed: bool = False
    menu_products: List[MenuProduct] = field(default_factory=list)

    @property
    def product_ids(self) -> List[UUID]:
        return [mp.product_id for mp in self.menu_products]


@dataclass
class OrderTable:
    """
    A physical table in the restaurant

    Cycles between empty and occupied; guests can only be
    changed while the table is occupied.
    """
    id: Optional[UUID] = None
    name: Optional[str] = None
    number_of_guests: int = 0
    empty: bool = True

    def clear(self) -> None:
        """Reset the table to its empty state"""
        self.number_of_guests = 0
        self.empty = True


@dataclass
class OrderLineItem:
    """A menu ordered with quantity and the price the customer saw"""
    menu_id: Optional[UUID] = None
    quantity: int = 0
    price: Optional[Decimal] = None
    seq: Optional[int] = None
    menu: Optional[Menu] = None


@dataclass
class Order:
    """
    A customer order

    Entity representing the order lifecycle from WAITING to COMPLETED.
    """
    id: Optional[UUID] = None
    type: Optional[OrderType] = None
    status: Optional[OrderStatus] = None
    order_date_time: Optional[datetime] = None
    order_line_items: List[OrderLineItem] = field(default_factory=list)
    delivery_address: Optional[str] = None
    order_table_id: Optional[UUID] = None

    @property
    def menu_ids(self) -> List[UUID]:
        return [item.menu_id for item in self.order_line_items]

    def total_price(self) -> Decimal:
        """Sum of menu price times quantity across line items"""
        total = Decimal(0)
        for item in self.order_line_items:
            price = item.menu.price if item.menu is not None else item.price
            total += price * item.quantity
        return total


# ============================================================
# DOMAIN EXCEPTIONS
# ============================================================

class DomainException(Exception):
    """Base exception for domain layer"""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails"""
    pass


class InvalidPriceError(ValidationError):
    """Raised when a price is missing, negative or inconsistent"""
    pass


class InvalidNameError(ValidationError):
    """Raised when a name is missing or contains profanity"""
    pass


class InvalidQuantityError(ValidationError):
    """Raised when a quantity is negative"""
    pass


class NotFoundError(DomainException):
    """Raised when entity not found"""
    pass


class InvalidStateError(DomainException):
    """Raised when an operation is not allowed in the current state"""
    pass
