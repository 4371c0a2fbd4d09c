# apps/domain/ports/repositories.py

"""
Repository Ports - Interfaces for data persistence

These ports define contracts for accessing stored data.
Every entity repository shares the keyed-collection contract of
IRepository; menus and orders add their own lookups.
"""

from typing import Iterable, List, Optional, Protocol, TypeVar
from uuid import UUID

from apps.domain.models import (
    Menu,
    MenuGroup,
    Order,
    OrderStatus,
    OrderTable,
    Product,
)

T = TypeVar("T")


class IRepository(Protocol[T]):
    """
    Interface for a keyed entity collection

    Handles save and lookup operations for one entity type.
    """

    def save(self, entity: T) -> T:
        """
        Save an entity (create or update)

        Args:
            entity: Domain object with its id already assigned

        Returns:
            Saved entity
        """
        ...

    def find_by_id(self, entity_id: UUID) -> Optional[T]:
        """
        Retrieve an entity by ID

        Args:
            entity_id: UUID of the entity

        Returns:
            Entity if found, None otherwise
        """
        ...

    def find_all(self) -> List[T]:
        """
        Get every stored entity

        Returns:
            List of entities, order not guaranteed
        """
        ...

    def find_all_by_id_in(self, ids: Iterable[UUID]) -> List[T]:
        """
        Get the entities whose id is in ids

        Args:
            ids: Identifiers to look up; unknown ones are skipped

        Returns:
            List of found entities (at most one per distinct id)
        """
        ...

    def exists_by_id(self, entity_id: UUID) -> bool:
        """
        Check whether an entity exists

        Args:
            entity_id: UUID of the entity

        Returns:
            True if stored
        """
        ...


class IProductRepository(IRepository[Product], Protocol):
    """Interface for product persistence"""


class IMenuGroupRepository(IRepository[MenuGroup], Protocol):
    """Interface for menu group persistence"""


class IMenuRepository(IRepository[Menu], Protocol):
    """
    Interface for menu persistence

    Adds lookup of menus through their menu products.
    """

    def find_all_by_product_id(self, product_id: UUID) -> List[Menu]:
        """
        Get menus containing a product

        Args:
            product_id: UUID of the product

        Returns:
            Menus with at least one menu product referencing product_id
        """
        ...


class IOrderTableRepository(IRepository[OrderTable], Protocol):
    """Interface for order table persistence"""


class IOrderRepository(IRepository[Order], Protocol):
    """
    Interface for order persistence

    Adds the table occupancy query used when clearing tables.
    """

    def exists_by_order_table_and_status_not(
            self,
            order_table_id: UUID,
            status: OrderStatus
    ) -> bool:
        """
        Check for orders on a table in any status other than status

        Args:
            order_table_id: UUID of the order table
            status: Status to exclude (normally COMPLETED)

        Returns:
            True if at least one such order exists
        """
        ...
