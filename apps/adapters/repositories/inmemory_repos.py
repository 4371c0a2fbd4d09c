# apps/adapters/repositories/inmemory_repos.py
"""
In-Memory Repository Adapters for testing
"""
from copy import deepcopy
from typing import Dict, Generic, Iterable, List, Optional, TypeVar
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


class InMemoryRepository(Generic[T]):
    """
    In-memory keyed collection

    Stores copies so callers can't mutate stored state by accident,
    the same way a database round trip would behave.
    """

    def __init__(self):
        self._entities: Dict[UUID, T] = {}

    def save(self, entity: T) -> T:
        """Save entity to memory"""
        self._entities[entity.id] = deepcopy(entity)
        return entity

    def find_by_id(self, entity_id: UUID) -> Optional[T]:
        """Get entity by ID"""
        return deepcopy(self._entities.get(entity_id))

    def find_all(self) -> List[T]:
        return [deepcopy(entity) for entity in self._entities.values()]

    def find_all_by_id_in(self, ids: Iterable[UUID]) -> List[T]:
        return [
            deepcopy(self._entities[entity_id])
            for entity_id in set(ids)
            if entity_id in self._entities
        ]

    def exists_by_id(self, entity_id: UUID) -> bool:
        return entity_id in self._entities


class InMemoryProductRepository(InMemoryRepository[Product]):
    """
    In-memory product repository for testing
    """


class InMemoryMenuGroupRepository(InMemoryRepository[MenuGroup]):
    """
    In-memory menu group repository for testing
    """


class InMemoryMenuRepository(InMemoryRepository[Menu]):
    """
    In-memory menu repository for testing
    """

    def find_all_by_product_id(self, product_id: UUID) -> List[Menu]:
        """List menus containing the product"""
        return [
            deepcopy(menu) for menu in self._entities.values()
            if product_id in menu.product_ids
        ]


class InMemoryOrderTableRepository(InMemoryRepository[OrderTable]):
    """
    In-memory order table repository for testing
    """


class InMemoryOrderRepository(InMemoryRepository[Order]):
    """
    In-memory order repository for testing
    """

    def exists_by_order_table_and_status_not(
            self,
            order_table_id: UUID,
            status: OrderStatus
    ) -> bool:
        return any(
            order.order_table_id == order_table_id and order.status != status
            for order in self._entities.values()
        )
