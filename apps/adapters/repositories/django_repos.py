# apps/adapters/repositories/django_repos.py
"""
Django ORM Repository Adapters

Implements repository ports using Django models from apps.pos.
"""
import logging
from typing import Iterable, List, Optional
from uuid import UUID

from django.db import transaction

from apps.domain.models import (
    Menu,
    MenuGroup,
    MenuProduct,
    Order,
    OrderLineItem,
    OrderStatus,
    OrderTable,
    OrderType,
    Product,
)

logger = logging.getLogger(__name__)


def _product_to_domain(orm_product) -> Product:
    return Product(
        id=orm_product.id,
        name=orm_product.name,
        price=orm_product.price
    )


def _menu_to_domain(orm_menu) -> Menu:
    return Menu(
        id=orm_menu.id,
        name=orm_menu.name,
        price=orm_menu.price,
        menu_group_id=orm_menu.menu_group_id,
        displayed=orm_menu.displayed,
        menu_products=[
            MenuProduct(
                seq=mp.seq,
                product_id=mp.product_id,
                quantity=mp.quantity,
                product=_product_to_domain(mp.product)
            )
            for mp in orm_menu.menu_products.all()
        ]
    )


class DjangoProductRepository:
    """
    Product repository using Django ORM

    Wraps Django Product model with domain interface.
    """

    def save(self, product: Product) -> Product:
        """
        Save product to database

        Args:
            product: Domain Product object

        Returns:
            Saved product
        """
        from apps.pos.models import Product as ORMProduct

        try:
            orm_product, _ = ORMProduct.objects.update_or_create(
                id=product.id,
                defaults={'name': product.name, 'price': product.price}
            )
            return _product_to_domain(orm_product)

        except Exception as e:
            logger.error(f"Error saving product: {e}")
            raise

    def find_by_id(self, product_id: UUID) -> Optional[Product]:
        from apps.pos.models import Product as ORMProduct

        try:
            return _product_to_domain(ORMProduct.objects.get(id=product_id))
        except ORMProduct.DoesNotExist:
            return None

    def find_all(self) -> List[Product]:
        from apps.pos.models import Product as ORMProduct

        return [_product_to_domain(p) for p in ORMProduct.objects.all()]

    def find_all_by_id_in(self, ids: Iterable[UUID]) -> List[Product]:
        from apps.pos.models import Product as ORMProduct

        return [_product_to_domain(p) for p in ORMProduct.objects.filter(id__in=list(ids))]

    def exists_by_id(self, product_id: UUID) -> bool:
        from apps.pos.models import Product as ORMProduct

        return ORMProduct.objects.filter(id=product_id).exists()


class DjangoMenuGroupRepository:
    """
    Menu group repository using Django ORM
    """

    def save(self, menu_group: MenuGroup) -> MenuGroup:
        from apps.pos.models import MenuGroup as ORMMenuGroup

        orm_group, _ = ORMMenuGroup.objects.update_or_create(
            id=menu_group.id,
            defaults={'name': menu_group.name}
        )
        return self._to_domain(orm_group)

    def find_by_id(self, menu_group_id: UUID) -> Optional[MenuGroup]:
        from apps.pos.models import MenuGroup as ORMMenuGroup

        try:
            return self._to_domain(ORMMenuGroup.objects.get(id=menu_group_id))
        except ORMMenuGroup.DoesNotExist:
            return None

    def find_all(self) -> List[MenuGroup]:
        from apps.pos.models import MenuGroup as ORMMenuGroup

        return [self._to_domain(g) for g in ORMMenuGroup.objects.all()]

    def find_all_by_id_in(self, ids: Iterable[UUID]) -> List[MenuGroup]:
        from apps.pos.models import MenuGroup as ORMMenuGroup

        return [self._to_domain(g) for g in ORMMenuGroup.objects.filter(id__in=list(ids))]

    def exists_by_id(self, menu_group_id: UUID) -> bool:
        from apps.pos.models import MenuGroup as ORMMenuGroup

        return ORMMenuGroup.objects.filter(id=menu_group_id).exists()

    def _to_domain(self, orm_group) -> MenuGroup:
        """Convert ORM model to domain model"""
        return MenuGroup(id=orm_group.id, name=orm_group.name)


class DjangoMenuRepository:
    """
    Menu repository using Django ORM

    Menu products are written once, when the menu is created;
    later saves only update the menu row.
    """

    def save(self, menu: Menu) -> Menu:
        """
        Save menu to database

        Args:
            menu: Domain Menu object

        Returns:
            Saved menu with menu product sequence numbers populated
        """
        from apps.pos.models import Menu as ORMMenu
        from apps.pos.models import MenuProduct as ORMMenuProduct

        try:
            with transaction.atomic():
                try:
                    orm_menu = ORMMenu.objects.get(id=menu.id)
                    # Update existing
                    orm_menu.name = menu.name
                    orm_menu.price = menu.price
                    orm_menu.displayed = menu.displayed
                    orm_menu.save(update_fields=['name', 'price', 'displayed'])

                except ORMMenu.DoesNotExist:
                    # Create new
                    orm_menu = ORMMenu.objects.create(
                        id=menu.id,
                        name=menu.name,
                        price=menu.price,
                        menu_group_id=menu.menu_group_id,
                        displayed=menu.displayed
                    )
                    ORMMenuProduct.objects.bulk_create([
                        ORMMenuProduct(
                            menu=orm_menu,
                            product_id=mp.product_id,
                            quantity=mp.quantity
                        )
                        for mp in menu.menu_products
                    ])

            return self.find_by_id(orm_menu.id)

        except Exception as e:
            logger.error(f"Error saving menu: {e}")
            raise

    def find_by_id(self, menu_id: UUID) -> Optional[Menu]:
        from apps.pos.models import Menu as ORMMenu

        try:
            return _menu_to_domain(self._queryset().get(id=menu_id))
        except ORMMenu.DoesNotExist:
            return None

    def find_all(self) -> List[Menu]:
        return [_menu_to_domain(m) for m in self._queryset()]

    def find_all_by_id_in(self, ids: Iterable[UUID]) -> List[Menu]:
        return [_menu_to_domain(m) for m in self._queryset().filter(id__in=list(ids))]

    def exists_by_id(self, menu_id: UUID) -> bool:
        from apps.pos.models import Menu as ORMMenu

        return ORMMenu.objects.filter(id=menu_id).exists()

    def find_all_by_product_id(self, product_id: UUID) -> List[Menu]:
        """
        List menus containing a product

        Args:
            product_id: Product UUID

        Returns:
            Menus joined through their menu products
        """
        queryset = self._queryset().filter(menu_products__product_id=product_id).distinct()
        return [_menu_to_domain(m) for m in queryset]

    def _queryset(self):
        from apps.pos.models import Menu as ORMMenu

        return ORMMenu.objects.prefetch_related('menu_products__product')


class DjangoOrderTableRepository:
    """
    Order table repository using Django ORM
    """

    def save(self, order_table: OrderTable) -> OrderTable:
        from apps.pos.models import OrderTable as ORMOrderTable

        orm_table, _ = ORMOrderTable.objects.update_or_create(
            id=order_table.id,
            defaults={
                'name': order_table.name,
                'number_of_guests': order_table.number_of_guests,
                'empty': order_table.empty,
            }
        )
        return self._to_domain(orm_table)

    def find_by_id(self, order_table_id: UUID) -> Optional[OrderTable]:
        from apps.pos.models import OrderTable as ORMOrderTable

        if order_table_id is None:
            return None
        try:
            return self._to_domain(ORMOrderTable.objects.get(id=order_table_id))
        except ORMOrderTable.DoesNotExist:
            return None

    def find_all(self) -> List[OrderTable]:
        from apps.pos.models import OrderTable as ORMOrderTable

        return [self._to_domain(t) for t in ORMOrderTable.objects.all()]

    def find_all_by_id_in(self, ids: Iterable[UUID]) -> List[OrderTable]:
        from apps.pos.models import OrderTable as ORMOrderTable

        return [self._to_domain(t) for t in ORMOrderTable.objects.filter(id__in=list(ids))]

    def exists_by_id(self, order_table_id: UUID) -> bool:
        from apps.pos.models import OrderTable as ORMOrderTable

        return ORMOrderTable.objects.filter(id=order_table_id).exists()

    def _to_domain(self, orm_table) -> OrderTable:
        """Convert ORM model to domain model"""
        return OrderTable(
            id=orm_table.id,
            name=orm_table.name,
            number_of_guests=orm_table.number_of_guests,
            empty=orm_table.empty
        )


class DjangoOrderRepository:
    """
    Order repository using Django ORM

    Line items are written once, when the order is created;
    later saves only move the status forward.
    """

    def save(self, order: Order) -> Order:
        """
        Save order to database

        Args:
            order: Domain Order object

        Returns:
            Saved order
        """
        from apps.pos.models import Order as ORMOrder
        from apps.pos.models import OrderLineItem as ORMOrderLineItem

        try:
            with transaction.atomic():
                try:
                    orm_order = ORMOrder.objects.get(id=order.id)
                    # Update existing
                    orm_order.status = order.status.value
                    orm_order.save(update_fields=['status'])

                except ORMOrder.DoesNotExist:
                    # Create new
                    orm_order = ORMOrder.objects.create(
                        id=order.id,
                        type=order.type.value,
                        status=order.status.value,
                        order_date_time=order.order_date_time,
                        delivery_address=order.delivery_address,
                        order_table_id=order.order_table_id
                    )
                    ORMOrderLineItem.objects.bulk_create([
                        ORMOrderLineItem(
                            order=orm_order,
                            menu_id=item.menu_id,
                            quantity=item.quantity,
                            price=item.price
                        )
                        for item in order.order_line_items
                    ])

            return self.find_by_id(orm_order.id)

        except Exception as e:
            logger.error(f"Error saving order: {e}")
            raise

    def find_by_id(self, order_id: UUID) -> Optional[Order]:
        from apps.pos.models import Order as ORMOrder

        try:
            return self._to_domain(self._queryset().get(id=order_id))
        except ORMOrder.DoesNotExist:
            return None

    def find_all(self) -> List[Order]:
        return [self._to_domain(o) for o in self._queryset()]

    def find_all_by_id_in(self, ids: Iterable[UUID]) -> List[Order]:
        return [self._to_domain(o) for o in self._queryset().filter(id__in=list(ids))]

    def exists_by_id(self, order_id: UUID) -> bool:
        from apps.pos.models import Order as ORMOrder

        return ORMOrder.objects.filter(id=order_id).exists()

    def exists_by_order_table_and_status_not(
            self,
            order_table_id: UUID,
            status: OrderStatus
    ) -> bool:
        from apps.pos.models import Order as ORMOrder

        return (
            ORMOrder.objects
            .filter(order_table_id=order_table_id)
            .exclude(status=status.value)
            .exists()
        )

    def _queryset(self):
        from apps.pos.models import Order as ORMOrder

        return ORMOrder.objects.prefetch_related(
            'order_line_items__menu__menu_products__product'
        )

    def _to_domain(self, orm_order) -> Order:
        """Convert ORM model to domain model"""
        return Order(
            id=orm_order.id,
            type=OrderType(orm_order.type),
            status=OrderStatus(orm_order.status),
            order_date_time=orm_order.order_date_time,
            delivery_address=orm_order.delivery_address,
            order_table_id=orm_order.order_table_id,
            order_line_items=[
                OrderLineItem(
                    seq=item.seq,
                    menu_id=item.menu_id,
                    quantity=item.quantity,
                    price=item.price,
                    menu=_menu_to_domain(item.menu)
                )
                for item in orm_order.order_line_items.all()
            ]
        )
