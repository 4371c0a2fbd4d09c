# apps/domain/tests/fixtures.py
"""
Builders for domain objects used across service tests
"""
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

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

INVALID_ID = UUID("00000000-0000-0000-0000-000000000000")


def product(name: str = "후라이드", price: int = 16000) -> Product:
    return Product(id=uuid4(), name=name, price=Decimal(price))


def menu_group(name: str = "두마리메뉴") -> MenuGroup:
    return MenuGroup(id=uuid4(), name=name)


def menu_product(p: Product = None, quantity: int = 2) -> MenuProduct:
    p = p or product()
    return MenuProduct(product_id=p.id, quantity=quantity, seq=1, product=p)


def menu(price: int = 19000, displayed: bool = True, *menu_products: MenuProduct) -> Menu:
    return Menu(
        id=uuid4(),
        name="후라이드+후라이드",
        price=Decimal(price),
        menu_group_id=menu_group().id,
        displayed=displayed,
        menu_products=list(menu_products) or [menu_product()],
    )


def order_table(empty: bool = False, number_of_guests: int = 0) -> OrderTable:
    return OrderTable(id=uuid4(), name="1번", number_of_guests=number_of_guests, empty=empty)


def order_line_item(m: Menu = None, quantity: int = 3) -> OrderLineItem:
    m = m or menu()
    return OrderLineItem(seq=1, menu_id=m.id, quantity=quantity, price=m.price, menu=m)


def order(
        status: OrderStatus,
        order_type: OrderType = OrderType.TAKEOUT,
        table: OrderTable = None,
        *items: OrderLineItem
) -> Order:
    return Order(
        id=uuid4(),
        type=order_type,
        status=status,
        order_date_time=datetime(2020, 1, 1, 12, 0, tzinfo=timezone.utc),
        order_line_items=list(items) or [order_line_item()],
        delivery_address="서울시 송파구 위례성대로 2" if order_type == OrderType.DELIVERY else None,
        order_table_id=table.id if table else None,
    )


def sat() -> OrderTable:
    """An occupied table with four guests"""
    return order_table(empty=False, number_of_guests=4)
