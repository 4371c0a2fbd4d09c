# apps/domain/pricing.py
"""
Price rules shared by the product, menu and order services
"""
from decimal import Decimal
from typing import Dict, Iterable, Optional
from uuid import UUID

from apps.domain.models import InvalidPriceError, MenuProduct, Product


def require_valid_price(price: Optional[Decimal]) -> Decimal:
    """
    Validate a price coming from a request

    Args:
        price: Candidate price, may be None

    Returns:
        The price, unchanged

    Raises:
        InvalidPriceError: If price is missing or negative
    """
    if price is None:
        raise InvalidPriceError("Price is required")
    if price < 0:
        raise InvalidPriceError(f"Price must not be negative: {price}")
    return price


def menu_products_total(
        menu_products: Iterable[MenuProduct],
        products: Dict[UUID, Product]
) -> Decimal:
    """
    Sum of product price times quantity for a menu

    Args:
        menu_products: Menu products to price
        products: Current products keyed by id

    Returns:
        Total as Decimal

    Raises:
        KeyError: If a menu product references a product not in products
    """
    total = Decimal(0)
    for menu_product in menu_products:
        product = products[menu_product.product_id]
        total += product.price * menu_product.quantity
    return total
