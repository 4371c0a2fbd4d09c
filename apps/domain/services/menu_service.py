# apps/domain/services/menu_service.py

"""
Menu Service - Composes products into menus

Enforces the menu price rule: a menu may not cost more than the
products it is made of (price times quantity, summed).
"""

import logging
from decimal import Decimal
from typing import List
from uuid import UUID, uuid4

from apps.domain.models import (
    InvalidNameError,
    InvalidPriceError,
    InvalidQuantityError,
    InvalidStateError,
    Menu,
    MenuProduct,
    NotFoundError,
    ValidationError,
)
from apps.domain.ports.profanity import IProfanityChecker
from apps.domain.ports.repositories import (
    IMenuGroupRepository,
    IMenuRepository,
    IProductRepository,
)
from apps.domain.pricing import menu_products_total, require_valid_price

logger = logging.getLogger(__name__)


class MenuService:
    """
    Menu service

    Responsibilities:
    - Validate and register menus
    - Change menu prices
    - Display and hide menus
    """

    def __init__(
        self,
        menu_repo: IMenuRepository,
        menu_group_repo: IMenuGroupRepository,
        product_repo: IProductRepository,
        profanity_checker: IProfanityChecker,
    ):
        """
        Initialize menu service

        Args:
            menu_repo: Repository for menu persistence
            menu_group_repo: Repository to resolve menu groups
            product_repo: Repository to resolve products and prices
            profanity_checker: Screens menu names
        """
        self._menu_repo = menu_repo
        self._menu_group_repo = menu_group_repo
        self._product_repo = product_repo
        self._profanity_checker = profanity_checker

    def create(self, request: Menu) -> Menu:
        """
        Register a new menu

        Steps:
        1. Validate price
        2. Resolve menu group
        3. Resolve products and validate quantities
        4. Check price against the product sum
        5. Screen the name

        Args:
            request: Candidate menu

        Returns:
            Persisted menu with a generated id

        Raises:
            InvalidPriceError: If price is missing, negative or above the product sum
            NotFoundError: If the menu group doesn't exist
            ValidationError: If menu products are missing or reference unknown products
            InvalidQuantityError: If a quantity is negative
            InvalidNameError: If name is missing or contains profanity
        """
        price = require_valid_price(request.price)

        menu_group = self._menu_group_repo.find_by_id(request.menu_group_id)
        if not menu_group:
            raise NotFoundError(f"Menu group {request.menu_group_id} not found")

        if not request.menu_products:
            raise ValidationError("Menu must contain at least one product")

        products = {
            p.id: p for p in self._product_repo.find_all_by_id_in(request.product_ids)
        }
        if len(products) != len(request.menu_products):
            raise ValidationError("Menu references unknown or duplicate products")

        menu_products = []
        for seq, menu_product_request in enumerate(request.menu_products, start=1):
            quantity = menu_product_request.quantity
            if quantity < 0:
                raise InvalidQuantityError(f"Quantity must not be negative: {quantity}")

            product = products[menu_product_request.product_id]
            menu_products.append(
                MenuProduct(
                    seq=seq,
                    product_id=product.id,
                    quantity=quantity,
                    product=product,
                )
            )

        if price > menu_products_total(menu_products, products):
            raise InvalidPriceError("Menu price exceeds the sum of its products")

        name = request.name
        if name is None:
            raise InvalidNameError("Menu name is required")
        if self._profanity_checker.contains_profanity(name):
            logger.warning(f"Rejected menu name containing profanity: {name!r}")
            raise InvalidNameError("Menu name contains profanity")

        menu = Menu(
            id=uuid4(),
            name=name,
            price=price,
            menu_group_id=menu_group.id,
            displayed=request.displayed,
            menu_products=menu_products,
        )
        menu = self._menu_repo.save(menu)
        logger.info(f"Created menu {menu.id} in group {menu_group.id}")

        return menu

    def change_price(self, menu_id: UUID, request: Menu) -> Menu:
        """
        Change the price of a menu

        Args:
            menu_id: UUID of the menu
            request: Carries the new price

        Returns:
            Updated menu

        Raises:
            InvalidPriceError: If price is missing, negative or above the product sum
            NotFoundError: If menu doesn't exist
        """
        price = require_valid_price(request.price)
        menu = self._get_menu(menu_id)

        if price > self._products_total(menu):
            raise InvalidPriceError("Menu price exceeds the sum of its products")

        menu.price = price
        return self._menu_repo.save(menu)

    def display(self, menu_id: UUID) -> Menu:
        """
        Show a menu to customers

        Raises:
            NotFoundError: If menu doesn't exist
            InvalidStateError: If the menu price exceeds the sum of its products
        """
        menu = self._get_menu(menu_id)

        if menu.price > self._products_total(menu):
            raise InvalidStateError(f"Menu {menu_id} is priced above its products")

        menu.displayed = True
        return self._menu_repo.save(menu)

    def hide(self, menu_id: UUID) -> Menu:
        """Hide a menu from customers"""
        menu = self._get_menu(menu_id)
        menu.displayed = False
        return self._menu_repo.save(menu)

    def find_all(self) -> List[Menu]:
        return self._menu_repo.find_all()

    def _get_menu(self, menu_id: UUID) -> Menu:
        menu = self._menu_repo.find_by_id(menu_id)
        if not menu:
            raise NotFoundError(f"Menu {menu_id} not found")
        return menu

    def _products_total(self, menu: Menu) -> Decimal:
        """Price a menu against the current product prices"""
        products = {
            p.id: p for p in self._product_repo.find_all_by_id_in(menu.product_ids)
        }
        return menu_products_total(menu.menu_products, products)
