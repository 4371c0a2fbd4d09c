# apps/domain/services/product_service.py

"""
Product Service - Registers products and manages their prices

Changing a product's price may break the price rule of menus that
contain it; those menus are hidden.
"""

import logging
from typing import List
from uuid import UUID, uuid4

from apps.domain.models import InvalidNameError, NotFoundError, Product
from apps.domain.ports.profanity import IProfanityChecker
from apps.domain.ports.repositories import IMenuRepository, IProductRepository
from apps.domain.pricing import menu_products_total, require_valid_price

logger = logging.getLogger(__name__)


class ProductService:
    """
    Product service

    Responsibilities:
    - Validate and register products
    - Change product prices and hide menus that become overpriced
    - List products
    """

    def __init__(
        self,
        product_repo: IProductRepository,
        menu_repo: IMenuRepository,
        profanity_checker: IProfanityChecker,
    ):
        """
        Initialize product service

        Args:
            product_repo: Repository for product persistence
            menu_repo: Repository used to find menus containing a product
            profanity_checker: Screens product names
        """
        self._product_repo = product_repo
        self._menu_repo = menu_repo
        self._profanity_checker = profanity_checker

    def create(self, request: Product) -> Product:
        """
        Register a new product

        Args:
            request: Candidate product with name and price

        Returns:
            Persisted product with a generated id

        Raises:
            InvalidPriceError: If price is missing or negative
            InvalidNameError: If name is missing or contains profanity
        """
        price = require_valid_price(request.price)

        name = request.name
        if not name:
            raise InvalidNameError("Product name is required")
        if self._profanity_checker.contains_profanity(name):
            logger.warning(f"Rejected product name containing profanity: {name!r}")
            raise InvalidNameError("Product name contains profanity")

        product = Product(id=uuid4(), name=name, price=price)
        product = self._product_repo.save(product)
        logger.info(f"Created product {product.id}")

        return product

    def change_price(self, product_id: UUID, request: Product) -> Product:
        """
        Change the price of a product

        Every menu containing the product is re-priced against the new
        price and hidden if its own price is now higher than the sum.

        Args:
            product_id: UUID of the product
            request: Carries the new price

        Returns:
            Updated product

        Raises:
            InvalidPriceError: If price is missing or negative
            NotFoundError: If product doesn't exist
        """
        price = require_valid_price(request.price)

        product = self._product_repo.find_by_id(product_id)
        if not product:
            raise NotFoundError(f"Product {product_id} not found")

        product.price = price
        product = self._product_repo.save(product)

        for menu in self._menu_repo.find_all_by_product_id(product_id):
            products = {
                p.id: p for p in self._product_repo.find_all_by_id_in(menu.product_ids)
            }
            if menu.price > menu_products_total(menu.menu_products, products):
                menu.displayed = False
                self._menu_repo.save(menu)
                logger.info(f"Hid menu {menu.id} after price change of product {product_id}")

        return product

    def find_all(self) -> List[Product]:
        """
        List all products

        Returns:
            List of Product objects
        """
        return self._product_repo.find_all()
