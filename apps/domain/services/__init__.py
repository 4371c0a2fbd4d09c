# apps/domain/services/__init__.py
"""
Domain Services - Use cases of the point-of-sale system
"""
from apps.domain.services.menu_group_service import MenuGroupService
from apps.domain.services.menu_service import MenuService
from apps.domain.services.order_service import OrderService
from apps.domain.services.order_table_service import OrderTableService
from apps.domain.services.product_service import ProductService

__all__ = [
    "MenuGroupService",
    "MenuService",
    "OrderService",
    "OrderTableService",
    "ProductService",
]
