# apps/infrastructure/container.py

"""
Dependency Injection Container

Simple factory functions for creating fully-wired services.
No magic, no framework - just explicit construction.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
import logging

from apps.infrastructure.config import get_config

logger = logging.getLogger(__name__)


# ============================================================
# ADAPTER FACTORIES
# ============================================================

def create_profanity_checker(config: Dict[str, Any]):
    """
    Factory for profanity checker based on configuration

    Args:
        config: Profanity configuration dict with 'type' key

    Returns:
        Implementation of IProfanityChecker

    Raises:
        ValueError: If checker type is unknown
    """
    checker_type = config.get('type', 'fake')

    if checker_type == 'fake':
        from apps.adapters.profanity.fake import FakeProfanityChecker
        return FakeProfanityChecker(words=config.get('words'))

    elif checker_type == 'purgomalum':
        from apps.adapters.profanity.purgomalum import PurgomalumClient
        return PurgomalumClient(
            base_url=config.get('base_url', 'https://www.purgomalum.com'),
            timeout=config.get('timeout', 5.0)
        )

    else:
        raise ValueError(f"Unknown profanity checker type: {checker_type}")


def create_delivery_agency(config: Dict[str, Any]):
    """
    Factory for delivery agency based on configuration

    Args:
        config: Delivery configuration dict with 'type' key

    Returns:
        Implementation of IDeliveryAgency

    Raises:
        ValueError: If agency type is unknown
    """
    agency_type = config.get('type', 'fake')

    if agency_type == 'fake':
        from apps.adapters.delivery.fake import FakeDeliveryAgency
        return FakeDeliveryAgency()

    elif agency_type == 'kitchenriders':
        from apps.adapters.delivery.kitchenriders import KitchenridersClient
        return KitchenridersClient(
            base_url=config.get('base_url'),
            api_key=config.get('api_key'),
            timeout=config.get('timeout', 10.0)
        )

    else:
        raise ValueError(f"Unknown delivery agency type: {agency_type}")


@dataclass
class Repositories:
    """One repository per entity type, sharing a backend"""
    products: Any
    menu_groups: Any
    menus: Any
    order_tables: Any
    orders: Any


def create_repositories(use_inmemory: bool = False) -> Repositories:
    """
    Factory for the repository set

    Args:
        use_inmemory: If True, use in-memory repos (for testing)

    Returns:
        Repositories bundle
    """
    if use_inmemory:
        from apps.adapters.repositories.inmemory_repos import (
            InMemoryMenuGroupRepository,
            InMemoryMenuRepository,
            InMemoryOrderRepository,
            InMemoryOrderTableRepository,
            InMemoryProductRepository,
        )
        return Repositories(
            products=InMemoryProductRepository(),
            menu_groups=InMemoryMenuGroupRepository(),
            menus=InMemoryMenuRepository(),
            order_tables=InMemoryOrderTableRepository(),
            orders=InMemoryOrderRepository(),
        )
    else:
        from apps.adapters.repositories.django_repos import (
            DjangoMenuGroupRepository,
            DjangoMenuRepository,
            DjangoOrderRepository,
            DjangoOrderTableRepository,
            DjangoProductRepository,
        )
        return Repositories(
            products=DjangoProductRepository(),
            menu_groups=DjangoMenuGroupRepository(),
            menus=DjangoMenuRepository(),
            order_tables=DjangoOrderTableRepository(),
            orders=DjangoOrderRepository(),
        )


def _resolve(config: Optional[Dict], repositories: Optional[Repositories]):
    config = config or get_config()
    validate_config(config)
    if repositories is None:
        use_inmemory = config.get('repositories', {}).get('type') == 'inmemory'
        repositories = create_repositories(use_inmemory=use_inmemory)
    return config, repositories


# ============================================================
# SERVICE FACTORIES
# ============================================================

def create_product_service(
        config: Optional[Dict] = None,
        repositories: Optional[Repositories] = None
):
    """
    Create fully-wired ProductService

    Args:
        config: Optional configuration dict. If None, uses environment config.
        repositories: Optional repository bundle to share between services

    Returns:
        ProductService instance with all dependencies injected
    """
    config, repositories = _resolve(config, repositories)

    from apps.domain.services.product_service import ProductService
    return ProductService(
        product_repo=repositories.products,
        menu_repo=repositories.menus,
        profanity_checker=create_profanity_checker(config['profanity'])
    )


def create_menu_group_service(
        config: Optional[Dict] = None,
        repositories: Optional[Repositories] = None
):
    """Create fully-wired MenuGroupService"""
    config, repositories = _resolve(config, repositories)

    from apps.domain.services.menu_group_service import MenuGroupService
    return MenuGroupService(menu_group_repo=repositories.menu_groups)


def create_menu_service(
        config: Optional[Dict] = None,
        repositories: Optional[Repositories] = None
):
    """Create fully-wired MenuService"""
    config, repositories = _resolve(config, repositories)

    from apps.domain.services.menu_service import MenuService
    return MenuService(
        menu_repo=repositories.menus,
        menu_group_repo=repositories.menu_groups,
        product_repo=repositories.products,
        profanity_checker=create_profanity_checker(config['profanity'])
    )


def create_order_table_service(
        config: Optional[Dict] = None,
        repositories: Optional[Repositories] = None
):
    """Create fully-wired OrderTableService"""
    config, repositories = _resolve(config, repositories)

    from apps.domain.services.order_table_service import OrderTableService
    return OrderTableService(
        order_table_repo=repositories.order_tables,
        order_repo=repositories.orders
    )


def create_order_service(
        config: Optional[Dict] = None,
        repositories: Optional[Repositories] = None
):
    """Create fully-wired OrderService"""
    config, repositories = _resolve(config, repositories)

    from apps.domain.services.order_service import OrderService
    return OrderService(
        order_repo=repositories.orders,
        menu_repo=repositories.menus,
        order_table_repo=repositories.order_tables,
        delivery_agency=create_delivery_agency(config['delivery'])
    )


# ============================================================
# VALIDATION
# ============================================================

def validate_config(config: Dict[str, Any]) -> bool:
    """
    Validate configuration structure

    Args:
        config: Configuration dictionary to validate

    Returns:
        True if valid

    Raises:
        ValueError: If configuration is invalid
    """
    required_keys = ['repositories', 'profanity', 'delivery']

    for key in required_keys:
        if key not in config:
            raise ValueError(f"Missing required config key: {key}")
        if 'type' not in config[key]:
            raise ValueError(f"{key} config missing 'type' key")

    if config['repositories']['type'] not in ('django', 'inmemory'):
        raise ValueError(f"Unknown repositories type: {config['repositories']['type']}")

    return True


# ============================================================
# HELPER FUNCTIONS
# ============================================================

def get_service_info(config: Optional[Dict] = None) -> Dict[str, Any]:
    """
    Get information about configured adapters

    Args:
        config: Optional config dict, uses environment config if None

    Returns:
        Dict with adapter configuration info
    """
    config = config or get_config()

    return {
        'environment': config.get('environment', 'unknown'),
        'repositories': config['repositories'].get('type'),
        'profanity': {
            'type': config['profanity'].get('type'),
            'base_url': config['profanity'].get('base_url', 'N/A'),
        },
        'delivery': {
            'type': config['delivery'].get('type'),
            'base_url': config['delivery'].get('base_url') or 'N/A',
        },
    }
