# conftest.py

"""
Pytest configuration and fixtures.
"""
import pytest
from apps.adapters.delivery.fake import FakeDeliveryAgency
from apps.adapters.profanity.fake import FakeProfanityChecker
from apps.infrastructure.container import create_repositories
from apps.domain.services import (
    MenuGroupService,
    MenuService,
    OrderService,
    OrderTableService,
    ProductService,
)


@pytest.fixture(scope="session")
def django_db_setup(django_db_setup, django_db_blocker):
    """Verify the test database runs with the test environment."""
    from django.conf import settings

    assert settings.ENVIRONMENT == "test"


@pytest.fixture
def api_client():
    from rest_framework.test import APIClient

    return APIClient()


# ============================================================
# IN-MEMORY WIRING
# ============================================================

@pytest.fixture
def repositories():
    """Fresh in-memory repositories shared by every service of a test"""
    return create_repositories(use_inmemory=True)


@pytest.fixture
def profanity_checker():
    return FakeProfanityChecker()


@pytest.fixture
def delivery_agency():
    return FakeDeliveryAgency()


@pytest.fixture
def product_service(repositories, profanity_checker):
    return ProductService(
        product_repo=repositories.products,
        menu_repo=repositories.menus,
        profanity_checker=profanity_checker,
    )


@pytest.fixture
def menu_group_service(repositories):
    return MenuGroupService(menu_group_repo=repositories.menu_groups)


@pytest.fixture
def menu_service(repositories, profanity_checker):
    return MenuService(
        menu_repo=repositories.menus,
        menu_group_repo=repositories.menu_groups,
        product_repo=repositories.products,
        profanity_checker=profanity_checker,
    )


@pytest.fixture
def order_table_service(repositories):
    return OrderTableService(
        order_table_repo=repositories.order_tables,
        order_repo=repositories.orders,
    )


@pytest.fixture
def order_service(repositories, delivery_agency):
    return OrderService(
        order_repo=repositories.orders,
        menu_repo=repositories.menus,
        order_table_repo=repositories.order_tables,
        delivery_agency=delivery_agency,
    )
