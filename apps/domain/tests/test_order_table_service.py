# apps/domain/tests/test_order_table_service.py
"""
Tests for OrderTableService
"""
import pytest

from apps.domain.models import (
    InvalidNameError,
    InvalidStateError,
    NotFoundError,
    OrderStatus,
    OrderTable,
    OrderType,
    ValidationError,
)
from apps.domain.tests import fixtures


class TestOrderTableCreate:

    def test_create(self, order_table_service):
        """New tables start empty without guests"""
        actual = order_table_service.create(OrderTable(name="1번"))

        assert actual.id is not None
        assert actual.name == "1번"
        assert actual.number_of_guests == 0
        assert actual.empty is True

    @pytest.mark.parametrize("name", [None, ""])
    def test_create_without_name(self, order_table_service, name):
        with pytest.raises(InvalidNameError):
            order_table_service.create(OrderTable(name=name))


class TestOrderTableOccupancy:
    """Test sitting and clearing tables"""

    def test_sit(self, order_table_service, repositories):
        table = repositories.order_tables.save(fixtures.order_table(empty=True))

        actual = order_table_service.sit(table.id)

        assert actual.empty is False

    def test_sit_unknown_table(self, order_table_service):
        with pytest.raises(NotFoundError):
            order_table_service.sit(fixtures.INVALID_ID)

    def test_clear(self, order_table_service, repositories):
        table = repositories.order_tables.save(
            fixtures.order_table(empty=False, number_of_guests=4)
        )

        actual = order_table_service.clear(table.id)

        assert actual.empty is True
        assert actual.number_of_guests == 0

    def test_clear_with_completed_orders(self, order_table_service, repositories):
        table = repositories.order_tables.save(fixtures.order_table(empty=False))
        repositories.orders.save(
            fixtures.order(OrderStatus.COMPLETED, OrderType.EAT_IN, table)
        )

        actual = order_table_service.clear(table.id)

        assert actual.empty is True

    @pytest.mark.parametrize(
        "status",
        [OrderStatus.WAITING, OrderStatus.ACCEPTED, OrderStatus.SERVED],
    )
    def test_clear_with_open_order(self, order_table_service, repositories, status):
        """Tables with uncompleted orders can't be cleared"""
        table = repositories.order_tables.save(fixtures.order_table(empty=False))
        repositories.orders.save(fixtures.order(status, OrderType.EAT_IN, table))

        with pytest.raises(InvalidStateError):
            order_table_service.clear(table.id)

        assert repositories.order_tables.find_by_id(table.id).empty is False


class TestOrderTableGuests:
    """Test changing the number of guests"""

    def test_change_number_of_guests(self, order_table_service, repositories):
        table = repositories.order_tables.save(fixtures.order_table(empty=False))

        actual = order_table_service.change_number_of_guests(
            table.id, OrderTable(number_of_guests=4)
        )

        assert actual.number_of_guests == 4

    def test_change_negative_number_of_guests(self, order_table_service, repositories):
        table = repositories.order_tables.save(fixtures.order_table(empty=False))

        with pytest.raises(ValidationError):
            order_table_service.change_number_of_guests(
                table.id, OrderTable(number_of_guests=-1)
            )

    def test_change_number_of_guests_on_empty_table(
            self, order_table_service, repositories
    ):
        table = repositories.order_tables.save(fixtures.order_table(empty=True))

        with pytest.raises(InvalidStateError):
            order_table_service.change_number_of_guests(
                table.id, OrderTable(number_of_guests=4)
            )

    def test_change_number_of_guests_unknown_table(self, order_table_service):
        with pytest.raises(NotFoundError):
            order_table_service.change_number_of_guests(
                fixtures.INVALID_ID, OrderTable(number_of_guests=4)
            )

    def test_find_all(self, order_table_service, repositories):
        repositories.order_tables.save(fixtures.order_table())
        repositories.order_tables.save(fixtures.order_table())

        assert len(order_table_service.find_all()) == 2
