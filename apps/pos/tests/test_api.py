# apps/pos/tests/test_api.py
"""
Tests for the point-of-sale HTTP API
"""
import uuid
from unittest.mock import patch

import pytest
from django.urls import reverse
from rest_framework.test import APIClient

from apps.core.exceptions import KitchenridersError, PurgomalumError
from apps.pos.models import Menu, MenuGroup, Order, OrderTable, Product


def create_product(client, name="후라이드", price="16000"):
    response = client.post(
        reverse("pos:product-list"), {"name": name, "price": price}, format="json"
    )
    assert response.status_code == 201, response.data
    return response.data


def create_menu_group(client, name="두마리메뉴"):
    response = client.post(reverse("pos:menu-group-list"), {"name": name}, format="json")
    assert response.status_code == 201, response.data
    return response.data


def create_menu(client, product, menu_group, price="19000", displayed=True, quantity=2):
    payload = {
        "name": "후라이드+후라이드",
        "price": price,
        "menu_group_id": menu_group["id"],
        "displayed": displayed,
        "menu_products": [{"product_id": product["id"], "quantity": quantity}],
    }
    return client.post(reverse("pos:menu-list"), payload, format="json")


def create_table(client, name="1번"):
    response = client.post(reverse("pos:order-table-list"), {"name": name}, format="json")
    assert response.status_code == 201, response.data
    return response.data


@pytest.mark.django_db
class TestProductApi:
    """Test /api/products/ endpoints"""

    def setup_method(self):
        self.client = APIClient()

    def test_create_product(self):
        data = create_product(self.client)

        assert data["name"] == "후라이드"
        assert data["price"] == "16000.00"
        assert Product.objects.filter(id=data["id"]).exists()

    def test_create_product_negative_price(self):
        response = self.client.post(
            reverse("pos:product-list"), {"name": "후라이드", "price": "-1000"}, format="json"
        )

        assert response.status_code == 400
        assert response.data["type"] == "InvalidPriceError"
        assert response.data["success"] is False

    def test_create_product_with_profanity(self):
        response = self.client.post(
            reverse("pos:product-list"), {"name": "비속어", "price": "16000"}, format="json"
        )

        assert response.status_code == 400
        assert response.data["type"] == "InvalidNameError"
        assert not Product.objects.exists()

    def test_create_product_malformed_price(self):
        response = self.client.post(
            reverse("pos:product-list"), {"name": "후라이드", "price": "abc"}, format="json"
        )

        assert response.status_code == 400
        assert "price" in response.data

    def test_list_products(self):
        create_product(self.client, "후라이드")
        create_product(self.client, "양념치킨")

        response = self.client.get(reverse("pos:product-list"))

        assert response.status_code == 200
        assert len(response.data) == 2

    def test_change_price_hides_menu(self):
        product = create_product(self.client)
        menu_group = create_menu_group(self.client)
        menu = create_menu(self.client, product, menu_group).data

        response = self.client.put(
            reverse("pos:product-change-price", kwargs={"product_id": product["id"]}),
            {"price": "8000"},
            format="json",
        )

        assert response.status_code == 200
        assert response.data["price"] == "8000.00"
        assert Menu.objects.get(id=menu["id"]).displayed is False

    def test_create_product_profanity_service_down(self):
        """A failing profanity service is a bad gateway and nothing is saved"""
        with patch(
            "apps.adapters.profanity.fake.FakeProfanityChecker.contains_profanity",
            side_effect=PurgomalumError("Profanity check returned status 503"),
        ):
            response = self.client.post(
                reverse("pos:product-list"), {"name": "후라이드", "price": "16000"}, format="json"
            )

        assert response.status_code == 502
        assert response.data["type"] == "PurgomalumError"
        assert not Product.objects.exists()

    def test_change_price_unknown_product(self):
        response = self.client.put(
            reverse("pos:product-change-price", kwargs={"product_id": uuid.uuid4()}),
            {"price": "8000"},
            format="json",
        )

        assert response.status_code == 404


@pytest.mark.django_db
class TestMenuApi:
    """Test /api/menu-groups/ and /api/menus/ endpoints"""

    def setup_method(self):
        self.client = APIClient()
        self.product = create_product(self.client)
        self.menu_group = create_menu_group(self.client)

    def test_create_menu_group_without_name(self):
        response = self.client.post(reverse("pos:menu-group-list"), {}, format="json")

        assert response.status_code == 400
        assert not MenuGroup.objects.filter(name="").exists()

    def test_create_menu(self):
        response = create_menu(self.client, self.product, self.menu_group)

        assert response.status_code == 201
        assert response.data["price"] == "19000.00"
        assert response.data["displayed"] is True
        assert response.data["menu_products"][0]["product_id"] == self.product["id"]
        assert response.data["menu_products"][0]["quantity"] == 2

    def test_create_menu_above_product_sum(self):
        response = create_menu(self.client, self.product, self.menu_group, price="33000")

        assert response.status_code == 400
        assert response.data["type"] == "InvalidPriceError"
        assert not Menu.objects.exists()

    def test_create_menu_unknown_group(self):
        response = create_menu(self.client, self.product, {"id": str(uuid.uuid4())})

        assert response.status_code == 404

    @pytest.mark.parametrize("quantity", [2 ** 63, -(2 ** 63) - 1, 10 ** 20])
    def test_create_menu_quantity_out_of_range(self, quantity):
        response = create_menu(self.client, self.product, self.menu_group, quantity=quantity)

        assert response.status_code == 400
        assert "menu_products" in response.data
        assert not Menu.objects.exists()

    def test_display_overpriced_menu_conflicts(self):
        menu = create_menu(self.client, self.product, self.menu_group, displayed=False).data
        Menu.objects.filter(id=menu["id"]).update(price=40000)

        response = self.client.put(reverse("pos:menu-display", kwargs={"menu_id": menu["id"]}))

        assert response.status_code == 409

    def test_hide_and_display(self):
        menu = create_menu(self.client, self.product, self.menu_group).data

        hidden = self.client.put(reverse("pos:menu-hide", kwargs={"menu_id": menu["id"]}))
        shown = self.client.put(reverse("pos:menu-display", kwargs={"menu_id": menu["id"]}))

        assert hidden.data["displayed"] is False
        assert shown.data["displayed"] is True

    def test_change_menu_price(self):
        menu = create_menu(self.client, self.product, self.menu_group).data

        response = self.client.put(
            reverse("pos:menu-change-price", kwargs={"menu_id": menu["id"]}),
            {"price": "30000"},
            format="json",
        )

        assert response.status_code == 200
        assert response.data["price"] == "30000.00"

    def test_list_menus(self):
        create_menu(self.client, self.product, self.menu_group)

        response = self.client.get(reverse("pos:menu-list"))

        assert response.status_code == 200
        assert len(response.data) == 1


@pytest.mark.django_db
class TestOrderTableApi:
    """Test /api/order-tables/ endpoints"""

    def setup_method(self):
        self.client = APIClient()

    def test_create_table(self):
        data = create_table(self.client)

        assert data["empty"] is True
        assert data["number_of_guests"] == 0

    def test_sit_change_guests_and_clear(self):
        table = create_table(self.client)
        kwargs = {"order_table_id": table["id"]}

        sat = self.client.put(reverse("pos:order-table-sit", kwargs=kwargs))
        guests = self.client.put(
            reverse("pos:order-table-number-of-guests", kwargs=kwargs),
            {"number_of_guests": 4},
            format="json",
        )
        cleared = self.client.put(reverse("pos:order-table-clear", kwargs=kwargs))

        assert sat.data["empty"] is False
        assert guests.data["number_of_guests"] == 4
        assert cleared.data["empty"] is True
        assert cleared.data["number_of_guests"] == 0

    def test_change_guests_out_of_range(self):
        table = create_table(self.client)
        kwargs = {"order_table_id": table["id"]}
        self.client.put(reverse("pos:order-table-sit", kwargs=kwargs))

        response = self.client.put(
            reverse("pos:order-table-number-of-guests", kwargs=kwargs),
            {"number_of_guests": 10 ** 20},
            format="json",
        )

        assert response.status_code == 400
        assert "number_of_guests" in response.data
        assert OrderTable.objects.get(id=table["id"]).number_of_guests == 0

    def test_change_guests_on_empty_table(self):
        table = create_table(self.client)

        response = self.client.put(
            reverse("pos:order-table-number-of-guests", kwargs={"order_table_id": table["id"]}),
            {"number_of_guests": 4},
            format="json",
        )

        assert response.status_code == 409
        assert OrderTable.objects.get(id=table["id"]).number_of_guests == 0


@pytest.mark.django_db
class TestOrderApi:
    """Test /api/orders/ endpoints through a full eat-in lifecycle"""

    def setup_method(self):
        self.client = APIClient()
        product = create_product(self.client)
        menu_group = create_menu_group(self.client)
        self.menu = create_menu(self.client, product, menu_group).data
        self.table = create_table(self.client)
        self.client.put(
            reverse("pos:order-table-sit", kwargs={"order_table_id": self.table["id"]})
        )

    def place_order(self, order_type="EAT_IN", **extra):
        payload = {
            "type": order_type,
            "order_line_items": [
                {"menu_id": self.menu["id"], "quantity": 3, "price": self.menu["price"]}
            ],
            **extra,
        }
        return self.client.post(reverse("pos:order-list"), payload, format="json")

    def test_create_eat_in_order(self):
        response = self.place_order(order_table_id=self.table["id"])

        assert response.status_code == 201
        assert response.data["type"] == "EAT_IN"
        assert response.data["status"] == "WAITING"
        assert response.data["order_table_id"] == self.table["id"]
        assert len(response.data["order_line_items"]) == 1

    def test_create_order_price_mismatch(self):
        payload = {
            "type": "TAKEOUT",
            "order_line_items": [{"menu_id": self.menu["id"], "quantity": 1, "price": "1"}],
        }

        response = self.client.post(reverse("pos:order-list"), payload, format="json")

        assert response.status_code == 400
        assert response.data["type"] == "InvalidPriceError"
        assert not Order.objects.exists()

    def test_create_order_quantity_out_of_range(self):
        payload = {
            "type": "TAKEOUT",
            "order_line_items": [
                {"menu_id": self.menu["id"], "quantity": 10 ** 20, "price": self.menu["price"]}
            ],
        }

        response = self.client.post(reverse("pos:order-list"), payload, format="json")

        assert response.status_code == 400
        assert "order_line_items" in response.data
        assert not Order.objects.exists()

    def test_create_order_unknown_type(self):
        response = self.place_order(order_type="DRIVE_THRU")

        assert response.status_code == 400
        assert "type" in response.data

    def test_eat_in_lifecycle_clears_table(self):
        order = self.place_order(order_table_id=self.table["id"]).data
        kwargs = {"order_id": order["id"]}

        # Open order blocks clearing the table
        blocked = self.client.put(
            reverse("pos:order-table-clear", kwargs={"order_table_id": self.table["id"]})
        )
        assert blocked.status_code == 409

        assert self.client.put(reverse("pos:order-accept", kwargs=kwargs)).data["status"] == "ACCEPTED"
        assert self.client.put(reverse("pos:order-serve", kwargs=kwargs)).data["status"] == "SERVED"
        completed = self.client.put(reverse("pos:order-complete", kwargs=kwargs))

        assert completed.data["status"] == "COMPLETED"
        assert OrderTable.objects.get(id=self.table["id"]).empty is True

    def test_delivery_lifecycle(self):
        order = self.place_order("DELIVERY", delivery_address="서울시 송파구 위례성대로 2").data
        kwargs = {"order_id": order["id"]}

        for name, expected in [
            ("pos:order-accept", "ACCEPTED"),
            ("pos:order-serve", "SERVED"),
            ("pos:order-start-delivery", "DELIVERING"),
            ("pos:order-complete-delivery", "DELIVERED"),
            ("pos:order-complete", "COMPLETED"),
        ]:
            response = self.client.put(reverse(name, kwargs=kwargs))
            assert response.status_code == 200, response.data
            assert response.data["status"] == expected

    def test_accept_delivery_agency_down(self):
        """A failing delivery agency is a bad gateway and the order stays waiting"""
        order = self.place_order("DELIVERY", delivery_address="서울시 송파구 위례성대로 2").data

        with patch(
            "apps.adapters.delivery.fake.FakeDeliveryAgency.request_delivery",
            side_effect=KitchenridersError("Delivery request returned status 503"),
        ):
            response = self.client.put(
                reverse("pos:order-accept", kwargs={"order_id": order["id"]})
            )

        assert response.status_code == 502
        assert response.data["type"] == "KitchenridersError"
        assert Order.objects.get(id=order["id"]).status == "WAITING"

    def test_serve_waiting_order_conflicts(self):
        order = self.place_order("TAKEOUT").data

        response = self.client.put(reverse("pos:order-serve", kwargs={"order_id": order["id"]}))

        assert response.status_code == 409
        assert response.data["type"] == "InvalidStateError"

    def test_accept_unknown_order(self):
        response = self.client.put(reverse("pos:order-accept", kwargs={"order_id": uuid.uuid4()}))

        assert response.status_code == 404

    def test_list_orders(self):
        self.place_order("TAKEOUT")

        response = self.client.get(reverse("pos:order-list"))

        assert response.status_code == 200
        assert len(response.data) == 1
