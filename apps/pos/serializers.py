# apps/pos/serializers.py
"""
Point-of-sale API serializers

Request serializers only check shapes and types; business rules
(price ranges, profanity, state) belong to the domain services, so
most fields accept null and let the service reject them.
"""
from rest_framework import serializers

from apps.domain.models import (
    Menu,
    MenuGroup,
    MenuProduct,
    Order,
    OrderLineItem,
    OrderTable,
    OrderType,
    Product,
)

PRICE_FIELD_OPTIONS = {"max_digits": 19, "decimal_places": 2}

# Column ranges of BigIntegerField quantities and IntegerField guests
QUANTITY_FIELD_OPTIONS = {"min_value": -2 ** 63, "max_value": 2 ** 63 - 1}
MAX_NUMBER_OF_GUESTS = 2 ** 31 - 1


# ============================================================
# REQUESTS
# ============================================================

class ProductRequestSerializer(serializers.Serializer):
    """Serializer for product create and price change requests"""

    name = serializers.CharField(
        max_length=255, required=False, allow_null=True, allow_blank=True
    )
    price = serializers.DecimalField(
        required=False, allow_null=True, **PRICE_FIELD_OPTIONS
    )

    def to_domain(self) -> Product:
        data = self.validated_data
        return Product(name=data.get("name"), price=data.get("price"))


class MenuGroupRequestSerializer(serializers.Serializer):
    """Serializer for menu group create requests"""

    name = serializers.CharField(
        max_length=255, required=False, allow_null=True, allow_blank=True
    )

    def to_domain(self) -> MenuGroup:
        return MenuGroup(name=self.validated_data.get("name"))


class MenuProductRequestSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    quantity = serializers.IntegerField(**QUANTITY_FIELD_OPTIONS)


class MenuRequestSerializer(serializers.Serializer):
    """Serializer for menu create and price change requests"""

    name = serializers.CharField(
        max_length=255, required=False, allow_null=True, allow_blank=True
    )
    price = serializers.DecimalField(
        required=False, allow_null=True, **PRICE_FIELD_OPTIONS
    )
    menu_group_id = serializers.UUIDField(required=False, allow_null=True)
    displayed = serializers.BooleanField(required=False, default=False)
    menu_products = MenuProductRequestSerializer(many=True, required=False)

    def to_domain(self) -> Menu:
        data = self.validated_data
        return Menu(
            name=data.get("name"),
            price=data.get("price"),
            menu_group_id=data.get("menu_group_id"),
            displayed=data.get("displayed", False),
            menu_products=[
                MenuProduct(product_id=mp["product_id"], quantity=mp["quantity"])
                for mp in data.get("menu_products", [])
            ],
        )


class OrderTableRequestSerializer(serializers.Serializer):
    """Serializer for order table create and guest change requests"""

    name = serializers.CharField(
        max_length=255, required=False, allow_null=True, allow_blank=True
    )
    number_of_guests = serializers.IntegerField(
        required=False, default=0, max_value=MAX_NUMBER_OF_GUESTS
    )

    def to_domain(self) -> OrderTable:
        data = self.validated_data
        return OrderTable(
            name=data.get("name"),
            number_of_guests=data.get("number_of_guests", 0),
        )


class OrderLineItemRequestSerializer(serializers.Serializer):
    menu_id = serializers.UUIDField()
    quantity = serializers.IntegerField(**QUANTITY_FIELD_OPTIONS)
    price = serializers.DecimalField(allow_null=True, **PRICE_FIELD_OPTIONS)


class OrderRequestSerializer(serializers.Serializer):
    """Serializer for order create requests"""

    type = serializers.ChoiceField(
        choices=[t.value for t in OrderType], required=False, allow_null=True
    )
    order_line_items = OrderLineItemRequestSerializer(many=True, required=False)
    delivery_address = serializers.CharField(
        max_length=255, required=False, allow_null=True, allow_blank=True
    )
    order_table_id = serializers.UUIDField(required=False, allow_null=True)

    def to_domain(self) -> Order:
        data = self.validated_data
        order_type = data.get("type")
        return Order(
            type=OrderType(order_type) if order_type else None,
            order_line_items=[
                OrderLineItem(
                    menu_id=item["menu_id"],
                    quantity=item["quantity"],
                    price=item["price"],
                )
                for item in data.get("order_line_items", [])
            ],
            delivery_address=data.get("delivery_address"),
            order_table_id=data.get("order_table_id"),
        )


# ============================================================
# RESPONSES
# ============================================================

class ProductSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    price = serializers.DecimalField(**PRICE_FIELD_OPTIONS)


class MenuGroupSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()


class MenuProductSerializer(serializers.Serializer):
    seq = serializers.IntegerField(allow_null=True)
    product_id = serializers.UUIDField()
    quantity = serializers.IntegerField()


class MenuSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    price = serializers.DecimalField(**PRICE_FIELD_OPTIONS)
    menu_group_id = serializers.UUIDField()
    displayed = serializers.BooleanField()
    menu_products = MenuProductSerializer(many=True)


class OrderTableSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    number_of_guests = serializers.IntegerField()
    empty = serializers.BooleanField()


class OrderLineItemSerializer(serializers.Serializer):
    seq = serializers.IntegerField(allow_null=True)
    menu_id = serializers.UUIDField()
    quantity = serializers.IntegerField()
    price = serializers.DecimalField(**PRICE_FIELD_OPTIONS)


class OrderSerializer(serializers.Serializer):
    """Serializer for orders"""

    id = serializers.UUIDField()
    type = serializers.CharField(source="type.value")
    status = serializers.CharField(source="status.value")
    order_date_time = serializers.DateTimeField()
    order_line_items = OrderLineItemSerializer(many=True)
    delivery_address = serializers.CharField(allow_null=True)
    order_table_id = serializers.UUIDField(allow_null=True)
