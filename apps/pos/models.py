# apps/pos/models.py
"""
Point-of-sale models for products, menus, tables and orders
"""
import uuid

from django.db import models


class Product(models.Model):
    """A sellable product"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    price = models.DecimalField(max_digits=19, decimal_places=2)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return f"{self.name} ({self.price})"


class MenuGroup(models.Model):
    """A category of menus"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name


class Menu(models.Model):
    """A menu composed of products"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    price = models.DecimalField(max_digits=19, decimal_places=2)
    menu_group = models.ForeignKey(
        MenuGroup, related_name="menus", on_delete=models.PROTECT
    )
    displayed = models.BooleanField(default=False)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return f"{self.name} ({self.price})"


class MenuProduct(models.Model):
    """Quantity of a product inside a menu"""

    seq = models.BigAutoField(primary_key=True)
    menu = models.ForeignKey(
        Menu, related_name="menu_products", on_delete=models.CASCADE
    )
    product = models.ForeignKey(
        Product, related_name="menu_products", on_delete=models.PROTECT
    )
    quantity = models.BigIntegerField()

    class Meta:
        ordering = ["seq"]

    def __str__(self):
        return f"{self.product_id} x {self.quantity}"


class OrderTable(models.Model):
    """A physical table, either empty or occupied"""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    number_of_guests = models.IntegerField(default=0)
    empty = models.BooleanField(default=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return f"Table {self.name} ({'empty' if self.empty else 'occupied'})"


class Order(models.Model):
    """A customer order"""

    TYPE_CHOICES = [
        ("DELIVERY", "Delivery"),
        ("TAKEOUT", "Takeout"),
        ("EAT_IN", "Eat in"),
    ]

    STATUS_CHOICES = [
        ("WAITING", "Waiting"),
        ("ACCEPTED", "Accepted"),
        ("SERVED", "Served"),
        ("DELIVERING", "Delivering"),
        ("DELIVERED", "Delivered"),
        ("COMPLETED", "Completed"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    type = models.CharField(max_length=20, choices=TYPE_CHOICES)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES)
    order_date_time = models.DateTimeField()
    delivery_address = models.CharField(max_length=255, null=True, blank=True)
    order_table = models.ForeignKey(
        OrderTable,
        related_name="orders",
        on_delete=models.PROTECT,
        null=True,
        blank=True,
    )

    class Meta:
        db_table = "orders"
        ordering = ["-order_date_time"]
        indexes = [
            models.Index(fields=["order_table", "status"], name="orders_table_status_idx"),
        ]

    def __str__(self):
        return f"Order {self.id} ({self.type}, {self.status})"


class OrderLineItem(models.Model):
    """A menu ordered within an order"""

    seq = models.BigAutoField(primary_key=True)
    order = models.ForeignKey(
        Order, related_name="order_line_items", on_delete=models.CASCADE
    )
    menu = models.ForeignKey(
        Menu, related_name="order_line_items", on_delete=models.PROTECT
    )
    quantity = models.BigIntegerField()
    price = models.DecimalField(max_digits=19, decimal_places=2)

    class Meta:
        ordering = ["seq"]

    def __str__(self):
        return f"{self.menu_id} x {self.quantity}"
