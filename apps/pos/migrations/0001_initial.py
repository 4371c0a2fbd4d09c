import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="MenuGroup",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
            ],
            options={
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="OrderTable",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("number_of_guests", models.IntegerField(default=0)),
                ("empty", models.BooleanField(default=True)),
            ],
            options={
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("price", models.DecimalField(decimal_places=2, max_digits=19)),
            ],
            options={
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Menu",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("price", models.DecimalField(decimal_places=2, max_digits=19)),
                ("displayed", models.BooleanField(default=False)),
                (
                    "menu_group",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="menus",
                        to="pos.menugroup",
                    ),
                ),
            ],
            options={
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="MenuProduct",
            fields=[
                ("seq", models.BigAutoField(primary_key=True, serialize=False)),
                ("quantity", models.BigIntegerField()),
                (
                    "menu",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="menu_products",
                        to="pos.menu",
                    ),
                ),
                (
                    "product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="menu_products",
                        to="pos.product",
                    ),
                ),
            ],
            options={
                "ordering": ["seq"],
            },
        ),
        migrations.CreateModel(
            name="Order",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                (
                    "type",
                    models.CharField(
                        choices=[("DELIVERY", "Delivery"), ("TAKEOUT", "Takeout"), ("EAT_IN", "Eat in")],
                        max_length=20,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("WAITING", "Waiting"),
                            ("ACCEPTED", "Accepted"),
                            ("SERVED", "Served"),
                            ("DELIVERING", "Delivering"),
                            ("DELIVERED", "Delivered"),
                            ("COMPLETED", "Completed"),
                        ],
                        max_length=20,
                    ),
                ),
                ("order_date_time", models.DateTimeField()),
                ("delivery_address", models.CharField(blank=True, max_length=255, null=True)),
                (
                    "order_table",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="orders",
                        to="pos.ordertable",
                    ),
                ),
            ],
            options={
                "db_table": "orders",
                "ordering": ["-order_date_time"],
                "indexes": [models.Index(fields=["order_table", "status"], name="orders_table_status_idx")],
            },
        ),
        migrations.CreateModel(
            name="OrderLineItem",
            fields=[
                ("seq", models.BigAutoField(primary_key=True, serialize=False)),
                ("quantity", models.BigIntegerField()),
                ("price", models.DecimalField(decimal_places=2, max_digits=19)),
                (
                    "menu",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="order_line_items",
                        to="pos.menu",
                    ),
                ),
                (
                    "order",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="order_line_items",
                        to="pos.order",
                    ),
                ),
            ],
            options={
                "ordering": ["seq"],
            },
        ),
    ]
