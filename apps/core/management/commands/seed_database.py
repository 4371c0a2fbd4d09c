# apps/core/management/commands/seed_database.py
"""
Django management command to seed database with sample POS data
"""
import random
import time
from decimal import Decimal

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from apps.domain.models import Menu, MenuGroup, MenuProduct, OrderTable, Product
from apps.infrastructure.container import (
    create_menu_group_service,
    create_menu_service,
    create_order_table_service,
    create_product_service,
    create_repositories,
)

SAMPLE_PRODUCTS = [
    ("후라이드", "16000"),
    ("양념치킨", "16000"),
    ("반반치킨", "16000"),
    ("통구이", "16000"),
    ("간장치킨", "17000"),
    ("순살치킨", "17000"),
]

SAMPLE_MENU_GROUPS = ["두마리메뉴", "한마리메뉴", "순살파닭두마리메뉴", "신메뉴"]


class Command(BaseCommand):
    help = "Seed database with sample products, menus and tables for development and staging"

    def add_arguments(self, parser):
        parser.add_argument(
            "--tables",
            type=int,
            default=8,
            help="Number of order tables to create",
        )
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Delete existing POS data before creating new",
        )

    def handle(self, *args, **options):
        num_tables = options["tables"]

        # Prevent seeding production
        if settings.ENVIRONMENT == "production":
            raise CommandError(
                "Cannot seed database in production environment. "
                "Current ENVIRONMENT=production"
            )
        if num_tables < 0:
            raise CommandError("--tables must not be negative")

        self.stdout.write(f"Seeding {settings.ENVIRONMENT} environment")
        start_time = time.time()

        if options["clear"]:
            self.clear_pos_data()

        # Seed through the services so every business rule applies
        config = {
            "repositories": {"type": "django"},
            "profanity": {"type": "fake"},
            "delivery": {"type": "fake"},
        }
        repositories = create_repositories()

        with transaction.atomic():
            products = self.seed_products(config, repositories)
            menu_groups = self.seed_menu_groups(config, repositories)
            menus = self.seed_menus(config, repositories, products, menu_groups)
            tables = self.seed_tables(config, repositories, num_tables)

        elapsed = time.time() - start_time
        self.stdout.write(
            self.style.SUCCESS(
                f"Created {len(products)} products, {len(menu_groups)} menu groups, "
                f"{len(menus)} menus and {len(tables)} tables in {elapsed:.2f} seconds"
            )
        )

    def clear_pos_data(self):
        """Delete all orders, menus, products and tables"""
        from apps.pos import models

        order_count = models.Order.objects.count()
        menu_count = models.Menu.objects.count()

        # Orders before menus and tables, menus before products and groups
        models.Order.objects.all().delete()
        models.Menu.objects.all().delete()
        models.MenuGroup.objects.all().delete()
        models.Product.objects.all().delete()
        models.OrderTable.objects.all().delete()

        self.stdout.write(
            self.style.WARNING(
                f"Cleared {order_count} orders and {menu_count} menus"
            )
        )

    def seed_products(self, config, repositories):
        service = create_product_service(config, repositories)
        return [
            service.create(Product(name=name, price=Decimal(price)))
            for name, price in SAMPLE_PRODUCTS
        ]

    def seed_menu_groups(self, config, repositories):
        service = create_menu_group_service(config, repositories)
        return [service.create(MenuGroup(name=name)) for name in SAMPLE_MENU_GROUPS]

    def seed_menus(self, config, repositories, products, menu_groups):
        """One single-product menu per product, plus a few two-piece sets"""
        service = create_menu_service(config, repositories)
        menus = []

        for product in products:
            menus.append(
                service.create(
                    Menu(
                        name=product.name,
                        price=product.price,
                        menu_group_id=menu_groups[1].id,
                        displayed=True,
                        menu_products=[MenuProduct(product_id=product.id, quantity=1)],
                    )
                )
            )

        for first, second in zip(products[::2], products[1::2]):
            total = first.price + second.price
            menus.append(
                service.create(
                    Menu(
                        name=f"{first.name}+{second.name}",
                        price=total - random.choice([0, 1000, 2000]),
                        menu_group_id=menu_groups[0].id,
                        displayed=True,
                        menu_products=[
                            MenuProduct(product_id=first.id, quantity=1),
                            MenuProduct(product_id=second.id, quantity=1),
                        ],
                    )
                )
            )

        return menus

    def seed_tables(self, config, repositories, num_tables):
        service = create_order_table_service(config, repositories)
        return [
            service.create(OrderTable(name=f"{i}번"))
            for i in range(1, num_tables + 1)
        ]
