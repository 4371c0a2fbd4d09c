# apps/pos/admin.py
"""
Admin configuration for point-of-sale models
"""
from django.contrib import admin

from .models import Menu, MenuGroup, MenuProduct, Order, OrderLineItem, OrderTable, Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ["name", "price"]
    search_fields = ["name"]
    readonly_fields = ["id"]


@admin.register(MenuGroup)
class MenuGroupAdmin(admin.ModelAdmin):
    list_display = ["name"]
    search_fields = ["name"]


class MenuProductInline(admin.TabularInline):
    model = MenuProduct
    extra = 0


@admin.register(Menu)
class MenuAdmin(admin.ModelAdmin):
    list_display = ["name", "price", "menu_group", "displayed"]
    list_filter = ["displayed", "menu_group"]
    search_fields = ["name"]
    inlines = [MenuProductInline]


@admin.register(OrderTable)
class OrderTableAdmin(admin.ModelAdmin):
    list_display = ["name", "number_of_guests", "empty"]
    list_filter = ["empty"]


class OrderLineItemInline(admin.TabularInline):
    model = OrderLineItem
    extra = 0
    readonly_fields = ["menu", "quantity", "price"]


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ["id", "type", "status", "order_date_time", "order_table"]
    list_filter = ["type", "status", "order_date_time"]
    search_fields = ["delivery_address"]
    readonly_fields = ["id", "type", "order_date_time"]
    inlines = [OrderLineItemInline]
