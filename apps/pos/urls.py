# apps/pos/urls.py

"""
Point-of-sale URLs
"""
from django.urls import path

from . import views

app_name = "pos"

urlpatterns = [
    # Products
    path("products/", views.product_list, name="product-list"),
    path(
        "products/<uuid:product_id>/price/",
        views.product_change_price,
        name="product-change-price",
    ),
    # Menu groups
    path("menu-groups/", views.menu_group_list, name="menu-group-list"),
    # Menus
    path("menus/", views.menu_list, name="menu-list"),
    path("menus/<uuid:menu_id>/price/", views.menu_change_price, name="menu-change-price"),
    path("menus/<uuid:menu_id>/display/", views.menu_display, name="menu-display"),
    path("menus/<uuid:menu_id>/hide/", views.menu_hide, name="menu-hide"),
    # Order tables
    path("order-tables/", views.order_table_list, name="order-table-list"),
    path(
        "order-tables/<uuid:order_table_id>/sit/",
        views.order_table_sit,
        name="order-table-sit",
    ),
    path(
        "order-tables/<uuid:order_table_id>/clear/",
        views.order_table_clear,
        name="order-table-clear",
    ),
    path(
        "order-tables/<uuid:order_table_id>/number-of-guests/",
        views.order_table_change_number_of_guests,
        name="order-table-number-of-guests",
    ),
    # Orders
    path("orders/", views.order_list, name="order-list"),
    path("orders/<uuid:order_id>/accept/", views.order_accept, name="order-accept"),
    path("orders/<uuid:order_id>/serve/", views.order_serve, name="order-serve"),
    path(
        "orders/<uuid:order_id>/start-delivery/",
        views.order_start_delivery,
        name="order-start-delivery",
    ),
    path(
        "orders/<uuid:order_id>/complete-delivery/",
        views.order_complete_delivery,
        name="order-complete-delivery",
    ),
    path("orders/<uuid:order_id>/complete/", views.order_complete, name="order-complete"),
]
