# apps/pos/views.py
"""
Point-of-sale API views

Views translate HTTP to service calls: parse the request, call the
service built by the container, map domain exceptions to status codes.
"""
import logging

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from apps.core.exceptions import ExternalServiceError
from apps.domain.models import (
    DomainException,
    InvalidStateError,
    NotFoundError,
)
from apps.infrastructure.container import (
    create_menu_group_service,
    create_menu_service,
    create_order_service,
    create_order_table_service,
    create_product_service,
)

from .serializers import (
    MenuGroupRequestSerializer,
    MenuGroupSerializer,
    MenuRequestSerializer,
    MenuSerializer,
    OrderRequestSerializer,
    OrderSerializer,
    OrderTableRequestSerializer,
    OrderTableSerializer,
    ProductRequestSerializer,
    ProductSerializer,
)

logger = logging.getLogger(__name__)


def error_response(e: Exception) -> Response:
    """Map a domain or integration exception to an error response"""
    if isinstance(e, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(e, InvalidStateError):
        code = status.HTTP_409_CONFLICT
    elif isinstance(e, ExternalServiceError):
        logger.error(f"External service failure: {e}")
        code = status.HTTP_502_BAD_GATEWAY
    else:
        code = status.HTTP_400_BAD_REQUEST

    return Response(
        {"success": False, "error": str(e), "type": type(e).__name__},
        status=code,
    )


def _create(request, request_serializer_class, response_serializer_class, create):
    serializer = request_serializer_class(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        created = create(serializer.to_domain())
    except (DomainException, ExternalServiceError) as e:
        return error_response(e)

    return Response(
        response_serializer_class(created).data, status=status.HTTP_201_CREATED
    )


def _update(response_serializer_class, update, *args):
    try:
        updated = update(*args)
    except (DomainException, ExternalServiceError) as e:
        return error_response(e)

    return Response(response_serializer_class(updated).data)


# ============================================================
# PRODUCTS
# ============================================================

@extend_schema(
    tags=["Products"],
    request=ProductRequestSerializer,
    responses={200: ProductSerializer(many=True), 201: ProductSerializer},
)
@api_view(["GET", "POST"])
@permission_classes([AllowAny])
def product_list(request):
    """List products or register a new one"""
    service = create_product_service()

    if request.method == "POST":
        return _create(request, ProductRequestSerializer, ProductSerializer, service.create)

    return Response(ProductSerializer(service.find_all(), many=True).data)


@extend_schema(
    tags=["Products"],
    request=ProductRequestSerializer,
    responses={200: ProductSerializer},
)
@api_view(["PUT"])
@permission_classes([AllowAny])
def product_change_price(request, product_id):
    """Change a product's price, hiding menus that become overpriced"""
    serializer = ProductRequestSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    service = create_product_service()
    return _update(ProductSerializer, service.change_price, product_id, serializer.to_domain())


# ============================================================
# MENU GROUPS
# ============================================================

@extend_schema(
    tags=["Menu groups"],
    request=MenuGroupRequestSerializer,
    responses={200: MenuGroupSerializer(many=True), 201: MenuGroupSerializer},
)
@api_view(["GET", "POST"])
@permission_classes([AllowAny])
def menu_group_list(request):
    """List menu groups or register a new one"""
    service = create_menu_group_service()

    if request.method == "POST":
        return _create(request, MenuGroupRequestSerializer, MenuGroupSerializer, service.create)

    return Response(MenuGroupSerializer(service.find_all(), many=True).data)


# ============================================================
# MENUS
# ============================================================

@extend_schema(
    tags=["Menus"],
    request=MenuRequestSerializer,
    responses={200: MenuSerializer(many=True), 201: MenuSerializer},
)
@api_view(["GET", "POST"])
@permission_classes([AllowAny])
def menu_list(request):
    """List menus or register a new one"""
    service = create_menu_service()

    if request.method == "POST":
        return _create(request, MenuRequestSerializer, MenuSerializer, service.create)

    return Response(MenuSerializer(service.find_all(), many=True).data)


@extend_schema(tags=["Menus"], request=MenuRequestSerializer, responses={200: MenuSerializer})
@api_view(["PUT"])
@permission_classes([AllowAny])
def menu_change_price(request, menu_id):
    serializer = MenuRequestSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    service = create_menu_service()
    return _update(MenuSerializer, service.change_price, menu_id, serializer.to_domain())


@extend_schema(tags=["Menus"], request=None, responses={200: MenuSerializer})
@api_view(["PUT"])
@permission_classes([AllowAny])
def menu_display(request, menu_id):
    return _update(MenuSerializer, create_menu_service().display, menu_id)


@extend_schema(tags=["Menus"], request=None, responses={200: MenuSerializer})
@api_view(["PUT"])
@permission_classes([AllowAny])
def menu_hide(request, menu_id):
    return _update(MenuSerializer, create_menu_service().hide, menu_id)


# ============================================================
# ORDER TABLES
# ============================================================

@extend_schema(
    tags=["Order tables"],
    request=OrderTableRequestSerializer,
    responses={200: OrderTableSerializer(many=True), 201: OrderTableSerializer},
)
@api_view(["GET", "POST"])
@permission_classes([AllowAny])
def order_table_list(request):
    """List tables or register a new one"""
    service = create_order_table_service()

    if request.method == "POST":
        return _create(request, OrderTableRequestSerializer, OrderTableSerializer, service.create)

    return Response(OrderTableSerializer(service.find_all(), many=True).data)


@extend_schema(tags=["Order tables"], request=None, responses={200: OrderTableSerializer})
@api_view(["PUT"])
@permission_classes([AllowAny])
def order_table_sit(request, order_table_id):
    return _update(OrderTableSerializer, create_order_table_service().sit, order_table_id)


@extend_schema(tags=["Order tables"], request=None, responses={200: OrderTableSerializer})
@api_view(["PUT"])
@permission_classes([AllowAny])
def order_table_clear(request, order_table_id):
    return _update(OrderTableSerializer, create_order_table_service().clear, order_table_id)


@extend_schema(
    tags=["Order tables"],
    request=OrderTableRequestSerializer,
    responses={200: OrderTableSerializer},
)
@api_view(["PUT"])
@permission_classes([AllowAny])
def order_table_change_number_of_guests(request, order_table_id):
    serializer = OrderTableRequestSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    service = create_order_table_service()
    return _update(
        OrderTableSerializer,
        service.change_number_of_guests,
        order_table_id,
        serializer.to_domain(),
    )


# ============================================================
# ORDERS
# ============================================================

@extend_schema(
    tags=["Orders"],
    request=OrderRequestSerializer,
    responses={200: OrderSerializer(many=True), 201: OrderSerializer},
)
@api_view(["GET", "POST"])
@permission_classes([AllowAny])
def order_list(request):
    """List orders or place a new one"""
    service = create_order_service()

    if request.method == "POST":
        return _create(request, OrderRequestSerializer, OrderSerializer, service.create)

    return Response(OrderSerializer(service.find_all(), many=True).data)


@extend_schema(tags=["Orders"], request=None, responses={200: OrderSerializer})
@api_view(["PUT"])
@permission_classes([AllowAny])
def order_accept(request, order_id):
    return _update(OrderSerializer, create_order_service().accept, order_id)


@extend_schema(tags=["Orders"], request=None, responses={200: OrderSerializer})
@api_view(["PUT"])
@permission_classes([AllowAny])
def order_serve(request, order_id):
    return _update(OrderSerializer, create_order_service().serve, order_id)


@extend_schema(tags=["Orders"], request=None, responses={200: OrderSerializer})
@api_view(["PUT"])
@permission_classes([AllowAny])
def order_start_delivery(request, order_id):
    return _update(OrderSerializer, create_order_service().start_delivery, order_id)


@extend_schema(tags=["Orders"], request=None, responses={200: OrderSerializer})
@api_view(["PUT"])
@permission_classes([AllowAny])
def order_complete_delivery(request, order_id):
    return _update(OrderSerializer, create_order_service().complete_delivery, order_id)


@extend_schema(tags=["Orders"], request=None, responses={200: OrderSerializer})
@api_view(["PUT"])
@permission_classes([AllowAny])
def order_complete(request, order_id):
    return _update(OrderSerializer, create_order_service().complete, order_id)
