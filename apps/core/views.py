# apps/core/views.py
"""
Core application views: health check and API root
"""
import logging
import time

from django.db import connection
from django.http import JsonResponse
from django.views.decorators.cache import never_cache
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from apps.infrastructure.container import get_service_info

logger = logging.getLogger(__name__)

SLOW_QUERY_THRESHOLD_MS = 100


@extend_schema(
    tags=["Health"],
    summary="Database health check",
    description="Check that the POS database answers and report its latency.",
    responses={
        200: OpenApiTypes.OBJECT,
        503: OpenApiTypes.OBJECT,
    },
)
@api_view(["GET"])
@permission_classes([AllowAny])
@never_cache
def database_health_check(request):
    """
    Database health check endpoint for load balancers

    Returns:
        200: {"status": "healthy", "latency_ms": 3.1, "database": "..."}
        503: {"status": "unhealthy", "error": "...", "latency_ms": 10000.0}
    """
    start_time = time.time()

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()

    except Exception as e:
        latency_ms = round((time.time() - start_time) * 1000, 2)
        logger.error(
            f"Database health check failed: {e}",
            extra={"latency_ms": latency_ms},
            exc_info=True,
        )
        return JsonResponse(
            {"status": "unhealthy", "error": str(e), "latency_ms": latency_ms},
            status=503,
        )

    latency_ms = round((time.time() - start_time) * 1000, 2)
    if latency_ms > SLOW_QUERY_THRESHOLD_MS:
        logger.warning(
            f"Database health check latency is high: {latency_ms}ms",
            extra={"latency_ms": latency_ms, "threshold_ms": SLOW_QUERY_THRESHOLD_MS},
        )

    return JsonResponse(
        {
            "status": "healthy",
            "latency_ms": latency_ms,
            "database": str(connection.settings_dict.get("NAME")),
        },
        status=200,
    )


@api_view(["GET"])
@permission_classes([AllowAny])
def api_root(request):
    """API root endpoint showing available endpoints and adapters"""
    return Response(
        {
            "message": "Kitchen POS API",
            "version": "1.0",
            "endpoints": {
                "health": "/api/health/db",
                "products": "/api/products/",
                "menu_groups": "/api/menu-groups/",
                "menus": "/api/menus/",
                "order_tables": "/api/order-tables/",
                "orders": "/api/orders/",
                "admin": "/admin/",
            },
            "adapters": get_service_info(),
        }
    )
