# apps/common/api.py
"""
API endpoints for common functionality.
"""
import time

from django.utils import timezone
from rest_framework.decorators import api_view, permission_classes, throttle_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi

# Process start, for the uptime reported by the health check
_STARTED_AT = time.monotonic()


def get_uptime():
    """Seconds since this process loaded the URL configuration."""
    return round(time.monotonic() - _STARTED_AT, 3)


@swagger_auto_schema(
    method='get',
    tags=["Health"],
    operation_description="""
    Liveness probe.

    Returns a fixed status, the current server time and the process uptime in seconds.

    **No authentication required. Not throttled.**
    """,
    responses={
        200: openapi.Response(
            description="Service is up",
            examples={
                "application/json": {
                    "status": "OK",
                    "timestamp": "2026-10-19T08:30:00.000000+00:00",
                    "uptime": 123.456,
                }
            }
        )
    }
)
@api_view(['GET'])
@permission_classes([AllowAny])
@throttle_classes([])
def health_api(request):
    """
    Health check.

    No database access, so it stays green while the store is down.
    """
    return Response({
        'status': 'OK',
        'timestamp': timezone.now().isoformat(),
        'uptime': get_uptime(),
    })
