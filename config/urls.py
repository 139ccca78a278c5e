# config/urls.py
from django.contrib import admin
from django.urls import path, include, re_path
from django.conf import settings
from django.conf.urls.static import static
from django.http import JsonResponse

from rest_framework import permissions
from drf_yasg.views import get_schema_view
from drf_yasg import openapi

from apps.common import api as common_api


def api_root(request):
    return JsonResponse({"status": "ok"})


schema_view = get_schema_view(
    openapi.Info(
        title="Interview Request Board API",
        default_version="v1",
        description=(
            "Interview Request Board Backend API\n\n"
            "Candidates submit interview requests; recruiters list, accept, reject "
            "and delete them.\n\n"
            "## Authentication\n"
            "None. Every endpoint is open.\n\n"
            "---\n\n"
            "## Response envelope\n"
            "```json\n"
            "{\n"
            '  "success": true,\n'
            '  "data": {...},\n'
            '  "message": "...",\n'
            '  "count": 3\n'
            "}\n"
            "```\n\n"
            "Errors carry `success: false`, `error` and `message` "
            "(plus `details` for validation errors).\n\n"
            "---\n\n"
            "## Live updates\n"
            "Connect a WebSocket to `/ws/recruiters/`, send "
            '`{"type": "join-recruiter"}` and receive `newInterviewRequest`, '
            "`requestStatusUpdate` and `requestDeleted` events."
        ),
    ),
    public=True,
    permission_classes=(permissions.AllowAny,),
    authentication_classes=[],
)

urlpatterns = [
    path("", api_root),
    re_path(r"^health/?$", common_api.health_api, name="health"),
    path("admin/", admin.site.urls),
    # -----------------------------
    # INTERVIEW REQUEST APIs
    # -----------------------------
    path("api/interview-requests", include("apps.interview_requests.urls")),
    # -----------------------------
    # DOCS
    # -----------------------------
    path("swagger/", schema_view.with_ui("swagger", cache_timeout=0)),
]

handler404 = "apps.common.utils.custom_404"
handler500 = "apps.common.utils.custom_500"

if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
