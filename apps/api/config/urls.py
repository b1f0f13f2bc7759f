from django.contrib import admin
from django.urls import path, include
from django.conf import settings
import sys

from rest_framework import permissions
from rest_framework_simplejwt.views import (
    TokenObtainPairView,
    TokenRefreshView,
)
from drf_yasg import openapi
from drf_yasg.views import get_schema_view

from apps.api.common.views import health_check


schema_view = get_schema_view(
    openapi.Info(
        title="Academy Quiz API",
        default_version="v1",
        description="퀴즈 응시 / 채점 / 점수 원장 / 리더보드",
    ),
    public=True,
    permission_classes=[permissions.AllowAny],
)


urlpatterns = [
    # =========================
    # Admin
    # =========================
    path("admin/", admin.site.urls),

    # =========================
    # Health
    # =========================
    path("health/", health_check, name="health"),

    # =========================
    # Auth (JWT)
    # =========================
    path("api/v1/token/", TokenObtainPairView.as_view(), name="token_obtain_pair"),
    path("api/v1/token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),

    # =========================
    # API v1
    # =========================
    path("api/v1/", include("apps.api.v1.urls")),

    # =========================
    # Swagger
    # =========================
    path("swagger/", schema_view.with_ui("swagger", cache_timeout=0), name="schema-swagger-ui"),
]

# =========================
# Debug Toolbar (DEBUG only)
# =========================
if settings.DEBUG and "runserver" in sys.argv:
    import debug_toolbar
    urlpatterns += [
        path("__debug__/", include(debug_toolbar.urls)),
    ]
