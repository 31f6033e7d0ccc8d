from django.contrib import admin
from django.urls import path, include
from django.views.decorators.cache import cache_page
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView, SpectacularSwaggerView

urlpatterns = [
    path("admin/", admin.site.urls),

    # API Documentation
    path('docs', SpectacularSwaggerView.as_view(url_name='schema'), name='docs'),
    path('redoc', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),

    # API Schema (cached to avoid heavy regen on each request):
    path('api/schema/', cache_page(60 * 60)(SpectacularAPIView.as_view()), name='schema'),

    # API Endpoints:
    path("api/v1/", include("employee_directory.apps.employees.api.urls")),
]

handler404 = "employee_directory.apps.common.exceptions.page_not_found"
handler500 = "employee_directory.apps.common.exceptions.server_error"
