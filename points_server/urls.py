"""
URL configuration for points_server project.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

admin_api_patterns = [
    path('users/', include('apps.users.admin_urls')),
    path('approvals/', include('apps.users.approval_urls')),
    path('classes/', include('apps.classes.urls')),
    path('orders/', include('apps.orders.admin_urls')),
    path('points/', include('apps.points.admin_urls')),
    path('parent-bindings/', include('apps.parents.admin_urls')),
    path('plugins/', include('apps.plugins.urls')),
]

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/auth/', include('apps.users.urls')),
    path('api/points/', include('apps.points.urls')),
    path('api/shop/', include('apps.products.urls')),
    path('api/shop/orders/', include('apps.orders.urls')),
    path('api/parent/', include('apps.parents.urls')),
    path('api/student-council/', include('apps.council.urls')),
    path('api/admin/', include(admin_api_patterns)),
    path('api/', include('apps.common.urls')),
    # OpenAPI documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/schema/swagger-ui/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    path('api/schema/redoc/', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),
]
