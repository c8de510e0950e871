from django.urls import path, include
from rest_framework.routers import SimpleRouter

from . import views

app_name = 'council'

router = SimpleRouter()
router.register(r'activities', views.CouncilActivityViewSet, basename='activity')

urlpatterns = [
    path('dashboard/', views.council_dashboard, name='dashboard'),
    path('', include(router.urls)),
]
