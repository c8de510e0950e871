from django.urls import path, include
from rest_framework.routers import SimpleRouter

from . import views

app_name = 'classes'

router = SimpleRouter()
router.register(r'', views.SchoolClassViewSet, basename='class')

urlpatterns = [
    path('grades/', views.GradeListView.as_view(), name='grade-list'),
    path('', include(router.urls)),
]
