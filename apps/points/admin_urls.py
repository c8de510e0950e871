from django.urls import path
from . import views

app_name = 'admin_points'

urlpatterns = [
    path('statistics/', views.get_points_statistics, name='points-statistics'),
]
