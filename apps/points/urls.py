from django.urls import path
from . import views

app_name = 'points'

urlpatterns = [
    path('', views.get_points_overview, name='overview'),
    path('history/', views.get_points_history, name='history'),
    path('ranking/', views.get_points_ranking, name='ranking'),
    path('award/', views.award_points, name='award'),
]
