from django.urls import path
from . import views

app_name = 'plugins'

urlpatterns = [
    path('', views.PluginListView.as_view(), name='plugin-list'),
    path('install/', views.PluginInstallView.as_view(), name='plugin-install'),
    path('<int:pk>/', views.PluginDetailView.as_view(), name='plugin-detail'),
    path('<int:pk>/enable/', views.PluginEnableView.as_view(), name='plugin-enable'),
    path('<int:pk>/disable/', views.PluginDisableView.as_view(), name='plugin-disable'),
]
