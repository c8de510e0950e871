from django.urls import path
from . import views

app_name = 'admin_users'

urlpatterns = [
    path('', views.AdminUserListView.as_view(), name='user-list'),
    path('<int:pk>/', views.AdminUserDetailView.as_view(), name='user-detail'),
    path('<int:pk>/adjust-points/', views.AdminAdjustPointsView.as_view(), name='adjust-points'),
]
