from django.urls import path
from . import views

app_name = 'admin_orders'

urlpatterns = [
    path('', views.AdminOrderListView.as_view(), name='order-list'),
    path('statistics/', views.AdminOrderStatisticsView.as_view(), name='order-statistics'),
    path('<int:pk>/', views.AdminOrderDetailView.as_view(), name='order-detail'),
    path('<int:pk>/status/', views.AdminOrderStatusView.as_view(), name='order-status'),
    path('<int:pk>/verify/', views.AdminOrderVerifyView.as_view(), name='order-verify'),
]
