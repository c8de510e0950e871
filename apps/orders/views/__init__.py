"""
Order views module.

All views are exported from this module to maintain backward compatibility.
"""
from .order_views import OrderListCreateView, OrderDetailView, RegenerateVerificationCodeView
from .admin_order_views import (
    AdminOrderListView, AdminOrderDetailView, AdminOrderStatusView,
    AdminOrderVerifyView, AdminOrderStatisticsView
)

__all__ = [
    'OrderListCreateView',
    'OrderDetailView',
    'RegenerateVerificationCodeView',
    'AdminOrderListView',
    'AdminOrderDetailView',
    'AdminOrderStatusView',
    'AdminOrderVerifyView',
    'AdminOrderStatisticsView',
]
