"""
Order serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .order_serializers import (
    OrderListSerializer, OrderDetailSerializer, OrderStatusHistorySerializer,
    AdminOrderSerializer
)
from .order_action_serializers import (
    ExchangeSerializer, OrderStatusUpdateSerializer, OrderVerifySerializer
)

__all__ = [
    'OrderListSerializer',
    'OrderDetailSerializer',
    'OrderStatusHistorySerializer',
    'AdminOrderSerializer',
    'ExchangeSerializer',
    'OrderStatusUpdateSerializer',
    'OrderVerifySerializer',
]
