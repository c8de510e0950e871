"""
Order models module.

All models are exported from this module to maintain backward compatibility.
"""
from .order import Order
from .status_history import OrderStatusHistory

__all__ = [
    'Order',
    'OrderStatusHistory',
]
