"""
Points models module.

All models are exported from this module to maintain backward compatibility.
"""
from .user_point import UserPoint
from .transaction import PointTransaction

__all__ = [
    'UserPoint',
    'PointTransaction',
]
