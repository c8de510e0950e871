"""
Parent serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .parent_serializers import BindChildSerializer, ParentChildSerializer, ParentBindingSerializer

__all__ = [
    'BindChildSerializer',
    'ParentChildSerializer',
    'ParentBindingSerializer',
]
