"""
Parent models module.

All models are exported from this module to maintain backward compatibility.
"""
from .parent_child import ParentChild

__all__ = [
    'ParentChild',
]
