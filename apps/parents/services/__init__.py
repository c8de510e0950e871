"""
Parent services module.

All services are exported from this module to maintain backward compatibility.
"""
from .parent_service import ParentService

__all__ = [
    'ParentService',
]
