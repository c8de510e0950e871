"""
Class services module.

All services are exported from this module to maintain backward compatibility.
"""
from .class_service import ClassService

__all__ = [
    'ClassService',
]
