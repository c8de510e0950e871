"""
Class views module.

All views are exported from this module to maintain backward compatibility.
"""
from .class_views import SchoolClassViewSet, GradeListView

__all__ = [
    'SchoolClassViewSet',
    'GradeListView',
]
