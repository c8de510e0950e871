"""
Council views module.

All views are exported from this module to maintain backward compatibility.
"""
from .activity_views import CouncilActivityViewSet, council_dashboard

__all__ = [
    'CouncilActivityViewSet',
    'council_dashboard',
]
