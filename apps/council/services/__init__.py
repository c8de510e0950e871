"""
Council services module.

All services are exported from this module to maintain backward compatibility.
"""
from .activity_service import CouncilActivityService

__all__ = [
    'CouncilActivityService',
]
