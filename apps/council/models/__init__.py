"""
Council models module.

All models are exported from this module to maintain backward compatibility.
"""
from .activity import CouncilActivity, CouncilActivityParticipant, CouncilActivityPoint

__all__ = [
    'CouncilActivity',
    'CouncilActivityParticipant',
    'CouncilActivityPoint',
]
