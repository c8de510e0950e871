"""
Council serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .activity_serializers import (
    CouncilActivitySerializer,
    CouncilActivityDetailSerializer,
    CouncilParticipantSerializer,
    ParticipantInputSerializer,
    AwardPointsSerializer,
)

__all__ = [
    'CouncilActivitySerializer',
    'CouncilActivityDetailSerializer',
    'CouncilParticipantSerializer',
    'ParticipantInputSerializer',
    'AwardPointsSerializer',
]
