"""
Points serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .transaction_serializers import PointTransactionSerializer
from .adjustment_serializers import PointsAdjustmentSerializer, AwardPointsSerializer

__all__ = [
    'PointTransactionSerializer',
    'PointsAdjustmentSerializer',
    'AwardPointsSerializer',
]
