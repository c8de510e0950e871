"""
Serializers for manual point adjustments.
"""
from django.contrib.auth import get_user_model
from rest_framework import serializers

from apps.common.validators import validate_points_amount


class PointsAdjustmentSerializer(serializers.Serializer):
    """
    Used for: POST /api/admin/users/{id}/adjust-points/
    """
    type = serializers.ChoiceField(choices=['add', 'deduct'])
    amount = serializers.IntegerField(validators=[validate_points_amount])
    reason = serializers.CharField(max_length=255)


class AwardPointsSerializer(PointsAdjustmentSerializer):
    """
    Used for: POST /api/points/award/
    """
    user_id = serializers.PrimaryKeyRelatedField(
        queryset=get_user_model().objects.all(), source='target'
    )
