"""
Ledger serializers.
"""
from rest_framework import serializers
from ..models import PointTransaction


class PointTransactionSerializer(serializers.ModelSerializer):
    """
    Used for: GET /api/points/history/ and the parent child transaction view
    """
    type_display = serializers.CharField(source='get_type_display', read_only=True)
    operator_name = serializers.SerializerMethodField()

    class Meta:
        model = PointTransaction
        fields = [
            'id', 'type', 'type_display', 'amount', 'balance_after', 'source',
            'description', 'metadata', 'operator_name', 'created_at'
        ]
        read_only_fields = fields

    def get_operator_name(self, obj):
        return obj.operator.display_name if obj.operator_id else None
