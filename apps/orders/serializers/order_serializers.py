"""
Order serializers for list and detail views.
"""
from rest_framework import serializers
from ..models import Order, OrderStatusHistory


class OrderStatusHistorySerializer(serializers.ModelSerializer):
    operator_name = serializers.SerializerMethodField()

    class Meta:
        model = OrderStatusHistory
        fields = ['id', 'from_status', 'to_status', 'note', 'operator_name', 'created_at']
        read_only_fields = fields

    def get_operator_name(self, obj):
        return obj.operator.display_name if obj.operator_id else None


class OrderListSerializer(serializers.ModelSerializer):
    """
    Serializer for order list view.
    Used for: GET /api/shop/orders/ and the parent child orders view
    """
    product_name = serializers.CharField(source='product.name', read_only=True)
    status_display = serializers.CharField(source='get_status_display', read_only=True)
    is_verified = serializers.BooleanField(read_only=True)

    class Meta:
        model = Order
        fields = [
            'id', 'order_no', 'product', 'product_name', 'points_spent', 'status',
            'status_display', 'is_verified', 'created_at'
        ]
        read_only_fields = fields


class OrderDetailSerializer(OrderListSerializer):
    """
    Serializer for order detail view.
    Used for: GET /api/shop/orders/{id}/
    The view adds the verification code fields.
    """
    status_history = OrderStatusHistorySerializer(many=True, read_only=True)

    class Meta(OrderListSerializer.Meta):
        fields = OrderListSerializer.Meta.fields + [
            'shipping_info', 'third_party_order_id', 'verification_code_expires_at',
            'verified_at', 'status_history', 'updated_at'
        ]
        read_only_fields = fields


class AdminOrderSerializer(OrderDetailSerializer):
    """Order with owner information for the admin views"""
    user_id = serializers.IntegerField(read_only=True)
    user_name = serializers.CharField(source='user.display_name', read_only=True)
    verified_by_name = serializers.SerializerMethodField()

    class Meta(OrderDetailSerializer.Meta):
        fields = OrderDetailSerializer.Meta.fields + ['user_id', 'user_name', 'verified_by_name', 'metadata']
        read_only_fields = fields

    def get_verified_by_name(self, obj):
        return obj.verified_by.display_name if obj.verified_by_id else None
