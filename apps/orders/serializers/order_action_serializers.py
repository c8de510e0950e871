"""
Serializers validating order actions: exchange, status change and verification.
"""
from rest_framework import serializers

from apps.common.validators import validate_phone
from apps.products.models import Product
from ..models import Order
from ..services.order_service import VERIFICATION_METHODS


class ShippingInfoSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
    phone = serializers.CharField(max_length=20, validators=[validate_phone])
    address = serializers.CharField(max_length=255)


class ExchangeSerializer(serializers.Serializer):
    """
    Used for: POST /api/shop/orders/
    """
    product_id = serializers.PrimaryKeyRelatedField(queryset=Product.objects.all(), source='product')
    shipping_info = ShippingInfoSerializer(required=False, allow_null=True)


class OrderStatusUpdateSerializer(serializers.Serializer):
    """
    Used for: POST /api/admin/orders/{id}/status/
    """
    status = serializers.ChoiceField(choices=[choice[0] for choice in Order.STATUS_CHOICES])
    note = serializers.CharField(max_length=500, required=False, allow_blank=True, default='')


class OrderVerifySerializer(serializers.Serializer):
    """
    Used for: POST /api/admin/orders/{id}/verify/
    """
    method = serializers.ChoiceField(choices=VERIFICATION_METHODS)
    code = serializers.CharField(min_length=6, max_length=6, required=False)
    password = serializers.CharField(required=False, trim_whitespace=False)
    id_number = serializers.CharField(required=False)
    name = serializers.CharField(required=False)
    admin_password = serializers.CharField(required=False, trim_whitespace=False)

    REQUIRED_FIELDS = {
        'code': ['code'],
        'password': ['password'],
        'id_card': ['id_number', 'name'],
        'direct': ['admin_password'],
    }

    def validate(self, attrs):
        missing = [field for field in self.REQUIRED_FIELDS[attrs['method']] if not attrs.get(field)]
        if missing:
            raise serializers.ValidationError(
                {field: 'This field is required for this verification method.' for field in missing}
            )
        return attrs
