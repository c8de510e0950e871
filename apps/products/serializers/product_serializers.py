"""
Product serializers for shop list and detail views.
"""
from rest_framework import serializers
from ..models import Product, ProductCategory


class ProductCategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = ProductCategory
        fields = ['id', 'name', 'slug', 'description', 'parent', 'sort_order']


class ProductListSerializer(serializers.ModelSerializer):
    """Serializer for product list view - GET /api/shop/products/"""
    category_name = serializers.CharField(source='category.name', read_only=True, default=None)
    image_url = serializers.SerializerMethodField()
    in_stock = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'image_url', 'points_required', 'stock', 'in_stock',
            'category', 'category_name', 'is_third_party', 'status'
        ]
        read_only_fields = fields

    def get_image_url(self, obj):
        """Return a full URL for relative image paths"""
        if not obj.image:
            return ''
        if obj.image.startswith('http://') or obj.image.startswith('https://'):
            return obj.image

        request = self.context.get('request')
        if request:
            return request.build_absolute_uri(obj.image)
        return obj.image

    def get_in_stock(self, obj):
        return obj.has_stock()


class ProductDetailSerializer(ProductListSerializer):
    """Serializer for product detail view - GET /api/shop/products/{id}/"""

    class Meta(ProductListSerializer.Meta):
        fields = ProductListSerializer.Meta.fields + ['description', 'created_at', 'updated_at']
        read_only_fields = fields
