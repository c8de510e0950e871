"""
Product serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .product_serializers import (
    ProductCategorySerializer, ProductListSerializer, ProductDetailSerializer
)

__all__ = [
    'ProductCategorySerializer',
    'ProductListSerializer',
    'ProductDetailSerializer',
]
