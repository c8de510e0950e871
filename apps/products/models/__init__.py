"""
Product models module.

All models are exported from this module to maintain backward compatibility.
"""
from .category import ProductCategory
from .product import Product

__all__ = [
    'ProductCategory',
    'Product',
]
