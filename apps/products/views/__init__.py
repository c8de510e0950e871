"""
Product views module.

All views are exported from this module to maintain backward compatibility.
"""
from .product_views import ProductListView, ProductDetailView, CategoryListView

__all__ = [
    'ProductListView',
    'ProductDetailView',
    'CategoryListView',
]
