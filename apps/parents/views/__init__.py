"""
Parent views module.

All views are exported from this module to maintain backward compatibility.
"""
from .parent_views import (
    bind_child, list_children, unbind_child, child_points, child_ranking,
    child_transactions, child_orders
)
from .admin_binding_views import list_bindings, approve_binding

__all__ = [
    'bind_child',
    'list_children',
    'unbind_child',
    'child_points',
    'child_ranking',
    'child_transactions',
    'child_orders',
    'list_bindings',
    'approve_binding',
]
