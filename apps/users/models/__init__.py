"""
User models module.

All models are exported from this module to maintain backward compatibility.
"""
from .user import User
from .role import Role, Permission, UserRole

__all__ = [
    'User',
    'Role',
    'Permission',
    'UserRole',
]
