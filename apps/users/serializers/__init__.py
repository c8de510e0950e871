"""
User serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .user_serializers import (
    RoleSerializer, UserListSerializer, UserDetailSerializer,
    UserRegistrationSerializer, AdminUserUpdateSerializer, LoginSerializer
)
from .approval_serializers import PendingUserSerializer, RejectSerializer

__all__ = [
    'RoleSerializer',
    'UserListSerializer',
    'UserDetailSerializer',
    'UserRegistrationSerializer',
    'AdminUserUpdateSerializer',
    'LoginSerializer',
    'PendingUserSerializer',
    'RejectSerializer',
]
