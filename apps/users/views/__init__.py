"""
User views module.

All views are exported from this module to maintain backward compatibility.
"""
from .auth_views import RegisterView, LoginView, LogoutView, MeView
from .admin_views import AdminUserListView, AdminUserDetailView, AdminAdjustPointsView
from .approval_views import ApprovalListView, ApproveUserView, RejectUserView

__all__ = [
    'RegisterView',
    'LoginView',
    'LogoutView',
    'MeView',
    'AdminUserListView',
    'AdminUserDetailView',
    'AdminAdjustPointsView',
    'ApprovalListView',
    'ApproveUserView',
    'RejectUserView',
]
