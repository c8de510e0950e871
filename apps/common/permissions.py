"""
Role-based permission classes shared by the API views.
"""
from rest_framework.permissions import BasePermission

SCHOOL_ADMIN_ROLES = ('super_admin', 'admin', 'principal', 'grade_director')
STAFF_ROLES = SCHOOL_ADMIN_ROLES + ('teacher',)
POINT_OPERATOR_ROLES = ('super_admin', 'admin', 'teacher', 'student_union_member')


class HasAnyRole(BasePermission):
    """Allow approved users holding at least one of ``required_roles``."""
    required_roles = ()
    message = 'You do not have the required role for this action.'

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False
        if user.is_superuser:
            return True
        return user.is_approved() and user.has_role(self.required_roles)


class IsSchoolAdmin(HasAnyRole):
    required_roles = SCHOOL_ADMIN_ROLES
    message = 'School administrator role required.'


class IsStaffMember(HasAnyRole):
    required_roles = STAFF_ROLES


class IsPointOperator(HasAnyRole):
    required_roles = POINT_OPERATOR_ROLES


class IsParent(HasAnyRole):
    required_roles = ('parent',)
    message = 'Parent role required.'


class IsApprovedUser(BasePermission):
    message = 'Your registration has not been approved.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_approved())
