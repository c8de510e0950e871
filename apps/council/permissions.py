"""
Permissions for the student council endpoints.

The endpoints exist only while the ``student_council`` plugin is enabled.
School administrators pass every check; other users need one of the
plugin's permissions through their roles.
"""
from rest_framework.exceptions import NotFound
from rest_framework.permissions import BasePermission

from apps.common.permissions import SCHOOL_ADMIN_ROLES
from apps.plugins.models import Plugin

PLUGIN_SLUG = 'student_council'

MANAGE_PERMISSION = 'student_council.manage'
POINTS_PERMISSION = 'student_council.points'
EVENTS_PERMISSION = 'student_council.events'


class HasCouncilPermission(BasePermission):
    """Allow approved users holding any of ``required_permissions``."""
    required_permissions = ()
    message = 'Student council permission required.'

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False
        if not Plugin.objects.enabled().filter(slug=PLUGIN_SLUG).exists():
            raise NotFound('Student council plugin is not enabled.')
        if user.is_superuser:
            return True
        if not user.is_approved():
            return False
        if user.has_role(SCHOOL_ADMIN_ROLES):
            return True
        return any(user.has_permission(slug) for slug in self.required_permissions)


class CanViewCouncilActivities(HasCouncilPermission):
    required_permissions = (EVENTS_PERMISSION, MANAGE_PERMISSION)


class CanManageCouncilActivities(HasCouncilPermission):
    required_permissions = (MANAGE_PERMISSION,)


class CanAwardCouncilPoints(HasCouncilPermission):
    required_permissions = (POINTS_PERMISSION,)
