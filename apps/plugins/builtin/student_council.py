"""
Student council plugin: lets council members organise activities and award points.

The activity endpoints live in ``apps.council`` and answer only while this
plugin is enabled.
"""
from apps.users.models import Permission, Role
from ..base import Plugin
from ..manager import BOOTED_HOOK


class StudentCouncilPlugin(Plugin):

    def get_name(self):
        return 'student_council'

    def get_version(self):
        return '1.0.0'

    def get_slug(self):
        return 'student_council'

    def get_description(self):
        return 'Student council members organise activities and award points to participants'

    def get_author(self):
        return 'System'

    def get_permissions(self):
        return [
            {
                'name': 'Manage activities',
                'slug': 'student_council.manage',
                'description': 'Create, edit and delete student council activities',
            },
            {
                'name': 'Award points',
                'slug': 'student_council.points',
                'description': 'Award points to activity participants',
            },
            {
                'name': 'View activity reports',
                'slug': 'student_council.events',
                'description': 'View activity statistics and participation',
            },
        ]

    def boot(self, manager):
        manager.add_hook(BOOTED_HOOK, self.create_role)

    def create_role(self, manager=None):
        """Council role holding every permission the plugin registered"""
        role, _ = Role.objects.get_or_create(
            slug='student_council',
            defaults={
                'name': '学生会',
                'description': 'Student council member, organises activities and awards points',
                'is_system': False,
                'level': 70,
            },
        )
        role.permissions.add(*Permission.objects.filter(module=self.get_slug()))
