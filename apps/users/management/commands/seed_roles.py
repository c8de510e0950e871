from django.core.management.base import BaseCommand
from django.db import transaction

from apps.users.models import Permission, Role
from apps.users.roles import DEFAULT_PERMISSIONS, DEFAULT_ROLES, ROLE_PERMISSIONS


class Command(BaseCommand):
    help = 'Create or update the built-in roles and permissions'

    @transaction.atomic
    def handle(self, *args, **options):
        permissions = {}
        for slug, name, module in DEFAULT_PERMISSIONS:
            permission, _ = Permission.objects.update_or_create(
                slug=slug, defaults={'name': name, 'module': module}
            )
            permissions[slug] = permission

        created_count = 0
        updated_count = 0

        for role_data in DEFAULT_ROLES:
            role, created = Role.objects.update_or_create(
                slug=role_data['slug'],
                defaults={
                    'name': role_data['name'],
                    'level': role_data['level'],
                    'description': role_data['description'],
                    'is_system': True,
                }
            )

            if role.slug in ('super_admin', 'admin'):
                role.permissions.set(permissions.values())
            else:
                role.permissions.set(
                    [permissions[slug] for slug in ROLE_PERMISSIONS.get(role.slug, [])]
                )

            if created:
                created_count += 1
                self.stdout.write(self.style.SUCCESS(f'Created role: {role.slug}'))
            else:
                updated_count += 1
                self.stdout.write(f'Updated role: {role.slug}')

        self.stdout.write(
            self.style.SUCCESS(
                f'Roles seeded: {created_count} created, {updated_count} updated, '
                f'{len(permissions)} permissions'
            )
        )
