"""
Built-in roles and permissions seeded by ``manage.py seed_roles``.
"""

DEFAULT_ROLES = [
    {'slug': 'super_admin', 'name': '超级管理员', 'level': 100, 'description': 'Full access to the system'},
    {'slug': 'admin', 'name': '管理员', 'level': 95, 'description': 'System administrator'},
    {'slug': 'principal', 'name': '校长', 'level': 90, 'description': 'School principal'},
    {'slug': 'grade_director', 'name': '年级主任', 'level': 80, 'description': 'Manages one grade'},
    {'slug': 'teacher', 'name': '教师', 'level': 60, 'description': 'Teaches one or more classes'},
    {'slug': 'student_union_member', 'name': '学生会成员', 'level': 45, 'description': 'May award points to students'},
    {'slug': 'student', 'name': '学生', 'level': 40, 'description': 'Earns and redeems points'},
    {'slug': 'parent', 'name': '家长', 'level': 30, 'description': 'Views linked children'},
]

DEFAULT_PERMISSIONS = [
    ('users.view', 'View users', 'users'),
    ('users.create', 'Create users', 'users'),
    ('users.edit', 'Edit users', 'users'),
    ('users.delete', 'Delete users', 'users'),
    ('users.approve', 'Approve registrations', 'users'),
    ('roles.view', 'View roles', 'roles'),
    ('roles.manage', 'Manage roles', 'roles'),
    ('points.view', 'View points', 'points'),
    ('points.adjust', 'Adjust points', 'points'),
    ('shop.view', 'View shop', 'shop'),
    ('shop.manage', 'Manage products', 'shop'),
    ('shop.orders', 'Manage orders', 'shop'),
    ('plugins.view', 'View plugins', 'plugins'),
    ('plugins.manage', 'Manage plugins', 'plugins'),
    ('settings.manage', 'Manage settings', 'settings'),
]

# Permission slugs granted per role; super_admin and admin get everything
ROLE_PERMISSIONS = {
    'principal': ['users.view', 'users.approve', 'roles.view', 'points.view', 'points.adjust',
                  'shop.view', 'shop.manage', 'shop.orders'],
    'grade_director': ['users.view', 'users.approve', 'points.view', 'points.adjust',
                       'shop.view', 'shop.orders'],
    'teacher': ['users.view', 'points.view', 'points.adjust', 'shop.view'],
    'student_union_member': ['points.view', 'points.adjust', 'shop.view'],
    'student': ['points.view', 'shop.view'],
    'parent': ['points.view'],
}

REGISTRATION_ROLES = ('student', 'teacher', 'parent')

# Roles whose registrations wait for a reviewer
REVIEWED_ROLES = ('student', 'teacher')


def get_or_create_role(slug):
    """Return the Role for ``slug``, creating a built-in one on first use"""
    from .models import Role

    defaults = next((r for r in DEFAULT_ROLES if r['slug'] == slug), {'name': slug, 'level': 0})
    role, _ = Role.objects.get_or_create(
        slug=slug,
        defaults={
            'name': defaults['name'],
            'level': defaults['level'],
            'description': defaults.get('description', ''),
            'is_system': slug in {r['slug'] for r in DEFAULT_ROLES},
        },
    )
    return role
