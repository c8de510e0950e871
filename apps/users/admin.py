from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils import timezone

from .models import User, Role, Permission, UserRole


class UserRoleInline(admin.TabularInline):
    model = UserRole
    extra = 0
    fields = ['role', 'metadata', 'created_at']
    readonly_fields = ['created_at']


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """School user admin with registration review actions"""
    list_display = [
        'username', 'name', 'email', 'student_id', 'school_class',
        'registration_status', 'is_active', 'created_at'
    ]
    list_filter = ['registration_status', 'is_active', 'is_staff', 'roles', 'grade']
    search_fields = ['username', 'name', 'email', 'student_id', 'phone']
    ordering = ['-created_at']
    raw_id_fields = ['school_class', 'grade', 'reviewer']
    inlines = [UserRoleInline]

    fieldsets = BaseUserAdmin.fieldsets + (
        ('School Info', {
            'fields': (
                'name', 'nickname', 'phone', 'student_id', 'id_number', 'avatar',
                'school_class', 'grade', 'is_head_teacher', 'student_union_department'
            )
        }),
        ('Registration', {
            'fields': (
                'registration_status', 'requires_review', 'reviewer',
                'reviewed_at', 'rejection_reason'
            )
        }),
        ('Timestamps', {
            'fields': ('last_login_ip', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
    readonly_fields = ['last_login_ip', 'created_at', 'updated_at']

    actions = ['approve_users', 'activate_users', 'deactivate_users']

    def approve_users(self, request, queryset):
        """Approve selected pending registrations"""
        updated = queryset.filter(registration_status=User.STATUS_PENDING).update(
            registration_status=User.STATUS_APPROVED,
            reviewer=request.user,
            reviewed_at=timezone.now(),
        )
        self.message_user(request, f'{updated} users approved.')
    approve_users.short_description = 'Approve selected registrations'

    def activate_users(self, request, queryset):
        """Activate selected users"""
        updated = queryset.update(is_active=True)
        self.message_user(request, f'{updated} users activated.')
    activate_users.short_description = 'Activate selected users'

    def deactivate_users(self, request, queryset):
        """Deactivate selected users"""
        updated = queryset.update(is_active=False)
        self.message_user(request, f'{updated} users deactivated.')
    deactivate_users.short_description = 'Deactivate selected users'


@admin.register(Role)
class RoleAdmin(admin.ModelAdmin):
    list_display = ['name', 'slug', 'level', 'is_system']
    search_fields = ['name', 'slug']
    filter_horizontal = ['permissions']


@admin.register(Permission)
class PermissionAdmin(admin.ModelAdmin):
    list_display = ['slug', 'name', 'module']
    list_filter = ['module']
    search_fields = ['slug', 'name']
