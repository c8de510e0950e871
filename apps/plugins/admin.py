from django.contrib import admin

from .models import Plugin, PluginPermission


class PluginPermissionInline(admin.TabularInline):
    model = PluginPermission
    extra = 0
    readonly_fields = ['name', 'slug', 'description', 'permission']


@admin.register(Plugin)
class PluginAdmin(admin.ModelAdmin):
    list_display = ['name', 'slug', 'version', 'status', 'installed_at', 'enabled_at']
    list_filter = ['status']
    search_fields = ['name', 'slug']
    inlines = [PluginPermissionInline]
