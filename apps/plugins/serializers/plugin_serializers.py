from rest_framework import serializers

from ..models import Plugin, PluginPermission


class PluginPermissionSerializer(serializers.ModelSerializer):
    class Meta:
        model = PluginPermission
        fields = ['id', 'name', 'slug', 'description']
        read_only_fields = fields


class PluginSerializer(serializers.ModelSerializer):
    permissions = PluginPermissionSerializer(many=True, read_only=True)

    class Meta:
        model = Plugin
        fields = [
            'id', 'name', 'slug', 'version', 'description', 'author', 'status',
            'dependencies', 'config', 'permissions', 'installed_at', 'enabled_at'
        ]
        read_only_fields = fields


class PluginInstallSerializer(serializers.Serializer):
    """
    Used for: POST /api/admin/plugins/install/
    """
    slug = serializers.SlugField(max_length=100)
