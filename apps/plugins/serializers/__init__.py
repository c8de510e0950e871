"""
Plugin serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .plugin_serializers import PluginSerializer, PluginPermissionSerializer, PluginInstallSerializer

__all__ = [
    'PluginSerializer',
    'PluginPermissionSerializer',
    'PluginInstallSerializer',
]
