"""
Plugin views module.

All views are exported from this module to maintain backward compatibility.
"""
from .plugin_views import (
    PluginListView, PluginInstallView, PluginEnableView, PluginDisableView, PluginDetailView
)

__all__ = [
    'PluginListView',
    'PluginInstallView',
    'PluginEnableView',
    'PluginDisableView',
    'PluginDetailView',
]
