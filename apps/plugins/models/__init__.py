"""
Plugin models module.

All models are exported from this module to maintain backward compatibility.
"""
from .plugin import Plugin, PluginPermission

__all__ = [
    'Plugin',
    'PluginPermission',
]
