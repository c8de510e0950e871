"""
Settings package for points_server.

Pick a module through DJANGO_SETTINGS_MODULE, e.g.
``points_server.settings.development``.
"""
