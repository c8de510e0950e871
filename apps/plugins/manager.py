"""
Plugin manager: in-memory registry of plugin instances and hook callbacks,
plus the database lifecycle (install, enable, disable, uninstall).
"""
import logging
from collections import defaultdict

from django.conf import settings
from django.db import DatabaseError, transaction
from django.utils import timezone
from django.utils.module_loading import import_string

from apps.common.exceptions import PluginError
from apps.users.models import Permission
from .models import Plugin, PluginPermission

logger = logging.getLogger(__name__)

BOOTED_HOOK = 'plugins.booted'


class PluginManager:
    """Registry keyed by plugin slug with a flat callback list per hook name"""

    def __init__(self):
        self.plugins = {}
        self.hooks = defaultdict(list)
        self.booted = set()
        self._booting = None

    # Registry

    def register_plugin(self, plugin):
        slug = plugin.get_slug()
        self.plugins[slug] = plugin
        plugin.register()
        logger.debug(f"Registered plugin {slug}")

    def unregister_plugin(self, slug):
        self.plugins.pop(slug, None)
        self.booted.discard(slug)
        for hook in list(self.hooks):
            self.hooks[hook] = [(owner, cb) for owner, cb in self.hooks[hook] if owner != slug]

    def boot_plugins(self):
        """Boot every registered plugin that has not been booted, then run ``plugins.booted``"""
        for slug, plugin in self.plugins.items():
            if slug in self.booted:
                continue
            self._booting = slug
            try:
                plugin.boot(self)
            finally:
                self._booting = None
            self.booted.add(slug)
        self.execute_hook(BOOTED_HOOK, self)

    def get_plugins(self):
        return dict(self.plugins)

    def get_plugin(self, slug):
        return self.plugins.get(slug)

    # Hooks

    def add_hook(self, hook, callback):
        # Callbacks added while a plugin boots are dropped when it is disabled
        self.hooks[hook].append((self._booting, callback))

    def execute_hook(self, hook, *args, **kwargs):
        """Run callbacks in order and return the first result that is not None"""
        for owner, callback in list(self.hooks.get(hook, [])):
            result = callback(*args, **kwargs)
            if result is not None:
                return result
        return None

    # Plugin classes

    def get_plugin_class(self, slug):
        path = settings.PLUGIN_CLASSES.get(slug)
        if not path:
            return None
        try:
            return import_string(path)
        except ImportError:
            logger.error(f"Cannot import plugin class {path} for {slug}", exc_info=True)
            return None

    def load_plugin_instance(self, record):
        plugin_class = self.get_plugin_class(record.slug)
        return plugin_class() if plugin_class else None

    def get_available_plugins(self):
        """Configured plugin classes with their install state"""
        installed = {p.slug: p for p in Plugin.objects.all()}
        available = []
        for slug in settings.PLUGIN_CLASSES:
            plugin_class = self.get_plugin_class(slug)
            if plugin_class is None:
                continue
            instance = plugin_class()
            record = installed.get(slug)
            available.append({
                'slug': slug,
                'name': instance.get_name(),
                'version': instance.get_version(),
                'description': instance.get_description(),
                'author': instance.get_author(),
                'installed': record is not None,
                'status': record.status if record else None,
            })
        return available

    # Lifecycle

    def register_plugin_permissions(self, plugin, record):
        for item in plugin.get_permissions():
            permission, _ = Permission.objects.get_or_create(
                slug=item['slug'],
                defaults={
                    'name': item['name'],
                    'module': plugin.get_slug(),
                    'description': item.get('description', ''),
                },
            )
            PluginPermission.objects.get_or_create(
                plugin=record,
                slug=item['slug'],
                defaults={
                    'name': item['name'],
                    'description': item.get('description', ''),
                    'permission': permission,
                },
            )

    def install_plugin(self, slug):
        """
        Create the registry row for a configured plugin.

        Raises:
            PluginError: Unknown slug or already installed
        """
        plugin_class = self.get_plugin_class(slug)
        if plugin_class is None:
            raise PluginError(f"Plugin {slug} is not available")
        if Plugin.objects.filter(slug=slug).exists():
            raise PluginError(f"Plugin {slug} is already installed")

        instance = plugin_class()
        with transaction.atomic():
            record = Plugin.objects.create(
                name=instance.get_name(),
                slug=slug,
                version=instance.get_version(),
                description=instance.get_description() or '',
                author=instance.get_author() or '',
                dependencies=list(instance.get_dependencies()),
                status=Plugin.STATUS_INSTALLED,
                installed_at=timezone.now(),
            )
            instance.install()
            self.register_plugin_permissions(instance, record)

        logger.info(f"Installed plugin {slug} {record.version}")
        return record

    def check_dependencies(self, record):
        dependencies = record.dependencies or []
        enabled = set(Plugin.objects.enabled().filter(slug__in=dependencies).values_list('slug', flat=True))
        missing = [slug for slug in dependencies if slug not in enabled]
        if missing:
            raise PluginError(f"Missing enabled dependencies: {', '.join(missing)}")

    def enable_plugin(self, record):
        """
        Raises:
            PluginError: A dependency is not enabled or the plugin class is gone
        """
        self.check_dependencies(record)
        instance = self.load_plugin_instance(record)
        if instance is None:
            raise PluginError(f"Plugin class for {record.slug} cannot be loaded")

        record.status = Plugin.STATUS_ENABLED
        record.enabled_at = timezone.now()
        record.save(update_fields=['status', 'enabled_at', 'updated_at'])

        instance.enable()
        self.register_plugin(instance)
        self.boot_plugins()
        logger.info(f"Enabled plugin {record.slug}")
        return record

    def disable_plugin(self, record):
        record.status = Plugin.STATUS_DISABLED
        record.save(update_fields=['status', 'updated_at'])

        instance = self.get_plugin(record.slug) or self.load_plugin_instance(record)
        if instance is not None:
            instance.disable()
        self.unregister_plugin(record.slug)
        logger.info(f"Disabled plugin {record.slug}")
        return record

    def uninstall_plugin(self, record):
        instance = self.get_plugin(record.slug) or self.load_plugin_instance(record)
        if instance is not None:
            instance.uninstall()
        self.unregister_plugin(record.slug)

        with transaction.atomic():
            permission_slugs = list(record.permissions.values_list('slug', flat=True))
            Permission.objects.filter(slug__in=permission_slugs, module=record.slug).delete()
            record.delete()
        logger.info(f"Uninstalled plugin {record.slug}")

    def reload_plugin(self, record):
        if record.is_enabled:
            self.disable_plugin(record)
            self.enable_plugin(record)
        return record

    def get_enabled_plugins(self):
        return Plugin.objects.enabled()

    def load_enabled_plugins(self):
        """Register and boot every plugin enabled in the database"""
        try:
            records = list(self.get_enabled_plugins())
        except DatabaseError:
            logger.warning("Plugin table unavailable, no plugins loaded")
            return

        for record in records:
            instance = self.load_plugin_instance(record)
            if instance is None:
                logger.warning(f"Enabled plugin {record.slug} has no loadable class")
                continue
            self.register_plugin(instance)
        self.boot_plugins()


_manager = None


def get_plugin_manager():
    """Shared manager; enabled plugins are loaded on first use"""
    global _manager
    if _manager is None:
        _manager = PluginManager()
        _manager.load_enabled_plugins()
    return _manager


def reset_plugin_manager():
    global _manager
    _manager = None
