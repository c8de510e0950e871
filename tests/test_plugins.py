"""
Tests for the plugin registry, hooks and database lifecycle.
"""
from django.test import TestCase, override_settings

from apps.common.exceptions import PluginError
from apps.plugins.base import Plugin as BasePlugin
from apps.plugins.manager import PluginManager, get_plugin_manager
from apps.plugins.models import Plugin, PluginPermission
from apps.users.models import Permission, Role


class EchoPlugin(BasePlugin):
    booted = 0

    def get_name(self):
        return 'echo'

    def get_version(self):
        return '0.1.0'

    def get_slug(self):
        return 'echo'

    def boot(self, manager):
        EchoPlugin.booted += 1
        manager.add_hook('greet', lambda name: f"hello {name}")


class NeedsCouncilPlugin(EchoPlugin):

    def get_name(self):
        return 'needs_council'

    def get_slug(self):
        return 'needs_council'

    def get_dependencies(self):
        return ['student_council']


TEST_PLUGIN_CLASSES = {
    'student_council': 'apps.plugins.builtin.student_council.StudentCouncilPlugin',
    'needs_council': 'tests.test_plugins.NeedsCouncilPlugin',
    'missing': 'tests.test_plugins.DoesNotExist',
}


class PluginRegistryTests(TestCase):

    def setUp(self):
        EchoPlugin.booted = 0
        self.manager = PluginManager()

    def test_register_and_lookup(self):
        plugin = EchoPlugin()
        self.manager.register_plugin(plugin)

        self.assertIs(self.manager.get_plugin('echo'), plugin)
        self.assertEqual(list(self.manager.get_plugins()), ['echo'])
        self.assertIsNone(self.manager.get_plugin('other'))

    def test_plugins_boot_once(self):
        self.manager.register_plugin(EchoPlugin())
        self.manager.boot_plugins()
        self.manager.boot_plugins()
        self.assertEqual(EchoPlugin.booted, 1)

    def test_execute_hook_returns_first_non_none(self):
        self.manager.add_hook('pick', lambda: None)
        self.manager.add_hook('pick', lambda: 'second')
        self.manager.add_hook('pick', lambda: 'third')

        self.assertEqual(self.manager.execute_hook('pick'), 'second')
        self.assertIsNone(self.manager.execute_hook('unknown'))

    def test_hooks_receive_arguments(self):
        self.manager.register_plugin(EchoPlugin())
        self.manager.boot_plugins()
        self.assertEqual(self.manager.execute_hook('greet', 'council'), 'hello council')

    def test_booted_hook_runs_after_boot(self):
        calls = []
        self.manager.add_hook('plugins.booted', lambda manager: calls.append(manager))
        self.manager.boot_plugins()
        self.assertEqual(calls, [self.manager])

    def test_unregister_drops_plugin_hooks(self):
        self.manager.register_plugin(EchoPlugin())
        self.manager.boot_plugins()
        self.manager.unregister_plugin('echo')

        self.assertIsNone(self.manager.execute_hook('greet', 'x'))
        self.assertIsNone(self.manager.get_plugin('echo'))


@override_settings(PLUGIN_CLASSES=TEST_PLUGIN_CLASSES)
class PluginLifecycleTests(TestCase):

    def setUp(self):
        self.manager = PluginManager()

    def test_get_plugin_class(self):
        self.assertEqual(self.manager.get_plugin_class('needs_council'), NeedsCouncilPlugin)
        self.assertIsNone(self.manager.get_plugin_class('missing'))
        self.assertIsNone(self.manager.get_plugin_class('unknown'))

    def test_install_creates_row_and_permissions(self):
        record = self.manager.install_plugin('student_council')

        self.assertEqual(record.status, Plugin.STATUS_INSTALLED)
        self.assertEqual(record.version, '1.0.0')
        self.assertIsNotNone(record.installed_at)
        self.assertEqual(
            set(record.permissions.values_list('slug', flat=True)),
            {'student_council.manage', 'student_council.points', 'student_council.events'}
        )
        self.assertEqual(Permission.objects.filter(module='student_council').count(), 3)

    def test_install_twice_fails(self):
        self.manager.install_plugin('student_council')
        with self.assertRaises(PluginError):
            self.manager.install_plugin('student_council')

    def test_install_unknown_plugin_fails(self):
        with self.assertRaises(PluginError):
            self.manager.install_plugin('unknown')

    def test_enable_boots_plugin_and_creates_role(self):
        record = self.manager.install_plugin('student_council')
        self.manager.enable_plugin(record)

        record.refresh_from_db()
        self.assertEqual(record.status, Plugin.STATUS_ENABLED)
        self.assertIsNotNone(record.enabled_at)
        self.assertIsNotNone(self.manager.get_plugin('student_council'))
        role = Role.objects.get(slug='student_council')
        self.assertEqual(
            set(role.permissions.values_list('slug', flat=True)),
            {'student_council.manage', 'student_council.points', 'student_council.events'}
        )

    def test_enable_requires_enabled_dependencies(self):
        record = self.manager.install_plugin('needs_council')
        with self.assertRaises(PluginError):
            self.manager.enable_plugin(record)

        council = self.manager.install_plugin('student_council')
        self.manager.enable_plugin(council)
        self.manager.enable_plugin(record)
        self.assertEqual(record.status, Plugin.STATUS_ENABLED)

    def test_disable_unregisters(self):
        record = self.manager.install_plugin('student_council')
        self.manager.enable_plugin(record)
        self.manager.disable_plugin(record)

        record.refresh_from_db()
        self.assertEqual(record.status, Plugin.STATUS_DISABLED)
        self.assertIsNone(self.manager.get_plugin('student_council'))

    def test_reload_only_touches_enabled_plugins(self):
        record = self.manager.install_plugin('student_council')
        self.manager.reload_plugin(record)
        self.assertEqual(record.status, Plugin.STATUS_INSTALLED)

        self.manager.enable_plugin(record)
        self.manager.reload_plugin(record)
        self.assertEqual(record.status, Plugin.STATUS_ENABLED)
        self.assertIsNotNone(self.manager.get_plugin('student_council'))

    def test_uninstall_removes_row_and_permissions(self):
        record = self.manager.install_plugin('student_council')
        self.manager.enable_plugin(record)
        self.manager.uninstall_plugin(record)

        self.assertFalse(Plugin.objects.filter(slug='student_council').exists())
        self.assertFalse(PluginPermission.objects.exists())
        self.assertFalse(Permission.objects.filter(module='student_council').exists())
        self.assertIsNone(self.manager.get_plugin('student_council'))

    def test_shared_manager_loads_enabled_plugins(self):
        record = PluginManager().install_plugin('student_council')
        record.status = Plugin.STATUS_ENABLED
        record.save()

        manager = get_plugin_manager()
        self.assertIsNotNone(manager.get_plugin('student_council'))
        self.assertIs(get_plugin_manager(), manager)

    def test_available_plugins_report_install_state(self):
        self.manager.install_plugin('student_council')
        available = {item['slug']: item for item in self.manager.get_available_plugins()}

        self.assertTrue(available['student_council']['installed'])
        self.assertFalse(available['needs_council']['installed'])
        self.assertNotIn('missing', available)
