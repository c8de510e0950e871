from django.db import models


class PluginQuerySet(models.QuerySet):
    def enabled(self):
        return self.filter(status=Plugin.STATUS_ENABLED)


class Plugin(models.Model):
    """Registry row for an installed plugin"""
    STATUS_INSTALLED = 'installed'
    STATUS_ENABLED = 'enabled'
    STATUS_DISABLED = 'disabled'
    STATUS_CHOICES = [
        (STATUS_INSTALLED, 'Installed'),
        (STATUS_ENABLED, 'Enabled'),
        (STATUS_DISABLED, 'Disabled'),
    ]

    name = models.CharField(max_length=100, unique=True)
    slug = models.SlugField(max_length=100, unique=True)
    version = models.CharField(max_length=20, blank=True)
    description = models.TextField(blank=True)
    author = models.CharField(max_length=100, blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_INSTALLED)
    dependencies = models.JSONField(default=list, blank=True, help_text="Slugs of plugins that must be enabled")
    config = models.JSONField(default=dict, blank=True)
    installed_at = models.DateTimeField(null=True, blank=True)
    enabled_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = PluginQuerySet.as_manager()

    class Meta:
        db_table = 'plugins'
        ordering = ['name']
        verbose_name = 'Plugin'
        verbose_name_plural = 'Plugins'

    def __str__(self):
        return f"{self.name} {self.version}".strip()

    @property
    def is_enabled(self):
        return self.status == self.STATUS_ENABLED


class PluginPermission(models.Model):
    """Permission contributed by a plugin; removed with it"""
    plugin = models.ForeignKey(Plugin, on_delete=models.CASCADE, related_name='permissions')
    permission = models.ForeignKey(
        'users.Permission', on_delete=models.CASCADE, null=True, blank=True,
        related_name='plugin_permissions'
    )
    name = models.CharField(max_length=100)
    slug = models.CharField(max_length=100, unique=True)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'plugin_permissions'
        indexes = [
            models.Index(fields=['plugin', 'slug']),
        ]

    def __str__(self):
        return self.slug
