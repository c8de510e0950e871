from django.apps import AppConfig


class ParentsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.parents'
    verbose_name = 'Parents'
