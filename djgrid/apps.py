from django.apps import AppConfig


class GridviewAppConfig(AppConfig):
    name = 'djgrid'
    label = 'djgrid'
    verbose_name = 'Grid Views'
