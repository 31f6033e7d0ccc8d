"""
Common app configuration
"""
from django.apps import AppConfig


class CommonConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'employee_directory.apps.common'
    verbose_name = 'Common'
