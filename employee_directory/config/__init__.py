"""
Django project configuration for the employee directory service.

Settings are split per environment under ``config.settings``; the
``DJANGO_SETTINGS_MODULE`` environment variable selects one of them.
"""
