"""
Employees app configuration
"""
from django.apps import AppConfig


class EmployeesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'employee_directory.apps.employees'
    label = 'employees'
    verbose_name = 'Employees'
