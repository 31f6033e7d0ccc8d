from django.contrib import admin
from employee_directory.apps.employees.models import Employee


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'department', 'salary']
    list_filter = ['department']
    search_fields = ['name', 'department']
    ordering = ['id']
