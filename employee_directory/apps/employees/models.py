from django.db import models


class Employee(models.Model):
    """Employee of the organization"""

    id = models.AutoField(primary_key=True)
    name = models.CharField(max_length=255, db_column='employee_name')
    salary = models.BigIntegerField(db_column='employee_salary')
    # Department lookups are case-insensitive, see EmployeeRepositoryImpl
    department = models.CharField(max_length=255)

    class Meta:
        db_table = 'employee'
        verbose_name = 'Employee'
        verbose_name_plural = 'Employees'
        indexes = [
            models.Index(fields=['department'], name='employee_department_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.department})"
