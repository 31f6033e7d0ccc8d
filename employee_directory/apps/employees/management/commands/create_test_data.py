from django.core.management.base import BaseCommand
from employee_directory.apps.employees.models import Employee

SAMPLE_EMPLOYEES = [
    {'name': 'John Doe', 'salary': 50000, 'department': 'Sales'},
    {'name': 'Jane Smith', 'salary': 65000, 'department': 'Marketing'},
    {'name': 'Bob Johnson', 'salary': 72000, 'department': 'IT'},
    {'name': 'Alice Brown', 'salary': 58000, 'department': 'IT'},
]


class Command(BaseCommand):
    help = 'Creates sample employees for local development'

    def handle(self, *args, **options):
        self.stdout.write('Creating test data...')

        created_count = 0
        for data in SAMPLE_EMPLOYEES:
            _, created = Employee.objects.get_or_create(**data)
            created_count += int(created)

        self.stdout.write(self.style.SUCCESS(f'Test data created successfully ({created_count} new employees).'))
