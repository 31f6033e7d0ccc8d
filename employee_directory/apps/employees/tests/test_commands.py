import pytest
from django.core.management import call_command
from employee_directory.apps.employees.management.commands.create_test_data import SAMPLE_EMPLOYEES
from employee_directory.apps.employees.models import Employee


@pytest.mark.django_db
def test_create_test_data_is_idempotent():
    call_command('create_test_data')
    call_command('create_test_data')

    assert Employee.objects.count() == len(SAMPLE_EMPLOYEES)
    assert Employee.objects.filter(name='John Doe', department='Sales', salary=50000).exists()
