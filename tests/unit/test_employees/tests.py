import pytest
from employee_directory.apps.employees.application.services import EmployeeApplicationService
from employee_directory.apps.employees.domain.exceptions import EmployeeNotFound
from employee_directory.apps.employees.domain.records import EmployeeRecord
from employee_directory.apps.employees.infrastructure.repositories import EmployeeRepositoryImpl
from employee_directory.apps.employees.models import Employee
from tests.fixtures.factories import EmployeeFactory


@pytest.fixture
def service():
    return EmployeeApplicationService(EmployeeRepositoryImpl())


@pytest.mark.django_db
class TestEmployeeApplicationService:
    def test_save_and_get_employee(self, service):
        """
        A saved employee can be read back by the id the store assigned.
        """
        saved = service.save_employee(
            EmployeeRecord(name='John Doe', salary=50000, department='Sales')
        )

        assert saved.id is not None
        assert Employee.objects.filter(pk=saved.id).exists()
        assert service.get_employee(saved.id) == saved

    def test_retrieve_employees_empty(self, service):
        assert service.retrieve_employees() == []

    def test_update_employee(self, service):
        employee = EmployeeFactory(name='John Doe', salary=50000, department='Sales')

        updated = service.update_employee(
            EmployeeRecord(id=employee.id, name='John Doe', salary=60000, department='IT')
        )

        employee.refresh_from_db()
        assert updated.salary == employee.salary == 60000
        assert employee.department == 'IT'

    def test_delete_employee_twice(self, service):
        employee = EmployeeFactory()

        service.delete_employee(employee.id)

        with pytest.raises(EmployeeNotFound):
            service.delete_employee(employee.id)
        assert not Employee.objects.exists()

    def test_get_employees_by_department_ignores_case(self, service):
        sales = EmployeeFactory(department='Sales')
        EmployeeFactory(department='Marketing')

        records = service.get_employees_by_department('SALES')

        assert [record.id for record in records] == [sales.id]
