from employee_directory.apps.employees.domain.records import EmployeeRecord, to_entity, to_record
from employee_directory.apps.employees.models import Employee


class TestEmployeeRecordMapping:
    def test_to_record_copies_every_field(self):
        employee = Employee(id=4, name='Jane Smith', salary=65000, department='Marketing')

        assert to_record(employee) == EmployeeRecord(
            id=4, name='Jane Smith', salary=65000, department='Marketing'
        )

    def test_to_entity_leaves_id_unset(self):
        employee = to_entity(EmployeeRecord(id=9, name='Jane Smith', salary=65000, department='Marketing'))

        assert employee.id is None
        assert (employee.name, employee.salary, employee.department) == ('Jane Smith', 65000, 'Marketing')
