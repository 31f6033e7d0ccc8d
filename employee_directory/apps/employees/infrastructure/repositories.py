from typing import List, Optional
from employee_directory.apps.employees.models import Employee
from employee_directory.apps.employees.domain.repositories import EmployeeRepository

class EmployeeRepositoryImpl(EmployeeRepository):
    """
    Employee repository backed by the Django ORM.
    """
    def find_all(self) -> List[Employee]:
        return list(Employee.objects.all())

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        try:
            return Employee.objects.get(pk=employee_id)
        except Employee.DoesNotExist:
            return None

    def find_by_department_ignore_case(self, department: str) -> List[Employee]:
        return list(Employee.objects.filter(department__iexact=department))

    def save(self, employee: Employee) -> Employee:
        employee.save()
        return employee

    def delete_by_id(self, employee_id: int):
        Employee.objects.filter(pk=employee_id).delete()
