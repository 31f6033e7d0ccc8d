from dataclasses import dataclass
from typing import Optional

from employee_directory.apps.employees.models import Employee


@dataclass(frozen=True)
class EmployeeRecord:
    """
    Transfer representation of an employee used at the service boundary.
    """
    name: str
    salary: int
    department: str
    id: Optional[int] = None


def to_record(employee: Employee) -> EmployeeRecord:
    return EmployeeRecord(
        id=employee.id,
        name=employee.name,
        salary=employee.salary,
        department=employee.department,
    )


def to_entity(record: EmployeeRecord) -> Employee:
    """Build an unsaved Employee; the id is always left to the database."""
    return Employee(
        name=record.name,
        salary=record.salary,
        department=record.department,
    )
