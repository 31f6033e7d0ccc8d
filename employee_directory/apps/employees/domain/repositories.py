from abc import ABC, abstractmethod
from typing import List, Optional
from employee_directory.apps.employees.models import Employee

class EmployeeRepository(ABC):
    """
    Abstract store of employees.
    Defines the contract concrete implementations must follow.
    """
    @abstractmethod
    def find_all(self) -> List[Employee]:
        pass

    @abstractmethod
    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        pass

    @abstractmethod
    def find_by_department_ignore_case(self, department: str) -> List[Employee]:
        pass

    @abstractmethod
    def save(self, employee: Employee) -> Employee:
        pass

    @abstractmethod
    def delete_by_id(self, employee_id: int):
        pass
