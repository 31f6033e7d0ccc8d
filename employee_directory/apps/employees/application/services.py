"""
Service layer for the employee directory
"""
import logging
from typing import List

from django.db import transaction

from employee_directory.apps.employees.domain.exceptions import EmployeeNotFound
from employee_directory.apps.employees.domain.records import EmployeeRecord, to_entity, to_record
from employee_directory.apps.employees.domain.repositories import EmployeeRepository
from employee_directory.apps.employees.models import Employee

logger = logging.getLogger(__name__)


class EmployeeApplicationService:
    """
    Business logic for employees: existence checks, the update policy and
    mapping between Employee entities and EmployeeRecord values.
    """
    def __init__(self, employee_repository: EmployeeRepository):
        self.employee_repository = employee_repository

    def retrieve_employees(self) -> List[EmployeeRecord]:
        """
        All employees in store order.

        Returns:
            List[EmployeeRecord]: empty when the store is empty
        """
        logger.info("Fetching details of all employees")
        employees = self.employee_repository.find_all()
        logger.info("All employee details fetched (%d)", len(employees))
        return [to_record(employee) for employee in employees]

    def get_employee(self, employee_id: int) -> EmployeeRecord:
        """
        Details of a single employee.

        Raises:
            EmployeeNotFound: no employee with this id
        """
        logger.info("Fetching details of employee %s", employee_id)
        employee = self._get_existing(employee_id)
        logger.info("Employee details fetched for employee id: %s", employee_id)
        return to_record(employee)

    def save_employee(self, record: EmployeeRecord) -> EmployeeRecord:
        """
        Persist a new employee. Any id carried by ``record`` is ignored.

        Returns:
            EmployeeRecord: the saved employee with its assigned id
        """
        logger.info("Saving details of new employee")
        saved = self.employee_repository.save(to_entity(record))
        logger.info("New employee saved with id: %s", saved.id)
        return to_record(saved)

    @transaction.atomic
    def update_employee(self, record: EmployeeRecord) -> EmployeeRecord:
        """
        Overwrite name, salary and department of the employee ``record.id``.

        All three fields are replaced with the supplied values, there is no
        merge with the stored ones. The stored id is kept.

        Raises:
            EmployeeNotFound: no employee with ``record.id``
        """
        logger.info("Fetching details of employee %s to update", record.id)
        employee = self._get_existing(record.id)

        employee.name = record.name
        employee.salary = record.salary
        employee.department = record.department

        updated = self.employee_repository.save(employee)
        logger.info("Employee details updated for employee id: %s", updated.id)
        return to_record(updated)

    @transaction.atomic
    def delete_employee(self, employee_id: int) -> None:
        """
        Raises:
            EmployeeNotFound: no employee with this id
        """
        logger.info("Fetching details of employee %s to delete", employee_id)
        self._get_existing(employee_id)
        self.employee_repository.delete_by_id(employee_id)
        logger.info("Employee %s deleted", employee_id)

    def get_employees_by_department(self, department: str) -> List[EmployeeRecord]:
        """
        Employees whose department matches ``department`` ignoring case.

        Raises:
            EmployeeNotFound: nobody works in this department
        """
        logger.info("Fetching details of all employees of department: %s", department)
        employees = self.employee_repository.find_by_department_ignore_case(department)
        if not employees:
            raise EmployeeNotFound("department name", department)

        logger.info("%d employees fetched for department: %s", len(employees), department)
        return [to_record(employee) for employee in employees]

    def _get_existing(self, employee_id: int) -> Employee:
        employee = self.employee_repository.find_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFound("id", employee_id)
        return employee
