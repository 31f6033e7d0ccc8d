from employee_directory.apps.common.exceptions import ResourceNotFound


class EmployeeNotFound(ResourceNotFound):
    """
    No employee matches the given field value.

    Carries no HTTP semantics; the API layer decides how to report it.
    """
    error_code = 'EMPLOYEE_NOT_FOUND'

    def __init__(self, field_name: str, field_value):
        self.field_name = field_name
        self.field_value = field_value
        super().__init__(f"Employee/s not found with {field_name} : '{field_value}'")
