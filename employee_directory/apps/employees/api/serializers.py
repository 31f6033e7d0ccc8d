from rest_framework import serializers

from employee_directory.apps.employees.domain.records import EmployeeRecord

# Range of the 64-bit employee_salary column
SALARY_MIN = -2 ** 63
SALARY_MAX = 2 ** 63 - 1


class EmployeeSerializer(serializers.Serializer):
    """
    Request/response shape of an employee.

    Validates input before it reaches the service: name and department must be
    non-blank, salary must be an integer. ``id`` is accepted but never trusted.
    """
    id = serializers.IntegerField(required=False, allow_null=True)
    name = serializers.CharField(max_length=255)
    salary = serializers.IntegerField(min_value=SALARY_MIN, max_value=SALARY_MAX)
    department = serializers.CharField(max_length=255)

    def to_record(self) -> EmployeeRecord:
        data = self.validated_data
        return EmployeeRecord(
            id=data.get('id'),
            name=data['name'],
            salary=data['salary'],
            department=data['department'],
        )
