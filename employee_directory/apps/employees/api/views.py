import logging
from dataclasses import replace

from django.urls import reverse
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema, OpenApiResponse
from rest_framework import viewsets, status
from rest_framework.response import Response

from employee_directory.apps.common.api.serializers import ExceptionDetailsSerializer
from employee_directory.apps.employees.application.services import EmployeeApplicationService
from employee_directory.apps.employees.infrastructure.repositories import EmployeeRepositoryImpl
from .serializers import EmployeeSerializer

logger = logging.getLogger(__name__)

DELETED_MESSAGE = "Employee successfully deleted!"

NOT_FOUND_RESPONSE = OpenApiResponse(
    ExceptionDetailsSerializer, description="Employee not found with given Employee Id"
)


class EmployeeViewSet(viewsets.ViewSet):
    """
    ViewSet for retrieving, creating, updating and deleting employees.
    Each action delegates to exactly one EmployeeApplicationService call;
    domain errors are turned into responses by the project exception handler.
    """
    serializer_class = EmployeeSerializer

    def get_service(self) -> EmployeeApplicationService:
        return EmployeeApplicationService(EmployeeRepositoryImpl())

    @extend_schema(
        summary="Get details of all employees in the organization",
        responses={
            200: OpenApiResponse(EmployeeSerializer(many=True), description="All employee details fetched successfully"),
            500: OpenApiResponse(ExceptionDetailsSerializer, description="Something went wrong while fetching all employees"),
        },
    )
    def list(self, request):
        logger.info("Request to fetch all employees in the organization")
        records = self.get_service().retrieve_employees()
        return Response(EmployeeSerializer(records, many=True).data)

    @extend_schema(
        summary="Get details of a particular employee based on employee id input",
        responses={
            200: OpenApiResponse(EmployeeSerializer, description="Employee details fetched successfully"),
            404: NOT_FOUND_RESPONSE,
            500: OpenApiResponse(ExceptionDetailsSerializer, description="Error occurred while fetching employee details by employee id"),
        },
    )
    def retrieve(self, request, employee_id=None):
        logger.info("Request to fetch employee details for employee id: %s", employee_id)
        record = self.get_service().get_employee(employee_id)
        return Response(EmployeeSerializer(record).data)

    @extend_schema(
        summary="Add a new employee and save details",
        request=EmployeeSerializer,
        responses={
            201: OpenApiResponse(description="New employee details saved successfully, see the Location header"),
            500: OpenApiResponse(ExceptionDetailsSerializer, description="Error occurred while creating and saving new employee details"),
        },
    )
    def create(self, request):
        logger.info("Request to create and save new employee")
        serializer = EmployeeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        record = self.get_service().save_employee(serializer.to_record())

        location = request.build_absolute_uri(
            reverse('employee-detail', kwargs={'employee_id': record.id})
        )
        return Response(status=status.HTTP_201_CREATED, headers={'Location': location})

    @extend_schema(
        summary="Update details of an existing employee based on employee id input",
        request=EmployeeSerializer,
        responses={
            200: OpenApiResponse(EmployeeSerializer, description="Employee details updated successfully"),
            404: NOT_FOUND_RESPONSE,
            500: OpenApiResponse(ExceptionDetailsSerializer, description="Error occurred while updating employee details by employee id"),
        },
    )
    def update(self, request, employee_id=None):
        logger.info("Request to update employee with employee id: %s", employee_id)
        serializer = EmployeeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        # The id in the path wins over any id in the body
        record = replace(serializer.to_record(), id=employee_id)
        updated = self.get_service().update_employee(record)
        return Response(EmployeeSerializer(updated).data)

    @extend_schema(
        summary="Delete details of a particular employee based on employee id input",
        responses={
            200: OpenApiResponse(OpenApiTypes.STR, description="Employee details deleted successfully"),
            404: NOT_FOUND_RESPONSE,
            500: OpenApiResponse(ExceptionDetailsSerializer, description="Error occurred while deleting employee details by employee id"),
        },
    )
    def destroy(self, request, employee_id=None):
        logger.info("Request to delete employee with employee id: %s", employee_id)
        self.get_service().delete_employee(employee_id)
        return Response(DELETED_MESSAGE)

    @extend_schema(
        summary="Get details of all employees tagged to a particular department based on department name input",
        responses={
            200: OpenApiResponse(EmployeeSerializer(many=True), description="All employees tagged to input department fetched successfully"),
            404: OpenApiResponse(ExceptionDetailsSerializer, description="No employee found for given department or department name invalid"),
            500: OpenApiResponse(ExceptionDetailsSerializer, description="Error occurred while fetching employee details by department name"),
        },
    )
    def by_department(self, request, department=None):
        logger.info("Request to fetch all employees belonging to department: %s", department)
        records = self.get_service().get_employees_by_department(department)
        return Response(EmployeeSerializer(records, many=True).data)
