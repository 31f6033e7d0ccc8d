import json

import pytest
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import MethodNotAllowed, ValidationError
from rest_framework.test import APIRequestFactory
from employee_directory.apps.common.exceptions import (
    ResourceNotFound,
    api_exception_handler,
    page_not_found,
    server_error,
)


class WidgetNotFound(ResourceNotFound):
    error_code = 'WIDGET_NOT_FOUND'


@pytest.fixture
def context():
    return {'request': APIRequestFactory().get('/api/v1/widgets/5')}


@pytest.mark.django_db
class TestApiExceptionHandler:
    def test_resource_not_found(self, context):
        response = api_exception_handler(WidgetNotFound("No widget 5"), context)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['message'] == 'No widget 5'
        assert response.data['errorCode'] == 'WIDGET_NOT_FOUND'
        assert response.data['path'] == '/api/v1/widgets/5'
        assert set(response.data) == {'timestamp', 'message', 'path', 'errorCode'}

    def test_validation_error_is_flattened(self, context):
        exc = ValidationError({'name': ['This field is required.'], 'salary': ['A valid integer is required.']})

        response = api_exception_handler(exc, context)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['errorCode'] == 'VALIDATION_ERROR'
        assert response.data['message'] == (
            'name: This field is required.; salary: A valid integer is required.'
        )

    def test_drf_error_keeps_status(self, context):
        response = api_exception_handler(MethodNotAllowed('PATCH'), context)

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        assert response.data['errorCode'] == 'METHOD_NOT_ALLOWED'
        assert response.data['message'] == 'Method "PATCH" not allowed.'

    def test_unexpected_error(self, context, caplog):
        response = api_exception_handler(ValueError('boom'), context)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data['errorCode'] == 'INTERNAL_SERVER_ERROR'
        assert response.data['message'] == 'boom'
        assert 'Unhandled error while processing GET /api/v1/widgets/5' in caplog.text

    def test_unexpected_error_without_message(self, context):
        response = api_exception_handler(KeyError(), context)

        assert response.data['message'] == 'KeyError'


class TestErrorPages:
    def setup_method(self):
        self.factory = APIRequestFactory()

    def test_unmatched_api_path(self):
        request = self.factory.get('/api/v1/employees/abc')

        response = page_not_found(request, Http404())

        assert response.status_code == status.HTTP_404_NOT_FOUND
        body = json.loads(response.content)
        assert body['errorCode'] == 'NOT_FOUND'
        assert body['path'] == '/api/v1/employees/abc'
        assert body['timestamp']

    def test_unmatched_other_path_keeps_default_page(self):
        request = self.factory.get('/nowhere')

        response = page_not_found(request, Http404())

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response['Content-Type'].startswith('text/html')

    def test_server_error_on_api_path(self):
        request = self.factory.post('/api/v1/employees')

        response = server_error(request)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        body = json.loads(response.content)
        assert body['errorCode'] == 'INTERNAL_SERVER_ERROR'
        assert body['message'] == 'Internal Server Error'
        assert body['path'] == '/api/v1/employees'
