from django.urls import path, re_path

from .views import EmployeeViewSet

employee_list = EmployeeViewSet.as_view({'get': 'list', 'post': 'create'})
employee_detail = EmployeeViewSet.as_view({'get': 'retrieve', 'put': 'update', 'delete': 'destroy'})
employee_by_department = EmployeeViewSet.as_view({'get': 'by_department'})

urlpatterns = [
    # The collection answers with and without a trailing slash
    re_path(r'^employees/?$', employee_list, name='employee-list'),
    path('employees/<int:employee_id>', employee_detail, name='employee-detail'),
    path('employees/departmentName/<str:department>', employee_by_department, name='employee-by-department'),
]
