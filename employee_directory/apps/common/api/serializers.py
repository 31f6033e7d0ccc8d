from rest_framework import serializers


class ExceptionDetailsSerializer(serializers.Serializer):
    """
    Error body returned by every endpoint.
    """
    timestamp = serializers.DateTimeField(help_text='When the error occurred')
    message = serializers.CharField(help_text='Human readable description of the error')
    path = serializers.CharField(help_text='Request path that led to the error')
    errorCode = serializers.CharField(source='error_code', help_text='Machine readable error type')
