from .base import *

DEBUG = False

ALLOWED_HOSTS = ["testserver", "localhost"]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

# Let records reach the root logger so pytest's caplog can see them
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'loggers': {
        'employee_directory': {
            'level': 'DEBUG',
            'propagate': True,
        },
        'django.server': {
            'level': 'INFO',
            'propagate': True,
        },
    },
}
