from .base import *

# Use file-based SQLite for local development
DEBUG = True

ALLOWED_HOSTS = ["*"]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }
}

# Verbose logging to console and file
LOGGING['handlers']['file'] = {
    'class': 'logging.FileHandler',
    'filename': BASE_DIR / 'django.log',
    'formatter': 'verbose',
}
for _name in ('django', 'django.server', 'employee_directory'):
    LOGGING['loggers'][_name]['handlers'] = ['console', 'file']
    LOGGING['loggers'][_name]['level'] = 'DEBUG'
LOGGING['root']['handlers'] = ['console', 'file']
