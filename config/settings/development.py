# config/settings/development.py
from .base import *

DEBUG = True

LOG_LEVEL = 'DEBUG'
LOGGING['loggers']['apps.domain']['level'] = LOG_LEVEL
LOGGING['loggers']['apps.adapters']['level'] = LOG_LEVEL

# Development-specific settings
EMAIL_BACKEND = 'django.core.mail.backends.console.EmailBackend'
