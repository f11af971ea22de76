"""
Test Django settings for RTE_Project
"""

from .base import *

ENVIRONMENT = 'test'
DEBUG = True

SECRET_KEY = 'test-key-for-development-only-not-secure'
ALLOWED_HOSTS = ['testserver', 'localhost', '127.0.0.1']

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'scorm-rte-test',
    }
}

SCORM_PLAYER_TIMEOUT = 600
SCORM_STUDENT_ID = 'student_001'
SCORM_STUDENT_NAME = 'John Doe'

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {
            'level': 'WARNING',
            'class': 'logging.StreamHandler',
        },
    },
    'loggers': {
        'scorm': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
    },
}
