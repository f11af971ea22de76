"""
Base Django settings for RTE_Project.
Contains all common settings shared across environments.
"""

import os
from pathlib import Path
from django.core.management.utils import get_random_secret_key

from core.env_loader import get_env, get_bool_env, get_int_env, get_list_env

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent.parent

ENVIRONMENT = get_env('DJANGO_ENV', 'development')
DEBUG = get_bool_env('DJANGO_DEBUG', False)

# ==============================================
# LOGGING CONFIGURATION
# ==============================================

LOG_DIR = get_env('LOGS_DIR', os.path.join(BASE_DIR, 'logs'))
os.makedirs(LOG_DIR, exist_ok=True)

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {asctime} {name} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'file': {
            'level': 'INFO',
            'class': 'logging.handlers.RotatingFileHandler',
            'filename': os.path.join(LOG_DIR, 'rte.log'),
            'maxBytes': 10 * 1024 * 1024,  # 10MB
            'backupCount': 3,
            'formatter': 'verbose',
        },
        'console': {
            'level': 'ERROR',
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'django': {
            'handlers': ['file', 'console'],
            'level': 'WARNING',
            'propagate': False,
        },
        'scorm': {
            'handlers': ['file', 'console'],
            'level': get_env('SCORM_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
        'core': {
            'handlers': ['file', 'console'],
            'level': 'INFO',
            'propagate': False,
        },
    },
    'root': {
        'handlers': ['file', 'console'],
        'level': 'INFO',
    },
}

# ==============================================
# CORE DJANGO SETTINGS
# ==============================================

SECRET_KEY = get_env('DJANGO_SECRET_KEY')
if not SECRET_KEY:
    SECRET_KEY = get_random_secret_key()

ALLOWED_HOSTS = get_list_env('ALLOWED_HOSTS', default=['localhost', '127.0.0.1'])

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

INSTALLED_APPS = [
    'django.contrib.staticfiles',

    'scorm',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'RTE_Project.urls'
WSGI_APPLICATION = 'RTE_Project.wsgi.application'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
            ],
        },
    },
]

# The RTE keeps no database state
DATABASES = {}

# ==============================================
# CACHE CONFIGURATION
# ==============================================

# Player handles live in the cache; use Redis when several workers serve requests
REDIS_URL = get_env('REDIS_URL')

if REDIS_URL:
    CACHES = {
        'default': {
            'BACKEND': 'django.core.cache.backends.redis.RedisCache',
            'LOCATION': REDIS_URL,
            'KEY_PREFIX': get_env('CACHE_KEY_PREFIX', f'rte_{ENVIRONMENT}_'),
            'TIMEOUT': 300,
        }
    }
else:
    CACHES = {
        'default': {
            'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
            'LOCATION': 'scorm-rte',
            'TIMEOUT': 300,
        }
    }

# ==============================================
# SCORM RTE SETTINGS
# ==============================================

# Seconds an idle player handle is kept
SCORM_PLAYER_TIMEOUT = get_int_env('SCORM_PLAYER_TIMEOUT', 3600)

# LMS-side learner identity reported through cmi.core.student_id / student_name
SCORM_STUDENT_ID = get_env('SCORM_STUDENT_ID', 'student_001')
SCORM_STUDENT_NAME = get_env('SCORM_STUDENT_NAME', 'John Doe')

# ==============================================
# INTERNATIONALIZATION
# ==============================================

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = '/static/'
STATIC_ROOT = get_env('STATIC_ROOT', str(BASE_DIR / 'staticfiles'))
