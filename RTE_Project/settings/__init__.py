"""
Django settings for RTE_Project
Loads settings based on the DJANGO_ENV environment variable
"""

import os

DJANGO_ENV = os.environ.get('DJANGO_ENV', 'development').lower()

if DJANGO_ENV == 'test':
    from .test import *
else:
    from .base import *
