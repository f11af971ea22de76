"""
WSGI config for RTE_Project
"""

import os
import logging
from django.core.wsgi import get_wsgi_application

logger = logging.getLogger(__name__)

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'RTE_Project.settings')

try:
    application = get_wsgi_application()
    logger.info("WSGI application initialized successfully")
except Exception as e:
    logger.error(f"WSGI application initialization failed: {e}")
    raise
