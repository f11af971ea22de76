"""
RTE Project URL Configuration

- /scorm/ : SCORM player endpoints
"""

from django.urls import path, include

urlpatterns = [
    path('scorm/', include('scorm.urls')),
]
