"""
URL routing for SCORM app
"""
from django.urls import path
from . import views

app_name = 'scorm'

urlpatterns = [
    # One player per learning-content attempt
    path('players/', views.create_player, name='create_player'),

    # Display panels (read-only)
    path('players/<uuid:player_id>/progress/', views.player_progress, name='player_progress'),
    path('players/<uuid:player_id>/events/', views.player_events, name='player_events'),
    path('players/<uuid:player_id>/data/', views.player_data, name='player_data'),

    # RTE API bridge, reachable as API and API_1484_11
    path('players/<uuid:player_id>/<str:api_name>/', views.rte_call, name='rte_call'),
]
