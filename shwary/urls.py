"""
URL configuration for shwary app.
"""

from django.urls import path
from . import views

urlpatterns = [
    path('webhook/', views.webhook_callback, name='shwary_webhook'),
]
