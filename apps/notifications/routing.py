# apps/notifications/routing.py
from django.urls import re_path

from . import consumers

websocket_urlpatterns = [
    re_path(r'^ws/recruiters/?$', consumers.RecruiterConsumer.as_asgi()),
]
