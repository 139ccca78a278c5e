# config/asgi.py
"""
ASGI config for the interview request board.

Configures both HTTP and WebSocket protocol handling.
WebSocket connections are open: any client may join the recruiters group.
"""
import os
from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

# Initialize Django ASGI application early to ensure app registry is ready
django_asgi_app = get_asgi_application()

# Import after Django setup
from channels.routing import ProtocolTypeRouter, URLRouter
import apps.notifications.routing


application = ProtocolTypeRouter(
    {
        "http": django_asgi_app,
        "websocket": URLRouter(apps.notifications.routing.websocket_urlpatterns),
    }
)
