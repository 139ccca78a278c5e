# apps/notifications/consumers.py
"""
WebSocket consumer for the recruiter dashboard's live updates.

Provides:
- RecruiterConsumer: accepts a session, joins it to the recruiters group on request
- Delivery of record events from the channel layer to joined sessions
"""
import json
import logging
from channels.generic.websocket import AsyncWebsocketConsumer

from .services import BroadcastService

logger = logging.getLogger(__name__)


class RecruiterConsumer(AsyncWebsocketConsumer):
    """
    WebSocket consumer for recruiter dashboards.

    Connection URL: ws://host/ws/recruiters/

    Lifecycle:
        connect -> join-recruiter -> receive events until disconnect

    A session receives nothing until it asks to join. No replay: events
    published while a session is away are simply missed.

    Client Messages:
    - {"type": "join-recruiter"} - Join the recruiters group, returns {"type": "joined", "group": ...}
    - {"type": "ping"} - Health check, returns {"type": "pong"}

    Server Messages:
    - {"event": "newInterviewRequest", "type": "NEW_REQUEST", "data": {...}}
    - {"event": "requestStatusUpdate", "type": "STATUS_UPDATE", "data": {...}}
    - {"event": "requestDeleted", "type": "REQUEST_DELETED", "data": {"id": ...}}
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.group_name = None

    async def connect(self):
        """Accept every connection; group membership is opt-in."""
        await self.accept()
        logger.info(f"WebSocket connected: {self.channel_name}")

    async def disconnect(self, close_code):
        """Remove the session from the recruiters group if it joined."""
        if self.group_name:
            await self.channel_layer.group_discard(
                self.group_name,
                self.channel_name
            )
        logger.info(f"WebSocket disconnected: {self.channel_name} (code: {close_code})")

    async def receive(self, text_data=None, bytes_data=None):
        """
        Handle incoming WebSocket messages from client.

        Supported message types:
        - join-recruiter: Join the recruiters group
        - ping: Health check
        """
        try:
            data = json.loads(text_data or '')
        except json.JSONDecodeError:
            logger.warning("Invalid JSON received on WebSocket")
            return

        message_type = data.get('type') if isinstance(data, dict) else None

        if message_type == 'join-recruiter':
            await self._join_recruiters()

        elif message_type == 'ping':
            await self.send(json.dumps({'type': 'pong'}))

        else:
            logger.warning(f"Unknown WebSocket message type: {message_type}")

    async def recruiters_event(self, event):
        """
        Handle recruiters.event messages from the channel layer.

        Forwards the prepared payload to the WebSocket client.
        """
        await self.send(json.dumps(event['message']))

    async def _join_recruiters(self):
        group_name = BroadcastService.get_group_name()
        if self.group_name != group_name:
            await self.channel_layer.group_add(group_name, self.channel_name)
            self.group_name = group_name
            logger.info(f"Recruiter joined room: {self.channel_name} -> {group_name}")

        await self.send(json.dumps({'type': 'joined', 'group': group_name}))
