# apps/notifications/services.py
"""
Broadcast service for the recruiters group.

Provides:
- One publisher per event kind (new request, status update, deletion)
- WebSocket delivery through the Django Channels layer

Delivery is best effort: a failed publish is logged and reported as False,
never raised into the HTTP request that triggered it.
"""
import logging
from django.conf import settings
from channels.layers import get_channel_layer
from asgiref.sync import async_to_sync

logger = logging.getLogger(__name__)


class BroadcastService:
    """
    Service class for pushing record events to every joined dashboard.

    Events (server -> session):
    - newInterviewRequest  / NEW_REQUEST      - full record
    - requestStatusUpdate  / STATUS_UPDATE    - full record
    - requestDeleted       / REQUEST_DELETED  - {"id": ...}
    """

    EVENT_NEW_REQUEST = 'newInterviewRequest'
    EVENT_STATUS_UPDATE = 'requestStatusUpdate'
    EVENT_REQUEST_DELETED = 'requestDeleted'

    EVENT_TYPES = {
        EVENT_NEW_REQUEST: 'NEW_REQUEST',
        EVENT_STATUS_UPDATE: 'STATUS_UPDATE',
        EVENT_REQUEST_DELETED: 'REQUEST_DELETED',
    }

    # ========== EVENT PUBLISHERS ==========

    @classmethod
    def new_request(cls, record):
        """Announce a newly created request (serialized record)."""
        return cls.broadcast(cls.EVENT_NEW_REQUEST, record)

    @classmethod
    def status_update(cls, record):
        """Announce an accepted or rejected request (serialized record)."""
        return cls.broadcast(cls.EVENT_STATUS_UPDATE, record)

    @classmethod
    def request_deleted(cls, request_id):
        """Announce a deleted request; only the id is sent."""
        return cls.broadcast(cls.EVENT_REQUEST_DELETED, {'id': request_id})

    # ========== WEBSOCKET DELIVERY ==========

    @classmethod
    def build_message(cls, event, data):
        """Client-facing payload for an event."""
        return {
            'event': event,
            'type': cls.EVENT_TYPES[event],
            'data': data,
        }

    @classmethod
    def broadcast(cls, event, data):
        """
        Send an event to the recruiters group via the channel layer.

        Returns:
            bool: True if the event was handed to the channel layer
        """
        try:
            channel_layer = get_channel_layer()

            if channel_layer is None:
                logger.warning("Channel layer not configured. Broadcast not sent.")
                return False

            async_to_sync(channel_layer.group_send)(
                cls.get_group_name(),
                {
                    'type': 'recruiters.event',
                    'message': cls.build_message(event, data),
                }
            )

            logger.debug(f"Broadcast {event} sent to group: {cls.get_group_name()}")
            return True

        except Exception as e:
            logger.error(f"Failed to broadcast {event}: {str(e)}")
            return False

    # ========== HELPER METHODS ==========

    @classmethod
    def get_group_name(cls):
        return settings.RECRUITERS_GROUP
