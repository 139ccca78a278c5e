# clients/dashboard.py
"""
Recruiter dashboard state.

Keeps a local mirror of interview requests, fed by REST fetches and by
broadcast events from a LiveConnection.
"""
import logging

from .api import ApiError
from .connection import ConnectionState

logger = logging.getLogger(__name__)

FILTERS = ('all', 'pending', 'accepted')

EVENT_NEW_REQUEST = 'newInterviewRequest'
EVENT_STATUS_UPDATE = 'requestStatusUpdate'
EVENT_REQUEST_DELETED = 'requestDeleted'


class RecruiterDashboard:
    """
    Mirror of the request board for one recruiter.

    Attributes:
        records: list of request dicts, newest first
        loading: True while refresh() is fetching
        error: message of the last failed fetch or action, else None
        connection_state: last state reported by the live connection
    """

    def __init__(self, client, connection=None):
        self.client = client
        self.records = []
        self.loading = False
        self.error = None
        self._filter = 'all'
        self.connection_state = ConnectionState.DISCONNECTED
        self.connection = connection
        if connection is not None:
            connection.on_state_change = self._on_connection_state
            self.connection_state = connection.state

    def _on_connection_state(self, state):
        self.connection_state = state

    # ========== FILTERING ==========

    @property
    def filter(self):
        return self._filter

    @filter.setter
    def filter(self, value):
        if value not in FILTERS:
            raise ValueError(f"Filter must be one of: {', '.join(FILTERS)}")
        self._filter = value

    @property
    def visible(self):
        if self._filter == 'all':
            return list(self.records)
        return [r for r in self.records if r.get('status') == self._filter]

    def counts(self):
        counts = {'total': len(self.records), 'pending': 0, 'accepted': 0, 'rejected': 0}
        for record in self.records:
            status = record.get('status')
            if status in counts:
                counts[status] += 1
        return counts

    # ========== FETCHING ==========

    def refresh(self):
        """Replace the mirror with the server's full list."""
        self.loading = True
        try:
            self.records = list(self.client.list())
            self.error = None
        except ApiError as e:
            self.error = e.message
            logger.error(f"Dashboard refresh failed: {e}")
            raise
        finally:
            self.loading = False
        return self.records

    # ========== LIVE EVENTS ==========

    def apply_event(self, message):
        """Fold one broadcast message into the mirror."""
        event = message.get('event')
        data = message.get('data') or {}

        if event == EVENT_NEW_REQUEST:
            if self._index_of(data.get('id')) is None:
                self.records.insert(0, data)
        elif event == EVENT_STATUS_UPDATE:
            self._replace(data)
        elif event == EVENT_REQUEST_DELETED:
            self._remove(data.get('id'))
        else:
            logger.debug(f"Ignoring unknown event: {event}")

    def _index_of(self, request_id):
        for index, record in enumerate(self.records):
            if record.get('id') == request_id:
                return index
        return None

    def _replace(self, record):
        index = self._index_of(record.get('id'))
        if index is not None:
            self.records[index] = record

    def _remove(self, request_id):
        self.records = [r for r in self.records if r.get('id') != request_id]

    # ========== ACTIONS ==========

    def accept(self, request_id):
        """Accept on the server; the mirror changes only if the call succeeds."""
        record = self._act(self.client.accept, request_id)
        self._replace(record)
        return record

    def reject(self, request_id, reason=None):
        record = self._act(self.client.reject, request_id, reason)
        self._replace(record)
        return record

    def delete(self, request_id):
        self._act(self.client.delete, request_id)
        self._remove(request_id)

    def _act(self, call, *args):
        try:
            result = call(*args)
        except ApiError as e:
            self.error = e.message
            logger.warning(f"Dashboard action failed: {e}")
            raise
        self.error = None
        return result
