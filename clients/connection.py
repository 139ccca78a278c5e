# clients/connection.py
"""
Live connection to the recruiters broadcast.

Provides:
- ConnectionState: connecting / connected / disconnected
- ReconnectPolicy: exponential backoff between reconnect attempts
- LiveConnection: websocket session that joins the recruiters group after
  every (re)connect and hands decoded events to a callback
"""
import asyncio
import enum
import json
import logging

import websockets
from websockets.exceptions import ConnectionClosed, InvalidURI, WebSocketException

logger = logging.getLogger(__name__)

DEFAULT_WS_URL = 'ws://localhost:8000/ws/recruiters/'
JOIN_MESSAGE = {'type': 'join-recruiter'}


class ConnectionState(str, enum.Enum):
    CONNECTING = 'connecting'
    CONNECTED = 'connected'
    DISCONNECTED = 'disconnected'


class ReconnectPolicy:
    """
    Backoff schedule for reconnects.

    Attempt n (1-based) waits delay * factor ** (n - 1) seconds, capped at
    max_delay. After max_attempts consecutive failures the connection gives up.
    A successful connect resets the count.
    """

    def __init__(self, delay=1.0, max_attempts=5, factor=2.0, max_delay=30.0, timeout=20.0):
        self.delay = delay
        self.max_attempts = max_attempts
        self.factor = factor
        self.max_delay = max_delay
        self.timeout = timeout

    def delay_for(self, attempt):
        return min(self.delay * (self.factor ** (attempt - 1)), self.max_delay)

    def delays(self):
        return [self.delay_for(attempt) for attempt in range(1, self.max_attempts + 1)]


class LiveConnection:
    """
    One websocket session to /ws/recruiters/.

    Usage:
        connection = LiveConnection('ws://localhost:8000/ws/recruiters/')
        await connection.run(dashboard.apply_event)

    Args:
        url: websocket endpoint
        policy: ReconnectPolicy (defaults: 1s delay, 5 attempts, 20s timeout)
        connect: coroutine function returning an open socket; websockets.connect by default
        on_state_change: called with the new ConnectionState on every transition
    """

    def __init__(self, url=DEFAULT_WS_URL, policy=None, connect=None, on_state_change=None):
        self.url = url
        self.policy = policy or ReconnectPolicy()
        self._connect = connect or websockets.connect
        self.on_state_change = on_state_change
        self.state = ConnectionState.DISCONNECTED
        self._socket = None
        self._stopped = False

    def _set_state(self, state):
        if state == self.state:
            return
        self.state = state
        logger.info(f"Live connection {state.value}: {self.url}")
        if self.on_state_change:
            self.on_state_change(state)

    @property
    def is_connected(self):
        return self.state == ConnectionState.CONNECTED

    async def run(self, on_event):
        """
        Connect, join and deliver events until stop() or reconnects run out.

        Returns:
            bool: False when the connection gave up after max_attempts failures
        """
        self._stopped = False
        failures = 0

        try:
            while not self._stopped:
                self._set_state(ConnectionState.CONNECTING)
                try:
                    self._socket = await asyncio.wait_for(self._connect(self.url), self.policy.timeout)
                except InvalidURI:
                    raise
                except (OSError, asyncio.TimeoutError, WebSocketException) as e:
                    # Refused handshakes (e.g. a 502 from a proxy) are retried like network errors
                    logger.warning(f"Connect to {self.url} failed: {e!r}")
                else:
                    failures = 0
                    await self._session(on_event)

                self._socket = None
                self._set_state(ConnectionState.DISCONNECTED)
                if self._stopped:
                    break

                failures += 1
                if failures > self.policy.max_attempts:
                    logger.error(f"Giving up on {self.url} after {self.policy.max_attempts} attempts")
                    return False

                await asyncio.sleep(self.policy.delay_for(failures))
        finally:
            self._socket = None
            self._set_state(ConnectionState.DISCONNECTED)

        return True

    async def _session(self, on_event):
        self._set_state(ConnectionState.CONNECTED)
        try:
            await self._socket.send(json.dumps(JOIN_MESSAGE))
            async for raw in self._socket:
                message = self.decode(raw)
                if message is None or 'event' not in message:
                    continue
                result = on_event(message)
                if asyncio.iscoroutine(result):
                    await result
        except ConnectionClosed as e:
            logger.info(f"Live connection closed: {e}")

    @staticmethod
    def decode(raw):
        """Parse one frame; returns None for anything that is not a JSON object."""
        try:
            message = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning("Ignoring undecodable frame")
            return None
        return message if isinstance(message, dict) else None

    async def stop(self):
        """Close the socket and stop reconnecting."""
        self._stopped = True
        if self._socket is not None:
            await self._socket.close()
