# clients/api.py
"""
REST client for the interview request board.

Wraps the JSON envelope: successful calls return the envelope's data,
anything else raises ApiError with the server's error title and message.
"""
import logging

import requests

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = 'http://localhost:8000'
DEFAULT_TIMEOUT = 10


class ApiError(Exception):
    """Non-success response (or transport failure) from the API."""

    def __init__(self, message, status_code=None, error=None, details=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error = error
        self.details = details or []

    def __str__(self):
        if self.status_code:
            return f"{self.status_code} {self.error or 'Error'}: {self.message}"
        return self.message


class InterviewRequestsClient:
    """
    Client for /api/interview-requests.

    Usage:
        client = InterviewRequestsClient('http://localhost:8000')
        record = client.create('Jo Lee', 'jo@ex.com', 'Backend Developer')
        client.accept(record['id'])
    """

    def __init__(self, base_url=DEFAULT_BASE_URL, session=None, timeout=DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.timeout = timeout

    def _url(self, path=''):
        return f"{self.base_url}/api/interview-requests{path}"

    def _request(self, method, url, **kwargs):
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise ApiError(f"Could not reach the server: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = {}

        if not response.ok or not body.get('success', False):
            raise ApiError(
                body.get('message') or f"Request failed with status {response.status_code}",
                status_code=response.status_code,
                error=body.get('error'),
                details=body.get('details'),
            )
        return body

    # ========== READ ==========

    def list(self, status=None):
        """All requests, newest first; status narrows to 'pending' or 'accepted'."""
        params = {'status': status} if status else None
        return self._request('GET', self._url(), params=params)['data']

    def get(self, request_id):
        return self._request('GET', self._url(f'/{request_id}'))['data']

    def stats(self):
        return self._request('GET', self._url('/stats'))['data']

    def health(self):
        try:
            response = self.session.get(f"{self.base_url}/health", timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise ApiError(f"Health check failed: {e}") from e
        return response.json()

    # ========== WRITE ==========

    def create(self, name, email, job_title):
        payload = {'name': name, 'email': email, 'jobTitle': job_title}
        return self._request('POST', self._url(), json=payload)['data']

    def accept(self, request_id):
        return self._request('PUT', self._url(f'/{request_id}/accept'))['data']

    def reject(self, request_id, reason=None):
        payload = {'reason': reason} if reason else {}
        return self._request('PUT', self._url(f'/{request_id}/reject'), json=payload)['data']

    def delete(self, request_id):
        self._request('DELETE', self._url(f'/{request_id}'))
