"""
Python clients for the interview request board.

Provides:
- InterviewRequestsClient: REST client for /api/interview-requests
- SubmissionForm: candidate-side form with client-side validation
- LiveConnection: WebSocket session joined to the recruiters group
- RecruiterDashboard: local mirror of requests patched by live events
"""
from .api import ApiError, InterviewRequestsClient
from .connection import ConnectionState, LiveConnection, ReconnectPolicy
from .dashboard import RecruiterDashboard
from .submission import SubmissionForm

__all__ = [
    'ApiError',
    'ConnectionState',
    'InterviewRequestsClient',
    'LiveConnection',
    'RecruiterDashboard',
    'ReconnectPolicy',
    'SubmissionForm',
]
