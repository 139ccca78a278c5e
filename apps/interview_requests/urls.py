# apps/interview_requests/urls.py
"""
URL configuration for the interview requests app.

Mounted at /api/interview-requests; the trailing slash is optional on every route.

Endpoints:
- /                - list (GET), create (POST)
- /stats           - aggregate counts (GET)
- /{id}            - detail (GET), delete (DELETE)
- /{id}/accept     - accept (PUT)
- /{id}/reject     - reject (PUT)
"""
from django.urls import re_path
from . import api

app_name = 'interview_requests'

urlpatterns = [
    re_path(r'^/?$', api.InterviewRequestListCreateAPI.as_view(), name='request_list'),

    # GET /api/interview-requests/stats - must come before the {id} route
    re_path(r'^/stats/?$', api.InterviewRequestStatsAPI.as_view(), name='request_stats'),

    # PUT /api/interview-requests/{id}/accept
    re_path(r'^/(?P<id>[^/]+)/accept/?$', api.InterviewRequestAcceptAPI.as_view(), name='request_accept'),

    # PUT /api/interview-requests/{id}/reject
    re_path(r'^/(?P<id>[^/]+)/reject/?$', api.InterviewRequestRejectAPI.as_view(), name='request_reject'),

    # GET/DELETE /api/interview-requests/{id}
    re_path(r'^/(?P<id>[^/]+)/?$', api.InterviewRequestDetailAPI.as_view(), name='request_detail'),
]
