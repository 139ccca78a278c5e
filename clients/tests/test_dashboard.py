# clients/tests/test_dashboard.py
from unittest.mock import MagicMock

import pytest

from clients.api import ApiError
from clients.connection import ConnectionState, LiveConnection
from clients.dashboard import RecruiterDashboard


def record(suffix, status='pending'):
    return {'id': suffix * 24, 'name': f'Candidate {suffix}', 'status': status}


@pytest.fixture
def api():
    client = MagicMock()
    client.list.return_value = [record('b'), record('a', 'accepted'), record('c', 'rejected')]
    return client


@pytest.fixture
def dashboard(api):
    board = RecruiterDashboard(api)
    board.refresh()
    return board


def test_refresh_mirrors_server(dashboard):
    assert [r['id'] for r in dashboard.records] == ['b' * 24, 'a' * 24, 'c' * 24]
    assert dashboard.loading is False
    assert dashboard.error is None


def test_refresh_failure_keeps_mirror(dashboard, api):
    api.list.side_effect = ApiError('Could not reach the server')

    with pytest.raises(ApiError):
        dashboard.refresh()

    assert len(dashboard.records) == 3
    assert dashboard.error == 'Could not reach the server'
    assert dashboard.loading is False


def test_new_request_prepended_once(dashboard):
    event = {'event': 'newInterviewRequest', 'type': 'NEW_REQUEST', 'data': record('d')}

    dashboard.apply_event(event)
    dashboard.apply_event(event)

    assert [r['id'] for r in dashboard.records][:2] == ['d' * 24, 'b' * 24]
    assert len(dashboard.records) == 4


def test_status_update_replaces_in_place(dashboard):
    dashboard.apply_event({'event': 'requestStatusUpdate', 'data': record('b', 'accepted')})

    assert dashboard.records[0] == record('b', 'accepted')
    assert len(dashboard.records) == 3


def test_status_update_for_unknown_record_is_ignored(dashboard):
    dashboard.apply_event({'event': 'requestStatusUpdate', 'data': record('z', 'accepted')})
    assert len(dashboard.records) == 3


def test_delete_event_removes(dashboard):
    dashboard.apply_event({'event': 'requestDeleted', 'data': {'id': 'a' * 24}})
    assert [r['id'] for r in dashboard.records] == ['b' * 24, 'c' * 24]


def test_unknown_event_ignored(dashboard):
    dashboard.apply_event({'event': 'somethingElse', 'data': record('q')})
    assert len(dashboard.records) == 3


def test_filter_and_visible(dashboard):
    assert len(dashboard.visible) == 3

    dashboard.filter = 'pending'
    assert [r['id'] for r in dashboard.visible] == ['b' * 24]

    dashboard.apply_event({'event': 'requestStatusUpdate', 'data': record('b', 'accepted')})
    assert dashboard.visible == []

    dashboard.filter = 'accepted'
    assert len(dashboard.visible) == 2


def test_filter_rejects_unknown_value(dashboard):
    with pytest.raises(ValueError):
        dashboard.filter = 'rejected'
    assert dashboard.filter == 'all'


def test_counts(dashboard):
    assert dashboard.counts() == {'total': 3, 'pending': 1, 'accepted': 1, 'rejected': 1}


def test_accept_updates_from_response(dashboard, api):
    api.accept.return_value = record('b', 'accepted')

    dashboard.accept('b' * 24)

    api.accept.assert_called_once_with('b' * 24)
    assert dashboard.records[0]['status'] == 'accepted'


def test_failed_accept_leaves_mirror(dashboard, api):
    api.accept.side_effect = ApiError('Only pending requests can be accepted', 400, 'Invalid Status')

    with pytest.raises(ApiError):
        dashboard.accept('c' * 24)

    assert dashboard.records[2]['status'] == 'rejected'
    assert dashboard.error == 'Only pending requests can be accepted'


def test_reject_passes_reason(dashboard, api):
    api.reject.return_value = record('b', 'rejected')

    dashboard.reject('b' * 24, reason='Filled')

    api.reject.assert_called_once_with('b' * 24, 'Filled')
    assert dashboard.records[0]['status'] == 'rejected'


def test_delete_removes_after_success(dashboard, api):
    dashboard.delete('a' * 24)
    assert len(dashboard.records) == 2

    api.delete.side_effect = ApiError('Interview request not found', 404, 'Not Found')
    with pytest.raises(ApiError):
        dashboard.delete('b' * 24)
    assert len(dashboard.records) == 2


def test_tracks_connection_state(api):
    connection = LiveConnection(connect=MagicMock())
    board = RecruiterDashboard(api, connection=connection)

    assert board.connection_state == ConnectionState.DISCONNECTED
    connection._set_state(ConnectionState.CONNECTING)
    assert board.connection_state == ConnectionState.CONNECTING
    assert board.records == []
