"""
Workspace resource tests.

Run with: python -m pytest tests/test_workspaces.py -v
"""

import pytest

from assinafy import (
    AssinafyAPIError,
    CreateWorkspacePayload,
    UpdateWorkspacePayload,
    ValidationError,
    WorkspaceResource,
)

from conftest import BASE_URL, called_method, called_url, envelope, make_response


@pytest.fixture
def workspaces(session):
    return WorkspaceResource(session, BASE_URL)


class TestWorkspaceValidation:

    def test_get_without_account_id(self, workspaces, session):
        with pytest.raises(ValidationError, match='Account ID is required for getting workspace'):
            workspaces.get('')
        session.request.assert_not_called()

    def test_update_without_account_id(self, workspaces, session):
        with pytest.raises(ValidationError, match='Account ID is required for updating workspace'):
            workspaces.update('', UpdateWorkspacePayload(name='Test'))
        session.request.assert_not_called()

    def test_delete_without_account_id(self, workspaces, session):
        with pytest.raises(ValidationError, match='Account ID is required for deleting workspace'):
            workspaces.delete('')
        session.request.assert_not_called()

    @pytest.mark.parametrize('call', [
        lambda r: r.get(''),
        lambda r: r.update(None, {'name': 'X'}),
        lambda r: r.delete(''),
    ])
    def test_default_account_is_never_used(self, session, call):
        """A resource default account must not stand in for a missing workspace id."""
        resource = WorkspaceResource(session, BASE_URL, 'default-account')
        with pytest.raises(ValidationError, match='Account ID is required for'):
            call(resource)
        session.request.assert_not_called()


class TestWorkspaceCalls:

    def test_create(self, workspaces, session):
        session.request.return_value = make_response(envelope({
            'id': 'w1', 'name': 'Legal', 'primary_color': '#112233', 'created_at': '2026-01-01'
        }))

        workspace = workspaces.create(CreateWorkspacePayload(name='Legal', primary_color='#112233'))

        _, kwargs = session.request.call_args
        assert called_method(session) == 'POST'
        assert called_url(session) == f'{BASE_URL}accounts'
        assert kwargs['json'] == {'name': 'Legal', 'primary_color': '#112233'}
        assert workspace.id == 'w1'

    def test_list(self, workspaces, session):
        session.request.return_value = make_response(envelope([
            {'id': 'w1', 'name': 'Legal', 'is_delete_allowed': False, 'roles': ['owner']},
        ]))

        result = workspaces.list()

        assert result.items[0].roles == ['owner']
        assert result.items[0].is_delete_allowed is False

    def test_update_can_clear_colors(self, workspaces, session):
        workspaces.update('w1', UpdateWorkspacePayload(secondary_color=None))

        _, kwargs = session.request.call_args
        assert called_method(session) == 'PUT'
        assert called_url(session) == f'{BASE_URL}accounts/w1'
        assert kwargs['json'] == {'secondary_color': None}

    def test_delete(self, workspaces, session):
        session.request.return_value = make_response(status_code=200)
        workspaces.delete('w1')
        assert called_method(session) == 'DELETE'
        assert called_url(session) == f'{BASE_URL}accounts/w1'

    def test_server_error_is_wrapped(self, workspaces, session):
        session.request.return_value = make_response(content=b'boom', status_code=500)

        with pytest.raises(AssinafyAPIError) as exc_info:
            workspaces.list()

        assert str(exc_info.value).startswith('Failed to list workspaces: GET')
        assert exc_info.value.status_code == 500

    def test_null_envelope_data_raises(self, workspaces, session):
        """An envelope with null data is not a workspace."""
        session.request.return_value = make_response(envelope(None))
        with pytest.raises(AssinafyAPIError, match='Failed to get workspace: empty response'):
            workspaces.get('w1')
