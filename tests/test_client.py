"""
Client facade tests.

Run with: python -m pytest tests/test_client.py -v
"""

from unittest.mock import patch

import pytest

from assinafy import AssinafyClient, ValidationError, WebhookEvent
from assinafy.config import ASSINAFY_API_URL

from conftest import BASE_URL, called_url, envelope, make_response


class TestClientSetup:

    def test_missing_token_raises(self):
        with pytest.raises(ValidationError, match='Assinafy API token is required.'):
            AssinafyClient(token='', account_id='test-account')

    def test_resources_are_created(self):
        client = AssinafyClient(token='test-token', account_id='test-account')

        assert client.documents is not None
        assert client.signers is not None
        assert client.workspaces is not None
        assert client.base_url == ASSINAFY_API_URL

    def test_auth_headers_are_set(self, session):
        AssinafyClient(token='test-token', session=session)

        assert session.headers['Authorization'] == 'Bearer test-token'
        assert session.headers['Accept'] == 'application/json'

    def test_custom_base_url(self, session):
        client = AssinafyClient(token='test-token', account_id='acc', base_url=BASE_URL, session=session)
        client.list_documents()
        assert called_url(session) == f'{BASE_URL}accounts/acc/documents'

    def test_from_env(self, monkeypatch):
        """Settings are read from the environment when the client is built."""
        monkeypatch.setenv('ASSINAFY_API_TOKEN', 'env-token')
        monkeypatch.setenv('ASSINAFY_ACCOUNT_ID', 'env-account')
        monkeypatch.setenv('ASSINAFY_API_URL', BASE_URL)
        monkeypatch.setenv('ASSINAFY_TIMEOUT', '2.5')

        with patch('assinafy.client.load_dotenv') as load_dotenv:
            client = AssinafyClient.from_env()

        load_dotenv.assert_called_once()
        assert client.account_id == 'env-account'
        assert client.documents.account_id == 'env-account'
        assert client.base_url == BASE_URL
        assert client.timeout == 2.5
        assert client.session.headers['Authorization'] == 'Bearer env-token'

    def test_from_env_overrides(self, monkeypatch):
        monkeypatch.setenv('ASSINAFY_API_TOKEN', 'env-token')
        monkeypatch.delenv('ASSINAFY_TIMEOUT', raising=False)

        with patch('assinafy.client.load_dotenv'):
            client = AssinafyClient.from_env(account_id='override')

        assert client.account_id == 'override'
        assert client.timeout == 30

    def test_from_env_invalid_timeout(self, monkeypatch):
        monkeypatch.setenv('ASSINAFY_API_TOKEN', 'env-token')
        monkeypatch.setenv('ASSINAFY_TIMEOUT', 'soon')

        with patch('assinafy.client.load_dotenv'):
            with pytest.raises(ValidationError, match='Invalid ASSINAFY_TIMEOUT'):
                AssinafyClient.from_env()

    def test_public_names_resolve(self):
        """Every exported name is defined on the package."""
        import assinafy

        missing = [name for name in assinafy.__all__ if not hasattr(assinafy, name)]
        assert missing == []

    def test_context_manager_closes_session(self, session):
        with AssinafyClient(token='test-token', session=session):
            pass
        session.close.assert_called_once()


class TestPassThrough:
    """Facade methods should reach the resources, using the default account where one applies."""

    @pytest.fixture
    def client(self, session):
        return AssinafyClient(token='t', account_id='acc', base_url=BASE_URL, session=session)

    def test_create_signer(self, client, session):
        client.create_signer({'full_name': 'Ana', 'email': 'ana@example.com'})
        assert called_url(session) == f'{BASE_URL}accounts/acc/signers'

    def test_get_workspace_uses_given_id(self, client, session):
        client.get_workspace('w1')
        assert called_url(session) == f'{BASE_URL}accounts/w1'

    def test_delete_workspace_ignores_client_account(self, client, session):
        """An empty workspace id must not delete the default account."""
        with pytest.raises(ValidationError, match='Account ID is required for deleting workspace'):
            client.delete_workspace('')
        session.request.assert_not_called()

    def test_download_document(self, client, session):
        session.request.return_value = make_response(content=b'%PDF')
        assert client.download_document('d1', 'original') == b'%PDF'
        assert called_url(session) == f'{BASE_URL}documents/d1/download/original'

    def test_resend_signer_email(self, client, session):
        session.request.return_value = make_response(envelope({'is_sent': False}))
        assert client.resend_signer_email('d1', 'a1', 's1').is_sent is False

    def test_timeout_is_forwarded(self, session):
        client = AssinafyClient(token='t', account_id='acc', base_url=BASE_URL, timeout=5, session=session)
        client.list_signers()
        _, kwargs = session.request.call_args
        assert kwargs['timeout'] == 5


class TestWebhookEvent:

    def test_parses_document_uuid(self):
        event = WebhookEvent.from_dict({
            'event': 'document_ready',
            'data': {'document_uuid': 'd1', 'extra': 1},
        })
        assert event.event == 'document_ready'
        assert event.document_id == 'd1'
        assert event.data['extra'] == 1

    def test_missing_event_raises(self):
        with pytest.raises(ValidationError, match='missing the event name'):
            WebhookEvent.from_dict({'data': {}})
