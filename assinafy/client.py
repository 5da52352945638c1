"""
Assinafy Client

Thin wrapper around the Assinafy API for document signing.
Handles authentication and composes the document, signer and
workspace resources behind one configured session.
"""

import logging
from typing import Any, Dict, Optional, Union

import requests
from dotenv import find_dotenv, load_dotenv

from .config import ASSINAFY_API_URL, DEFAULT_TIMEOUT, Config
from .exceptions import ValidationError
from .resources import DocumentResource, SignerResource, WorkspaceResource
from .types import (
    Artifact,
    Assignment,
    CreateAssignmentPayload,
    CreateSignerPayload,
    CreateWorkspacePayload,
    Document,
    DocumentList,
    ResendEmailResult,
    Signer,
    SignerList,
    UpdateSignerPayload,
    UpdateWorkspacePayload,
    Workspace,
    WorkspaceList,
)

logger = logging.getLogger(__name__)


class AssinafyClient:
    """
    Client for Assinafy API operations.

    Example:
        client = AssinafyClient(token='your-api-token', account_id='your-account-id')
        document = client.upload_document(pdf_bytes, 'contract.pdf')

    Args:
        token: API token sent as a bearer token
        account_id: Default account for account-scoped calls
        base_url: API root; defaults to the production URL
        timeout: Request timeout in seconds
        session: Pre-built session to use instead of a new one
    """

    def __init__(
        self,
        token: str,
        account_id: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        if not token:
            raise ValidationError('Assinafy API token is required.', field='token')

        self.account_id = account_id
        self.base_url = base_url or ASSINAFY_API_URL
        self.timeout = timeout or DEFAULT_TIMEOUT

        self.session = session or requests.Session()
        self.session.headers.update({
            'Authorization': f"Bearer {token}",
            'Accept': 'application/json',
        })

        self.documents = DocumentResource(self.session, self.base_url, self.account_id, self.timeout)
        self.signers = SignerResource(self.session, self.base_url, self.account_id, self.timeout)
        self.workspaces = WorkspaceResource(self.session, self.base_url, timeout=self.timeout)
        logger.debug(f"Assinafy client configured for {self.base_url}")

    @classmethod
    def from_env(cls, **overrides) -> 'AssinafyClient':
        """
        Build a client from ASSINAFY_* environment variables.

        A .env file in the working directory is loaded first; variables
        already set in the environment take precedence.
        """
        load_dotenv(find_dotenv(usecwd=True), override=False)
        options = Config.load()
        options.update(overrides)
        return cls(**options)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> 'AssinafyClient':
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # =========================================================================
    # DOCUMENTS
    # =========================================================================

    def upload_document(self, pdf_bytes: bytes, file_name: str, account_id: Optional[str] = None) -> Document:
        """Upload a PDF document to the platform."""
        return self.documents.upload(pdf_bytes, file_name, account_id)

    def get_document_details(self, document_id: str) -> Document:
        return self.documents.details(document_id)

    def download_document(
        self,
        document_id: str,
        artifact: Union[Artifact, str] = Artifact.CERTIFICATED
    ) -> bytes:
        """Download an artifact of a document (certificated by default)."""
        return self.documents.download(document_id, artifact)

    def delete_document(self, document_id: str) -> None:
        return self.documents.delete(document_id)

    def list_documents(
        self,
        account_id: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None
    ) -> DocumentList:
        return self.documents.list(account_id, params)

    def create_assignment(
        self,
        document_id: str,
        assignment: Union[CreateAssignmentPayload, Dict[str, Any]]
    ) -> Assignment:
        """Send a document to its signers."""
        return self.documents.create_assignment(document_id, assignment)

    def resend_signer_email(self, document_id: str, assignment_id: str, signer_id: str) -> ResendEmailResult:
        return self.documents.resend_signer_email(document_id, assignment_id, signer_id)

    # =========================================================================
    # SIGNERS
    # =========================================================================

    def create_signer(
        self,
        signer: Union[CreateSignerPayload, Dict[str, Any]],
        account_id: Optional[str] = None
    ) -> Signer:
        return self.signers.create(signer, account_id)

    def list_signers(self, search: Optional[str] = None, account_id: Optional[str] = None) -> SignerList:
        return self.signers.list(search, account_id)

    def get_signer(self, signer_id: str, account_id: Optional[str] = None) -> Signer:
        return self.signers.get(signer_id, account_id)

    def update_signer(
        self,
        signer_id: str,
        signer: Union[UpdateSignerPayload, Dict[str, Any]],
        account_id: Optional[str] = None
    ) -> Signer:
        return self.signers.update(signer_id, signer, account_id)

    def delete_signer(self, signer_id: str, account_id: Optional[str] = None) -> None:
        return self.signers.delete(signer_id, account_id)

    # =========================================================================
    # WORKSPACES
    # =========================================================================

    def create_workspace(self, workspace: Union[CreateWorkspacePayload, Dict[str, Any]]) -> Workspace:
        return self.workspaces.create(workspace)

    def list_workspaces(self) -> WorkspaceList:
        return self.workspaces.list()

    def get_workspace(self, account_id: str) -> Workspace:
        return self.workspaces.get(account_id)

    def update_workspace(
        self,
        account_id: str,
        workspace: Union[UpdateWorkspacePayload, Dict[str, Any]]
    ) -> Workspace:
        return self.workspaces.update(account_id, workspace)

    def delete_workspace(self, account_id: str) -> None:
        return self.workspaces.delete(account_id)
