"""
Assinafy API Client

A typed client for the Assinafy document-signing platform: document
upload and download, signer management, assignments and workspaces.

Usage:
    from assinafy import AssinafyClient, CreateSignerPayload, CreateAssignmentPayload

    client = AssinafyClient(token='your-api-token', account_id='your-account-id')

    document = client.upload_document(pdf_bytes, 'contract.pdf')
    signer = client.create_signer(CreateSignerPayload(full_name='Ana Souza', email='ana@example.com'))
    client.create_assignment(document.id, CreateAssignmentPayload(signer_ids=[signer.id]))

    signed_pdf = client.download_document(document.id, 'certificated')
"""

from .types import (
    Artifact,
    DocumentStatus,
    CreateSignerPayload,
    UpdateSignerPayload,
    CreateAssignmentPayload,
    CreateWorkspacePayload,
    UpdateWorkspacePayload,
    PageMeta,
    Signer,
    SignerList,
    Page,
    AssignmentItem,
    AssignmentSummary,
    Assignment,
    Activity,
    Document,
    DocumentList,
    ResendEmailResult,
    Workspace,
    WorkspaceList,
    WebhookEvent
)

from .exceptions import (
    AssinafyError,
    ValidationError,
    AssinafyAPIError
)

from .utils import format_request_error, handle_response
from .resources import DocumentResource, SignerResource, WorkspaceResource
from .client import AssinafyClient

__all__ = [
    # Types
    'Artifact',
    'DocumentStatus',
    'CreateSignerPayload',
    'UpdateSignerPayload',
    'CreateAssignmentPayload',
    'CreateWorkspacePayload',
    'UpdateWorkspacePayload',
    'PageMeta',
    'Signer',
    'SignerList',
    'Page',
    'AssignmentItem',
    'AssignmentSummary',
    'Assignment',
    'Activity',
    'Document',
    'DocumentList',
    'ResendEmailResult',
    'Workspace',
    'WorkspaceList',
    'WebhookEvent',

    # Exceptions
    'AssinafyError',
    'ValidationError',
    'AssinafyAPIError',

    # Helpers
    'format_request_error',
    'handle_response',

    # Client
    'DocumentResource',
    'SignerResource',
    'WorkspaceResource',
    'AssinafyClient',
]
