"""
Document Resource

Upload, inspect, download and delete documents, and manage the
assignments (signing requests) attached to them.
"""

import json
import logging
from typing import Any, Dict, Optional, Union

from ..config import UPLOAD_TIMEOUT
from ..exceptions import AssinafyAPIError, ValidationError
from ..types import (
    Artifact,
    Assignment,
    CreateAssignmentPayload,
    Document,
    DocumentList,
    ResendEmailResult,
)
from ..utils import to_payload
from .base import BaseResource

logger = logging.getLogger(__name__)


class DocumentResource(BaseResource):
    """Operations under /documents and /accounts/{id}/documents."""

    def upload(self, pdf_bytes: bytes, file_name: str, account_id: Optional[str] = None) -> Document:
        """
        Upload a PDF to the account.

        Args:
            pdf_bytes: Raw PDF content
            file_name: Name shown in Assinafy (e.g., 'contract.pdf')
            account_id: Overrides the client default account

        Returns:
            The created Document
        """
        if not pdf_bytes:
            raise ValidationError('PDF content is required for uploading', field='pdf_bytes')
        if not file_name:
            raise ValidationError('File name is required for uploading', field='file_name')

        account = self._resolve_account_id(account_id)
        failure = 'Failed to upload document'

        data = self._call(
            'POST',
            f"/accounts/{account}/documents",
            failure,
            files={'file': (file_name, pdf_bytes, 'application/pdf')},
            timeout=UPLOAD_TIMEOUT
        )

        if not isinstance(data, dict) or not data.get('id'):
            raise AssinafyAPIError(f"Upload response missing document ID. Response: {json.dumps(data)}")

        logger.info(f"Uploaded document {data['id']} ({file_name}) to account {account}")
        return Document.from_dict(data)

    def list(self, account_id: Optional[str] = None, params: Optional[Dict[str, Any]] = None) -> DocumentList:
        """
        List documents of the account.

        Args:
            account_id: Overrides the client default account
            params: Extra query parameters (e.g., page, per-page, status)
        """
        account = self._resolve_account_id(account_id)
        data = self._call(
            'GET',
            f"/accounts/{account}/documents",
            'Failed to list documents',
            params=params or {}
        )
        return DocumentList.from_dict(data)

    def details(self, document_id: str) -> Document:
        """Fetch a single document, including its assignment and artifacts."""
        if not document_id:
            raise ValidationError('Document ID is required for getting details', field='document_id')

        data = self._call_object('GET', f"/documents/{document_id}", 'Failed to get document details')
        return Document.from_dict(data)

    def download(self, document_id: str, artifact: Union[Artifact, str] = Artifact.CERTIFICATED) -> bytes:
        """
        Download an artifact of a document.

        Args:
            document_id: Document to download
            artifact: One of original, certificated, certificate-page, bundle

        Returns:
            Raw file bytes
        """
        if not document_id:
            raise ValidationError('Document ID is required for downloading', field='document_id')

        try:
            artifact_name = Artifact(artifact).value
        except ValueError:
            valid = ', '.join(a.value for a in Artifact)
            raise ValidationError(f"Unknown artifact '{artifact}'. Expected one of: {valid}", field='artifact')

        response = self._request(
            'GET',
            f"/documents/{document_id}/download/{artifact_name}",
            'Failed to download document'
        )
        return response.content

    def delete(self, document_id: str) -> None:
        """Delete a document."""
        if not document_id:
            raise ValidationError('Document ID is required for deletion', field='document_id')

        self._delete(f"/documents/{document_id}", 'Failed to delete document', 'document')
        logger.info(f"Deleted document {document_id}")

    def create_assignment(
        self,
        document_id: str,
        assignment: Union[CreateAssignmentPayload, Dict[str, Any]]
    ) -> Assignment:
        """
        Send a document for signature.

        Args:
            document_id: Document to assign
            assignment: Signers and options for the signing request

        Returns:
            The created Assignment
        """
        if not document_id:
            raise ValidationError('Document ID is required for creating assignment', field='document_id')

        data = self._call_object(
            'POST',
            f"/documents/{document_id}/assignments",
            'Failed to create assignment',
            json=to_payload(assignment)
        )
        return Assignment.from_dict(data)

    def resend_signer_email(self, document_id: str, assignment_id: str, signer_id: str) -> ResendEmailResult:
        """Re-send the signing invitation to one signer of an assignment."""
        if not document_id or not assignment_id or not signer_id:
            raise ValidationError(
                'Document ID, assignment ID, and signer ID are all required for resending email'
            )

        data = self._call_object(
            'PUT',
            f"/documents/{document_id}/assignments/{assignment_id}/signers/{signer_id}/resend",
            'Failed to resend signer email'
        )
        return ResendEmailResult.from_dict(data)
