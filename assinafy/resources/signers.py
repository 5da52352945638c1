import logging
from typing import Any, Dict, Optional, Union

from ..exceptions import ValidationError
from ..types import CreateSignerPayload, Signer, SignerList, UpdateSignerPayload
from ..utils import to_payload
from .base import BaseResource

logger = logging.getLogger(__name__)


class SignerResource(BaseResource):
    """Signers registered in an account (/accounts/{id}/signers)."""

    def create(
        self,
        signer: Union[CreateSignerPayload, Dict[str, Any]],
        account_id: Optional[str] = None
    ) -> Signer:
        """Register a signer in the account."""
        account = self._resolve_account_id(account_id)
        data = self._call_object(
            'POST',
            f"/accounts/{account}/signers",
            'Failed to create signer',
            json=to_payload(signer)
        )
        return Signer.from_dict(data)

    def list(self, search: Optional[str] = None, account_id: Optional[str] = None) -> SignerList:
        """List signers, optionally filtered by name or email."""
        account = self._resolve_account_id(account_id)

        params = {}
        if search:
            params['search'] = search

        data = self._call(
            'GET',
            f"/accounts/{account}/signers",
            'Failed to list signers',
            params=params
        )
        return SignerList.from_dict(data)

    def get(self, signer_id: str, account_id: Optional[str] = None) -> Signer:
        """Fetch a single signer."""
        if not signer_id:
            raise ValidationError('Signer ID is required for getting details', field='signer_id')

        account = self._resolve_account_id(account_id)
        data = self._call_object('GET', f"/accounts/{account}/signers/{signer_id}", 'Failed to get signer')
        return Signer.from_dict(data)

    def update(
        self,
        signer_id: str,
        signer: Union[UpdateSignerPayload, Dict[str, Any]],
        account_id: Optional[str] = None
    ) -> Signer:
        """
        Update a signer.

        Assinafy rejects updates for signers attached to an active document.
        """
        if not signer_id:
            raise ValidationError('Signer ID is required for updating', field='signer_id')

        account = self._resolve_account_id(account_id)
        data = self._call_object(
            'PUT',
            f"/accounts/{account}/signers/{signer_id}",
            'Failed to update signer',
            json=to_payload(signer)
        )
        return Signer.from_dict(data)

    def delete(self, signer_id: str, account_id: Optional[str] = None) -> None:
        """Remove a signer from the account."""
        if not signer_id:
            raise ValidationError('Signer ID is required for deletion', field='signer_id')

        account = self._resolve_account_id(account_id)
        self._delete(f"/accounts/{account}/signers/{signer_id}", 'Failed to delete signer', 'signer')
        logger.info(f"Deleted signer {signer_id} from account {account}")
