"""
Workspace Resource

Workspaces are exposed by the API as accounts (/accounts). Calls on a
single workspace take its id explicitly; the client default account is
never used here.
"""

import logging
from typing import Any, Dict, Union

from ..exceptions import ValidationError
from ..types import CreateWorkspacePayload, UpdateWorkspacePayload, Workspace, WorkspaceList
from ..utils import to_payload
from .base import BaseResource

logger = logging.getLogger(__name__)


def _require_account_id(account_id: str, action: str) -> str:
    if not account_id:
        raise ValidationError(f"Account ID is required for {action} workspace", field='account_id')
    return account_id


class WorkspaceResource(BaseResource):
    """CRUD over the user's workspaces."""

    def create(self, workspace: Union[CreateWorkspacePayload, Dict[str, Any]]) -> Workspace:
        """Create a new workspace."""
        data = self._call_object('POST', '/accounts', 'Failed to create workspace', json=to_payload(workspace))
        created = Workspace.from_dict(data)
        logger.info(f"Created workspace {created.id}")
        return created

    def list(self) -> WorkspaceList:
        """List workspaces, most recently used first."""
        data = self._call('GET', '/accounts', 'Failed to list workspaces')
        return WorkspaceList.from_dict(data)

    def get(self, account_id: str) -> Workspace:
        """Fetch a single workspace."""
        account = _require_account_id(account_id, 'getting')
        data = self._call_object('GET', f"/accounts/{account}", 'Failed to get workspace')
        return Workspace.from_dict(data)

    def update(
        self,
        account_id: str,
        workspace: Union[UpdateWorkspacePayload, Dict[str, Any]]
    ) -> Workspace:
        """Update name or colors of a workspace."""
        account = _require_account_id(account_id, 'updating')
        data = self._call_object(
            'PUT',
            f"/accounts/{account}",
            'Failed to update workspace',
            json=to_payload(workspace)
        )
        return Workspace.from_dict(data)

    def delete(self, account_id: str) -> None:
        """Delete a workspace."""
        account = _require_account_id(account_id, 'deleting')
        self._delete(f"/accounts/{account}", 'Failed to delete workspace', 'workspace')
        logger.info(f"Deleted workspace {account}")
