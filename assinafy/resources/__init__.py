from .base import BaseResource
from .documents import DocumentResource
from .signers import SignerResource
from .workspaces import WorkspaceResource

__all__ = [
    'BaseResource',
    'DocumentResource',
    'SignerResource',
    'WorkspaceResource',
]
