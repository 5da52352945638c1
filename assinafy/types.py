"""
Assinafy Type Definitions

Enums and dataclasses mirroring the Assinafy API resources.

Payload classes are built by callers and serialized with ``to_dict()``.
Response classes are built from decoded JSON with ``from_dict()`` and keep
the original dict as ``raw`` so fields not modelled here stay reachable.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from .exceptions import ValidationError


class Artifact(Enum):
    """Downloadable renditions of a document."""
    ORIGINAL = "original"
    CERTIFICATED = "certificated"
    CERTIFICATE_PAGE = "certificate-page"
    BUNDLE = "bundle"


class DocumentStatus(Enum):
    """Lifecycle states reported for a document."""
    UPLOADED = "uploaded"
    METADATA_PROCESSING = "metadata_processing"
    METADATA_READY = "metadata_ready"
    PENDING = "pending"
    CERTIFICATING = "certificating"
    CERTIFICATED = "certificated"
    COMPLETED = "completed"
    REJECTED_BY_SIGNER = "rejected_by_signer"
    REJECTED_BY_USER = "rejected_by_user"
    EXPIRED = "expired"
    FAILED = "failed"


def _enum_or_str(enum_cls, value):
    """Map a raw value onto an enum member, keeping unknown values as-is."""
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return value


def _drop_none(data: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}


# =============================================================================
# PAYLOADS
# =============================================================================

@dataclass
class CreateSignerPayload:
    """Data for creating a signer in an account."""
    full_name: str
    email: str

    def to_dict(self) -> Dict[str, Any]:
        return {'full_name': self.full_name, 'email': self.email}


@dataclass
class UpdateSignerPayload:
    """
    Partial signer update.

    A signer can only be updated while it is not part of an active document.
    """
    full_name: Optional[str] = None
    email: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({'full_name': self.full_name, 'email': self.email})


@dataclass
class CreateAssignmentPayload:
    """
    Signing request for a document.

    Attributes:
        signer_ids: Ids of signers already created in the account
        method: Assignment method; only 'virtual' is supported
        message: Optional message included in the invitation email
        expires_at: Optional ISO-8601 expiration timestamp
        copy_receivers: Optional list of emails copied on completion
    """
    signer_ids: List[str]
    method: str = 'virtual'
    message: Optional[str] = None
    expires_at: Optional[str] = None
    copy_receivers: Optional[List[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({
            'method': self.method,
            'signerIds': list(self.signer_ids),
            'message': self.message,
            'expires_at': self.expires_at,
            'copy_receivers': self.copy_receivers,
        })


@dataclass
class CreateWorkspacePayload:
    """Data for creating a workspace (account)."""
    name: str
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({
            'name': self.name,
            'primary_color': self.primary_color,
            'secondary_color': self.secondary_color,
        })


_UNSET = object()


@dataclass
class UpdateWorkspacePayload:
    """
    Partial workspace update.

    Colors left unset are not sent. Passing None explicitly sends null,
    which resets the color on the server.
    """
    name: Optional[str] = None
    primary_color: Any = _UNSET
    secondary_color: Any = _UNSET

    def to_dict(self) -> Dict[str, Any]:
        payload = {}
        if self.name is not None:
            payload['name'] = self.name
        if self.primary_color is not _UNSET:
            payload['primary_color'] = self.primary_color
        if self.secondary_color is not _UNSET:
            payload['secondary_color'] = self.secondary_color
        return payload


# =============================================================================
# RESPONSES
# =============================================================================

@dataclass
class PageMeta:
    """Pagination block returned by listing endpoints."""
    current_page: int
    last_page: int
    per_page: int
    total: int

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['PageMeta']:
        if not data:
            return None
        return cls(
            current_page=data.get('current_page', 1),
            last_page=data.get('last_page', 1),
            per_page=data.get('per_page', 0),
            total=data.get('total', 0)
        )


@dataclass
class Signer:
    """A signer registered in an account."""
    id: str
    full_name: str
    email: Optional[str] = None
    resource: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Signer':
        return cls(
            id=data.get('id'),
            full_name=data.get('full_name', ''),
            email=data.get('email'),
            resource=data.get('resource'),
            raw=data
        )


@dataclass
class SignerList:
    """A page of signers."""
    items: List[Signer]
    meta: Optional[PageMeta] = None

    @classmethod
    def from_dict(cls, data: Union[Dict[str, Any], List[Any], None]) -> 'SignerList':
        # Unwrapped envelopes hand back the bare list
        if isinstance(data, list):
            return cls(items=[Signer.from_dict(s) for s in data])
        data = data or {}
        return cls(
            items=[Signer.from_dict(s) for s in data.get('data', [])],
            meta=PageMeta.from_dict(data.get('meta'))
        )


@dataclass
class Page:
    """A rendered page of an uploaded document."""
    id: str
    number: int
    height: Optional[float] = None
    width: Optional[float] = None
    download_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Page':
        return cls(
            id=data.get('id'),
            number=data.get('number'),
            height=data.get('height'),
            width=data.get('width'),
            download_url=data.get('download_url')
        )


@dataclass
class AssignmentItem:
    """A field a signer must fill in."""
    id: str
    signer: Optional[Signer] = None
    field_name: Optional[str] = None
    field_type: Optional[str] = None
    value: Any = None
    completed: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AssignmentItem':
        signer = data.get('signer')
        field_data = data.get('field') or {}
        return cls(
            id=data.get('id'),
            signer=Signer.from_dict(signer) if signer else None,
            field_name=field_data.get('name'),
            field_type=field_data.get('type'),
            value=data.get('value'),
            completed=bool(data.get('completed', False))
        )


@dataclass
class AssignmentSummary:
    """Completion counters for an assignment."""
    signer_count: int = 0
    completed_count: int = 0

    @property
    def is_complete(self) -> bool:
        return self.signer_count > 0 and self.completed_count >= self.signer_count

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['AssignmentSummary']:
        if not data:
            return None
        return cls(
            signer_count=data.get('signer_count', 0),
            completed_count=data.get('completed_count', 0)
        )


@dataclass
class Assignment:
    """A signing request binding signers to a document."""
    id: str
    expiration: Optional[str] = None
    method: Optional[str] = None
    sender_email: Optional[str] = None
    signers: List[Signer] = field(default_factory=list)
    items: List[AssignmentItem] = field(default_factory=list)
    summary: Optional[AssignmentSummary] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def is_complete(self) -> bool:
        """True when every signer has completed, judged by summary or items."""
        if self.summary is not None:
            return self.summary.is_complete
        return bool(self.items) and all(item.completed for item in self.items)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Assignment':
        return cls(
            id=data.get('id'),
            expiration=data.get('expiration'),
            method=data.get('method'),
            sender_email=data.get('sender_email'),
            signers=[Signer.from_dict(s) for s in data.get('signers') or []],
            items=[
                AssignmentItem.from_dict(i) for i in data.get('items') or []
                if isinstance(i, dict)
            ],
            summary=AssignmentSummary.from_dict(data.get('summary')),
            raw=data
        )


@dataclass
class Activity:
    """An audit trail entry on a document."""
    id: int
    event: str
    message: Optional[str] = None
    origin: Optional[str] = None
    created_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Activity':
        return cls(
            id=data.get('id'),
            event=data.get('event'),
            message=data.get('message'),
            origin=data.get('origin'),
            created_at=data.get('created_at')
        )


@dataclass
class Document:
    """
    A document uploaded to Assinafy.

    ``status`` is a DocumentStatus when the value is known, otherwise the
    raw string. ``artifacts`` maps artifact names to download URLs.
    """
    id: str
    name: Optional[str] = None
    status: Union[DocumentStatus, str, None] = None
    account_id: Optional[str] = None
    artifacts: Dict[str, str] = field(default_factory=dict)
    pages: List[Page] = field(default_factory=list)
    assignment: Optional[Assignment] = None
    activities: List[Activity] = field(default_factory=list)
    is_closed: bool = False
    decline_reason: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    def artifact_url(self, artifact: Union[Artifact, str]) -> Optional[str]:
        """Get the download URL of an artifact, if the server listed one."""
        key = artifact.value if isinstance(artifact, Artifact) else artifact
        return self.artifacts.get(key)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Document':
        assignment = data.get('assignment')
        return cls(
            id=data.get('id') or data.get('uuid'),
            name=data.get('name'),
            status=_enum_or_str(DocumentStatus, data.get('status')),
            account_id=data.get('account_id'),
            artifacts=dict(data.get('artifacts') or {}),
            pages=[Page.from_dict(p) for p in data.get('pages') or [] if isinstance(p, dict)],
            assignment=Assignment.from_dict(assignment) if isinstance(assignment, dict) else None,
            activities=[Activity.from_dict(a) for a in data.get('activities') or []],
            is_closed=bool(data.get('is_closed', False)),
            decline_reason=data.get('decline_reason'),
            created_at=data.get('created_at'),
            updated_at=data.get('updated_at'),
            raw=data
        )


@dataclass
class DocumentList:
    """A page of documents."""
    items: List[Document]
    meta: Optional[PageMeta] = None

    @classmethod
    def from_dict(cls, data: Union[Dict[str, Any], List[Any], None]) -> 'DocumentList':
        if isinstance(data, list):
            return cls(items=[Document.from_dict(d) for d in data])
        data = data or {}
        return cls(
            items=[Document.from_dict(d) for d in data.get('data', [])],
            meta=PageMeta.from_dict(data.get('meta'))
        )


@dataclass
class ResendEmailResult:
    """Outcome of re-sending a signer invitation."""
    is_sent: bool
    document_id: Optional[str] = None
    signer_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ResendEmailResult':
        return cls(
            is_sent=bool(data.get('is_sent', False)),
            document_id=data.get('document_id'),
            signer_id=data.get('signer_id')
        )


@dataclass
class Workspace:
    """A workspace, called an account by the API."""
    id: str
    name: str
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    is_delete_allowed: Optional[bool] = None
    roles: List[str] = field(default_factory=list)
    created_at: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Workspace':
        return cls(
            id=data.get('id'),
            name=data.get('name', ''),
            primary_color=data.get('primary_color'),
            secondary_color=data.get('secondary_color'),
            is_delete_allowed=data.get('is_delete_allowed'),
            roles=list(data.get('roles') or []),
            created_at=data.get('created_at'),
            raw=data
        )


@dataclass
class WorkspaceList:
    """Workspaces of the current user, most recently used first."""
    items: List[Workspace]

    @classmethod
    def from_dict(cls, data: Union[Dict[str, Any], List[Any], None]) -> 'WorkspaceList':
        if isinstance(data, list):
            return cls(items=[Workspace.from_dict(w) for w in data])
        data = data or {}
        return cls(items=[Workspace.from_dict(w) for w in data.get('data', [])])


@dataclass
class WebhookEvent:
    """
    A webhook notification sent by Assinafy.

    Attributes:
        event: Event name (e.g., 'document_ready')
        document_id: Document the event refers to
        data: The full data block of the notification
    """
    event: str
    document_id: Optional[str]
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> 'WebhookEvent':
        if not isinstance(payload, dict) or not payload.get('event'):
            raise ValidationError("Webhook payload is missing the event name", field='event')

        data = payload.get('data') or {}
        return cls(
            event=payload['event'],
            document_id=data.get('document_id') or data.get('document_uuid'),
            data=data
        )
