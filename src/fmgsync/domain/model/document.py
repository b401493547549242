"""Documents materialized in the external document store."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

from .enums import Permission


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True, kw_only=True)
class DocumentRecord:
    """Payload of one create or update operation.

    ``permission`` is only set on creation; ``None`` leaves the stored value as is.
    """

    ordering_key: int
    name: str
    content: str
    flags: dict[str, Any] = field(default_factory=dict[str, Any])
    permission: Permission | None = None


@dataclass(frozen=True, slots=True)
class MaterializedIdentity:
    """Identity of a stored document together with its source ordering key."""

    id: UUID
    ordering_key: int


@dataclass(eq=False, kw_only=True)
class DocumentCollection:
    name: str
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_utcnow)


@dataclass(eq=False, kw_only=True)
class Document:
    collection: str
    ordering_key: int
    name: str
    content: str
    permission: Permission = Permission.OBSERVER
    flags: dict[str, Any] = field(default_factory=dict[str, Any])
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def apply(self, record: DocumentRecord) -> None:
        self.ordering_key = record.ordering_key
        self.name = record.name
        self.content = record.content
        self.flags = dict(record.flags)
        if record.permission is not None:
            self.permission = record.permission
        self.updated_at = _utcnow()

    @classmethod
    def from_record(cls, collection: str, record: DocumentRecord) -> Document:
        return cls(
            collection=collection,
            ordering_key=record.ordering_key,
            name=record.name,
            content=record.content,
            permission=record.permission or Permission.OBSERVER,
            flags=dict(record.flags),
        )
