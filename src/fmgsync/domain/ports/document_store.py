"""Ports for materializing reconciled entities as documents."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID

    from fmgsync.domain.model import DocumentRecord, MaterializedIdentity


@runtime_checkable
class DocumentStore(Protocol):
    """Persistence contract of the external document consumer."""

    def list(self, collection: str) -> tuple[MaterializedIdentity, ...] | None:
        """Return the stored identities ordered by ordering key, or ``None`` if absent."""
        ...

    def create_many(
        self, collection: str, records: Sequence[DocumentRecord]
    ) -> tuple[UUID, ...]:
        """Create the collection if needed and insert ``records`` in order."""
        ...

    def update_many(
        self, collection: str, updates: Sequence[tuple[UUID, DocumentRecord]]
    ) -> None:
        """Overwrite the documents identified by each pair's identity."""
        ...

    def clear(self, collection: str) -> None:
        """Drop the collection and its documents so the next call creates afresh."""
        ...
