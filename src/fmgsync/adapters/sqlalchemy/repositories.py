"""Document store implementation backed by SQLAlchemy sessions."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, cast

from sqlalchemy import delete, select

from fmgsync.adapters.sqlalchemy.mappings import document_collection_table, document_table
from fmgsync.domain.model import Document, DocumentCollection, MaterializedIdentity

if TYPE_CHECKING:
    import uuid
    from collections.abc import Sequence

    from sqlalchemy.orm import Session

    from fmgsync.domain.model import DocumentRecord

log = getLogger(__name__)


class SqlAlchemyDocumentStore:
    """Collections of rendered documents persisted in one database session.

    Writes are flushed but never committed here; the unit of work owns the
    transaction boundary.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, collection: str) -> tuple[MaterializedIdentity, ...] | None:
        if self._collection(collection) is None:
            return None
        stmt = (
            select(document_table.c.id, document_table.c.ordering_key)
            .where(document_table.c.collection == collection)
            .order_by(document_table.c.ordering_key)
        )
        return tuple(
            MaterializedIdentity(id=row.id, ordering_key=row.ordering_key)
            for row in self.session.execute(stmt)
        )

    def create_many(
        self, collection: str, records: Sequence[DocumentRecord]
    ) -> tuple[uuid.UUID, ...]:
        if self._collection(collection) is None:
            log.info("Creating document collection %s", collection)
            self.session.add(DocumentCollection(name=collection))
            self.session.flush()
        documents = [Document.from_record(collection, record) for record in records]
        self.session.add_all(documents)
        self.session.flush()
        return tuple(document.id for document in documents)

    def update_many(
        self, collection: str, updates: Sequence[tuple[uuid.UUID, DocumentRecord]]
    ) -> None:
        for identity, record in updates:
            document = self.session.get(Document, identity)
            if document is None or document.collection != collection:
                raise LookupError(f"Document {identity} is not part of {collection}")
            document.apply(record)
        self.session.flush()

    def clear(self, collection: str) -> None:
        # bulk deletes bypass the identity map, so drop cached instances first
        self.session.expunge_all()
        self.session.execute(delete(document_table).where(document_table.c.collection == collection))
        self.session.execute(
            delete(document_collection_table).where(
                document_collection_table.c.name == collection
            )
        )
        self.session.flush()

    def get(self, identity: uuid.UUID) -> Document | None:
        return self.session.get(Document, identity)

    def documents(self, collection: str) -> list[Document]:
        stmt = (
            select(Document)
            .where(document_table.c.collection == collection)
            .order_by(document_table.c.ordering_key)
        )
        return cast(list[Document], list(self.session.execute(stmt).scalars()))

    def _collection(self, name: str) -> DocumentCollection | None:
        stmt = select(DocumentCollection).where(document_collection_table.c.name == name)
        return self.session.execute(stmt).scalar_one_or_none()
