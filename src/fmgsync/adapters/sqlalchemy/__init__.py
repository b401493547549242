"""SQLAlchemy adapter package for fmgsync."""

from __future__ import annotations

from .mappings import (
    create_all_tables,
    document_collection_table,
    document_table,
    mapper_registry,
    start_mappers,
)
from .repositories import SqlAlchemyDocumentStore
from .unit_of_work import (
    SqlAlchemyWorldUnitOfWork,
    StartupError,
    configured_engine,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyDocumentStore",
    "SqlAlchemyWorldUnitOfWork",
    "StartupError",
    "configured_engine",
    "create_all_tables",
    "document_collection_table",
    "document_table",
    "is_started",
    "mapper_registry",
    "shutdown",
    "start_mappers",
    "startup",
]
