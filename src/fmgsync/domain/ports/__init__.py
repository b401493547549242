"""Domain port definitions for adapters."""

from __future__ import annotations

from .document_store import DocumentStore
from .rendering import Renderer
from .translation import RecordTranslator
from .unit_of_work import RepositoryCollection, UnitOfWork, WorldRepositories, WorldUnitOfWork

__all__ = [
    "DocumentStore",
    "RecordTranslator",
    "Renderer",
    "RepositoryCollection",
    "UnitOfWork",
    "WorldRepositories",
    "WorldUnitOfWork",
]
