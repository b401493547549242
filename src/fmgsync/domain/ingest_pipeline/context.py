"""Per-run session state shared by the import pipeline phases."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from fmgsync.config import DEFAULT_CITY_GENERATOR_URL
from fmgsync.domain.model import EntityKind

if TYPE_CHECKING:
    from uuid import UUID

    from fmgsync.domain.model import (
        ResolvedBurg,
        ResolvedCountry,
        ResolvedCulture,
        ResolvedProvince,
    )
    from fmgsync.domain.ports import DocumentStore, Renderer
    from fmgsync.domain.reconciliation.plan import IntegrityWarning, ReconciliationOutcome


@dataclass(slots=True)
class ResolvedWorld:
    """Resolved views aligned index-for-index with the raw collections."""

    cultures: tuple[ResolvedCulture | None, ...] = ()
    countries: tuple[ResolvedCountry | None, ...] = ()
    provinces: tuple[ResolvedProvince | None, ...] = ()
    burgs: tuple[ResolvedBurg | None, ...] = ()
    has_provinces: bool = False


@dataclass(slots=True)
class HandleRegistry:
    """Identities of materialized documents keyed by entity kind and positional id."""

    _handles: dict[EntityKind, dict[int, UUID]] = field(
        default_factory=dict["EntityKind", dict[int, "UUID"]]
    )

    def register(self, kind: EntityKind, handles: dict[int, UUID]) -> None:
        self._handles[kind] = dict(handles)

    def handle_for(self, kind: EntityKind, entity_id: int) -> UUID | None:
        return self._handles.get(kind, {}).get(entity_id)

    def handles(self, kind: EntityKind) -> dict[int, UUID]:
        return dict(self._handles.get(kind, {}))


@dataclass(slots=True)
class ImportSession:
    """Explicit context for one ingestion run, discarded once reconciliation ends."""

    documents: DocumentStore | None = None
    renderer: Renderer | None = None
    city_generator_url: str = DEFAULT_CITY_GENERATOR_URL
    recreate: bool = False
    resolved: ResolvedWorld = field(default_factory=ResolvedWorld)
    handles: HandleRegistry = field(default_factory=HandleRegistry)
    outcomes: list[ReconciliationOutcome] = field(default_factory=list["ReconciliationOutcome"])
    warnings: list[IntegrityWarning] = field(default_factory=list["IntegrityWarning"])
    refused: set[EntityKind] = field(default_factory=set[EntityKind])
    failed_urls: int = 0

    def require_documents(self) -> DocumentStore:
        if self.documents is None:
            raise RuntimeError("Import session has no document store attached")
        return self.documents

    def require_renderer(self) -> Renderer:
        if self.renderer is None:
            raise RuntimeError("Import session has no renderer attached")
        return self.renderer
