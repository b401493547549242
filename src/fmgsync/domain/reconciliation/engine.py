"""Upsert engine materializing one resolved collection into the document store."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Any

from fmgsync.domain.model import COLLECTION_BY_KIND, DocumentRecord, ResolvedBurg

from .plan import ReconciliationOutcome, ReconciliationStrategy, plan_reconciliation

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from uuid import UUID

    from fmgsync.domain.model import EntityKind, ResolvedView
    from fmgsync.domain.ports import DocumentStore, Renderer

    from .plan import ReconciliationPlan

log = getLogger(__name__)

FLAGS_NAMESPACE = "fmgsync"


def emit_eligible[TView: ResolvedView](entities: Sequence[TView | None]) -> tuple[TView, ...]:
    """Drop the leading sentinel, then unparsed, removed and nameless entities."""

    return tuple(
        entity
        for entity in entities[1:]
        if entity is not None and not entity.removed and entity.name
    )


def document_flags(kind: EntityKind, entity: ResolvedView) -> dict[str, Any]:
    flags: dict[str, Any] = {"compendium_entry": True, "kind": str(kind), "source_id": entity.i}
    if isinstance(entity, ResolvedBurg) and entity.url is not None:
        flags["url"] = entity.url
    return {FLAGS_NAMESPACE: flags}


@dataclass(slots=True)
class ReconciliationEngine:
    """Render, plan and apply one collection against the document store."""

    documents: DocumentStore
    renderer: Renderer

    def reconcile(
        self,
        kind: EntityKind,
        entities: Sequence[ResolvedView | None],
        *,
        extras: Mapping[str, object] | None = None,
        recreate: bool = False,
    ) -> ReconciliationOutcome:
        collection = COLLECTION_BY_KIND[kind]
        render_extras = extras or {}
        records = [
            DocumentRecord(
                ordering_key=entity.i,
                name=entity.name,
                content=self.renderer(str(kind), entity, render_extras),
                flags=document_flags(kind, entity),
            )
            for entity in emit_eligible(entities)
        ]

        if recreate:
            log.info("Clearing %s before a fresh create", collection)
            self.documents.clear(collection)

        plan = plan_reconciliation(collection, self.documents.list(collection), records)
        identities = self._apply(plan)
        log.info(
            "Reconciled %s: strategy=%s, records=%s", collection, plan.strategy, len(identities)
        )
        return ReconciliationOutcome(
            kind=kind,
            collection=collection,
            strategy=plan.strategy,
            identities=identities,
            warning=plan.warning,
        )

    def _apply(self, plan: ReconciliationPlan) -> dict[int, UUID]:
        if plan.strategy is ReconciliationStrategy.CREATE:
            created = self.documents.create_many(plan.collection, plan.creates)
            return {
                record.ordering_key: identity
                for record, identity in zip(plan.creates, created, strict=True)
            }
        if plan.strategy is ReconciliationStrategy.UPDATE:
            self.documents.update_many(plan.collection, plan.updates)
            return {record.ordering_key: identity for identity, record in plan.updates}
        return {}
