"""Pipeline phase wiring the reconciliation engine into an import session."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from fmgsync.domain.model import EntityKind

from .engine import ReconciliationEngine

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fmgsync.domain.ingest_pipeline.context import ImportSession, ResolvedWorld
    from fmgsync.domain.ingest_pipeline.store import EntityGraphStore
    from fmgsync.domain.model import ResolvedCountry, ResolvedView

log = getLogger(__name__)


def resolved_collection(
    resolved: ResolvedWorld, kind: EntityKind
) -> Sequence[ResolvedView | None]:
    match kind:
        case EntityKind.CULTURE:
            return resolved.cultures
        case EntityKind.COUNTRY:
            return resolved.countries
        case EntityKind.PROVINCE:
            return resolved.provinces
        case EntityKind.BURG:
            return resolved.burgs
        case _:
            raise ValueError(f"{kind} collections are not reconciled")


def visible_countries(resolved: ResolvedWorld) -> tuple[ResolvedCountry, ...]:
    """Countries that still exist, sentinel included, aligned with filtered diplomacy."""

    return tuple(
        country for country in resolved.countries if country is not None and not country.removed
    )


@dataclass(slots=True)
class ReconciliationPhase:
    """Materialize one resolved collection.

    ``resync`` marks the second province pass: it never clears the collection
    and is skipped when the first province pass or the burg pass was refused.
    """

    kind: EntityKind
    resync: bool = False
    name: str = field(init=False)

    def __post_init__(self) -> None:
        suffix = "-resync" if self.resync else ""
        self.name = f"reconcile-{self.kind}{suffix}"

    def run(self, store: EntityGraphStore, *, session: ImportSession) -> None:
        _ = store
        resolved = session.resolved
        if self.kind is EntityKind.PROVINCE and not resolved.has_provinces:
            log.info("Export has no provinces; nothing to reconcile")
            return
        if self.resync:
            blocked = session.refused & {self.kind, EntityKind.BURG}
            if blocked:
                log.warning(
                    "Skipping %s re-sync after refused reconciliation of %s",
                    self.kind,
                    sorted(str(kind) for kind in blocked),
                )
                return

        extras: dict[str, object] = {"handles": session.handles}
        if self.kind is EntityKind.COUNTRY:
            extras["countries"] = visible_countries(resolved)

        engine = ReconciliationEngine(
            documents=session.require_documents(),
            renderer=session.require_renderer(),
        )
        outcome = engine.reconcile(
            self.kind,
            resolved_collection(resolved, self.kind),
            extras=extras,
            recreate=session.recreate and not self.resync,
        )
        session.outcomes.append(outcome)

        if outcome.warning is not None:
            log.warning("Integrity warning: %s", outcome.warning.message)
            session.warnings.append(outcome.warning)
            session.refused.add(self.kind)
            return
        session.handles.register(self.kind, outcome.identities)
