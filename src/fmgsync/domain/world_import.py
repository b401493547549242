"""Application services for importing a map export into the document store."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Final

from fmgsync.config import DEFAULT_CITY_GENERATOR_URL
from fmgsync.domain.errors import IncompleteExportError
from fmgsync.domain.ingest_pipeline import (
    CyclicResolutionPhase,
    EntityGraphStore,
    ImportSession,
    IngestionPipeline,
    LeafResolutionPhase,
    classify_export,
)
from fmgsync.domain.model import EntityKind
from fmgsync.domain.reconciliation import ReconciliationPhase

if TYPE_CHECKING:
    from collections.abc import Callable

    from fmgsync.domain.model import MapHeader
    from fmgsync.domain.ports import RecordTranslator, Renderer, WorldUnitOfWork
    from fmgsync.domain.reconciliation import IntegrityWarning, ReconciliationOutcome

log = getLogger(__name__)

REQUIRED_KINDS: Final[tuple[EntityKind, ...]] = (
    EntityKind.CULTURE,
    EntityKind.COUNTRY,
    EntityKind.BURG,
)


@dataclass(slots=True)
class ImportWorldResult:
    """Outcome of one import run."""

    header: MapHeader
    counts: dict[EntityKind, int]
    outcomes: tuple[ReconciliationOutcome, ...] = ()
    warnings: tuple[IntegrityWarning, ...] = ()
    burg_urls: dict[int, str] = field(default_factory=dict[int, str])

    @property
    def ok(self) -> bool:
        return not self.warnings


def default_pipeline() -> IngestionPipeline:
    """Resolution and reconciliation phases in dependency order.

    Provinces are materialized twice: once right after cultures, and again
    after pass 2 once burg documents exist to link to.
    """

    return IngestionPipeline(
        phases=(
            LeafResolutionPhase(),
            ReconciliationPhase(EntityKind.CULTURE),
            ReconciliationPhase(EntityKind.PROVINCE),
            ReconciliationPhase(EntityKind.COUNTRY),
            ReconciliationPhase(EntityKind.BURG),
            CyclicResolutionPhase(),
            ReconciliationPhase(EntityKind.PROVINCE, resync=True),
        )
    )


def load_world(text: str, *, translate: RecordTranslator) -> EntityGraphStore:
    """Classify ``text`` and build the typed entity graph store."""

    return EntityGraphStore.from_export(classify_export(text), translate)


def import_world(
    text: str,
    *,
    translate: RecordTranslator,
    unit_of_work_factory: Callable[[], WorldUnitOfWork],
    renderer: Renderer,
    city_generator_url: str = DEFAULT_CITY_GENERATOR_URL,
    recreate: bool = False,
    pipeline: IngestionPipeline | None = None,
) -> ImportWorldResult:
    """Import ``text`` and materialize it, all inside one unit of work.

    Refused collections are reported as warnings and do not abort the run; any
    exception rolls the whole run back.
    """

    store = load_world(text, translate=translate)
    missing = tuple(kind for kind in REQUIRED_KINDS if not store.has(kind))
    if missing:
        raise IncompleteExportError(missing)

    active_pipeline = pipeline or default_pipeline()
    with unit_of_work_factory() as uow:
        session = ImportSession(
            documents=uow.repositories.documents,
            renderer=renderer,
            city_generator_url=city_generator_url,
            recreate=recreate,
        )
        active_pipeline.run(store, session=session)
        uow.commit()

    burg_urls = {
        burg.i: burg.url
        for burg in session.resolved.burgs
        if burg is not None and burg.url is not None
    }
    return ImportWorldResult(
        header=store.header,
        counts=store.counts(),
        outcomes=tuple(session.outcomes),
        warnings=tuple(session.warnings),
        burg_urls=burg_urls,
    )
