"""Phase-based orchestrator for the map import pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Protocol

from fmgsync.domain.ingest_pipeline.context import ImportSession

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from fmgsync.domain.ingest_pipeline.store import EntityGraphStore

log = getLogger(__name__)


class PipelinePhase(Protocol):
    """Contract implemented by each import phase."""

    name: str

    def run(self, store: EntityGraphStore, *, session: ImportSession) -> None: ...


@dataclass(slots=True)
class IngestionPipeline:
    """Compose and execute the ordered pipeline phases.

    Phases run strictly in sequence; a phase may rely on everything earlier
    phases stored on the session.
    """

    phases: Sequence[PipelinePhase] = field(default_factory=tuple)

    def with_phase(self, phase: PipelinePhase) -> IngestionPipeline:
        """Return a new pipeline appending ``phase`` at the end."""

        return IngestionPipeline(phases=(*self.phases, phase))

    def extend(self, phases: Iterable[PipelinePhase]) -> IngestionPipeline:
        """Return a new pipeline with the provided ``phases`` concatenated."""

        return IngestionPipeline(phases=(*self.phases, *tuple(phases)))

    def run(
        self, store: EntityGraphStore, *, session: ImportSession | None = None
    ) -> ImportSession:
        """Execute the configured phases in-order against ``store``."""

        active_session = session or ImportSession()
        for phase in self.phases:
            log.debug("Running phase %s", phase.name)
            phase.run(store, session=active_session)
        return active_session
