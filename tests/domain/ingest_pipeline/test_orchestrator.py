from __future__ import annotations

from dataclasses import dataclass

from fmgsync.domain.ingest_pipeline import EntityGraphStore, ImportSession
from fmgsync.domain.ingest_pipeline.orchestrator import IngestionPipeline, PipelinePhase


@dataclass(slots=True)
class _RecordingPhase(PipelinePhase):
    name: str
    calls: list[str]

    def run(self, store: EntityGraphStore, *, session: ImportSession) -> None:
        _ = (store, session)
        self.calls.append(self.name)


def test_pipeline_runs_phases_in_order() -> None:
    calls: list[str] = []
    first = _RecordingPhase(name="first", calls=calls)
    second = _RecordingPhase(name="second", calls=calls)
    pipeline = IngestionPipeline(phases=(first, second))

    pipeline.run(EntityGraphStore(), session=ImportSession())

    assert calls == ["first", "second"]


def test_pipeline_creates_session_when_missing() -> None:
    session = IngestionPipeline().run(EntityGraphStore())

    assert isinstance(session, ImportSession)
    assert session.outcomes == []


def test_with_phase_and_extend_return_new_pipelines() -> None:
    calls: list[str] = []
    base = IngestionPipeline()
    extended = base.with_phase(_RecordingPhase(name="a", calls=calls)).extend(
        [_RecordingPhase(name="b", calls=calls), _RecordingPhase(name="c", calls=calls)]
    )

    extended.run(EntityGraphStore())

    assert base.phases == ()
    assert calls == ["a", "b", "c"]
