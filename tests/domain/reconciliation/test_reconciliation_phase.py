from __future__ import annotations

from fmgsync.domain.ingest_pipeline import EntityGraphStore, ImportSession, LeafResolutionPhase
from fmgsync.domain.model import EntityKind
from fmgsync.domain.reconciliation import ReconciliationPhase, ReconciliationStrategy
from fmgsync.domain.reconciliation.phase import visible_countries
from tests.helpers.documents import FakeDocumentStore, RecordingRenderer


def _session(
    store: EntityGraphStore, documents: FakeDocumentStore, renderer: RecordingRenderer
) -> ImportSession:
    session = ImportSession(documents=documents, renderer=renderer)
    LeafResolutionPhase().run(store, session=session)
    return session


def test_phase_names_describe_collection() -> None:
    assert ReconciliationPhase(EntityKind.BURG).name == "reconcile-burg"
    assert ReconciliationPhase(EntityKind.PROVINCE, resync=True).name == "reconcile-province-resync"


def test_phase_registers_handles(
    world_store: EntityGraphStore,
    document_store: FakeDocumentStore,
    renderer: RecordingRenderer,
) -> None:
    session = _session(world_store, document_store, renderer)

    ReconciliationPhase(EntityKind.BURG).run(world_store, session=session)

    handles = session.handles.handles(EntityKind.BURG)
    assert set(handles) == {1, 2, 3}
    assert [document.id for document in document_store.documents("Burgs")] == [
        handles[1],
        handles[2],
        handles[3],
    ]


def test_country_phase_passes_visible_countries(
    world_store: EntityGraphStore,
    document_store: FakeDocumentStore,
    renderer: RecordingRenderer,
) -> None:
    session = _session(world_store, document_store, renderer)

    ReconciliationPhase(EntityKind.COUNTRY).run(world_store, session=session)

    _, _, extras = renderer.calls[0]
    assert extras["countries"] == visible_countries(session.resolved)
    assert extras["handles"] is session.handles


def test_province_phase_is_skipped_without_provinces(
    scenario_store: EntityGraphStore,
    document_store: FakeDocumentStore,
    renderer: RecordingRenderer,
) -> None:
    session = _session(scenario_store, document_store, renderer)

    ReconciliationPhase(EntityKind.PROVINCE).run(scenario_store, session=session)

    assert session.outcomes == []
    assert document_store.list("Provinces") is None


def test_refusal_is_recorded_and_blocks_resync(
    world_store: EntityGraphStore,
    scenario_store: EntityGraphStore,
    document_store: FakeDocumentStore,
    renderer: RecordingRenderer,
) -> None:
    first = _session(world_store, document_store, renderer)
    ReconciliationPhase(EntityKind.CULTURE).run(world_store, session=first)

    session = _session(scenario_store, document_store, renderer)
    session.resolved.has_provinces = True
    ReconciliationPhase(EntityKind.CULTURE).run(scenario_store, session=session)
    session.refused.add(EntityKind.PROVINCE)
    ReconciliationPhase(EntityKind.PROVINCE, resync=True).run(scenario_store, session=session)

    (outcome,) = session.outcomes
    assert outcome.strategy is ReconciliationStrategy.REFUSED
    assert EntityKind.CULTURE in session.refused
    assert session.warnings == [outcome.warning]
    assert session.handles.handles(EntityKind.CULTURE) == {}


def test_refused_burgs_block_province_resync(
    world_store: EntityGraphStore,
    document_store: FakeDocumentStore,
    renderer: RecordingRenderer,
) -> None:
    session = _session(world_store, document_store, renderer)
    ReconciliationPhase(EntityKind.PROVINCE).run(world_store, session=session)
    session.refused.add(EntityKind.BURG)

    ReconciliationPhase(EntityKind.PROVINCE, resync=True).run(world_store, session=session)

    assert len(session.outcomes) == 1
    assert [call[0] for call in document_store.calls] == ["create"]


def test_resync_never_clears(
    world_store: EntityGraphStore,
    document_store: FakeDocumentStore,
    renderer: RecordingRenderer,
) -> None:
    session = _session(world_store, document_store, renderer)
    session.recreate = True

    ReconciliationPhase(EntityKind.PROVINCE).run(world_store, session=session)
    ReconciliationPhase(EntityKind.PROVINCE, resync=True).run(world_store, session=session)

    assert [call[0] for call in document_store.calls] == ["clear", "create", "update"]
