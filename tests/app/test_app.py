from __future__ import annotations

from pathlib import Path  # noqa: TC003

from fmgsync.app import import_map_file, inspect_map_file
from fmgsync.domain.model import EntityKind
from tests.helpers.documents import FakeDocumentStore, FakeWorldUnitOfWork, RecordingRenderer
from tests.helpers.map_exports import export_text, world_cultures, world_export


def test_inspect_map_file_counts_records(tmp_path: Path) -> None:
    path = tmp_path / "world.map"
    path.write_text(export_text(world_cultures(), world_cultures()), encoding="utf-8")

    summary = inspect_map_file(path)

    assert summary.header.seed == "SEED1"
    assert summary.counts == {EntityKind.CULTURE: 3}
    assert summary.duplicates == ("cultures",)


def test_import_map_file_uses_injected_adapters(tmp_path: Path) -> None:
    path = tmp_path / "world.map"
    path.write_text(world_export(), encoding="utf-8")
    documents = FakeDocumentStore()
    uow = FakeWorldUnitOfWork(documents)

    result = import_map_file(
        path,
        generator_url="https://cities.example/",
        unit_of_work_factory=lambda: uow,
        renderer=RecordingRenderer(),
    )

    assert result.ok
    assert uow.committed
    assert result.burg_urls[1].startswith("https://cities.example/?")
    assert documents.names("Countries") == ["Vostria", "Karth"]
