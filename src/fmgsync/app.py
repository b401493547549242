"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from fmgsync.adapters.fmg import read_map_text, translate_record
from fmgsync.adapters.rendering import TemplateRenderer
from fmgsync.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyWorldUnitOfWork,
    is_started,
    startup,
)
from fmgsync.config import get_city_generator_config
from fmgsync.domain.ingest_pipeline import EntityGraphStore, classify_export
from fmgsync.domain.ports.unit_of_work import WorldUnitOfWork
from fmgsync.domain.world_import import ImportWorldResult, import_world

if TYPE_CHECKING:
    from pathlib import Path

    from fmgsync.domain.model import EntityKind, MapHeader
    from fmgsync.domain.ports import Renderer

UnitOfWorkFactory = Callable[[], WorldUnitOfWork]


log = getLogger(__name__)


@dataclass(slots=True)
class MapSummary:
    """Header and per-kind record counts of an export, without side effects."""

    header: MapHeader
    counts: dict[EntityKind, int]
    duplicates: tuple[str, ...] = ()
    skipped_lines: int = 0


def import_map_file(
    path: Path,
    *,
    recreate: bool = False,
    generator_url: str | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    renderer: Renderer | None = None,
) -> ImportWorldResult:
    """Import the map export at ``path`` into the configured document store."""

    if unit_of_work_factory is None and not is_started():
        startup()
    effective_uow = unit_of_work_factory or SqlAlchemyWorldUnitOfWork
    generator = get_city_generator_config(base_url=generator_url)
    log.info(
        "Starting map import: path=%s, recreate=%s, generator=%s",
        path,
        recreate,
        generator.base_url,
    )

    result = import_world(
        read_map_text(path),
        translate=translate_record,
        unit_of_work_factory=effective_uow,
        renderer=renderer or TemplateRenderer(),
        city_generator_url=generator.base_url,
        recreate=recreate,
    )

    for outcome in result.outcomes:
        log.info(
            f"{outcome.collection}: strategy={outcome.strategy}, "
            f"created={outcome.created}, updated={outcome.updated}"
        )
    log.info(f"Finished map import: seed={result.header.seed}, warnings={len(result.warnings)}")
    return result


def inspect_map_file(path: Path) -> MapSummary:
    """Classify the export at ``path`` and count its records."""

    export = classify_export(read_map_text(path))
    store = EntityGraphStore.from_export(export, translate_record)
    return MapSummary(
        header=store.header,
        counts=store.counts(),
        duplicates=tuple(str(kind) for kind in export.duplicates),
        skipped_lines=export.skipped_lines,
    )
