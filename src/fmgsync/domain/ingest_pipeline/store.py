"""Immutable container for the typed collections of one map export."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from types import MappingProxyType
from typing import TYPE_CHECKING

from fmgsync.domain.errors import MalformedRecordError
from fmgsync.domain.model import SENTINEL_HEADED_KINDS, EntityKind, MapHeader

if TYPE_CHECKING:
    from collections.abc import Mapping

    from fmgsync.domain.ingest_pipeline.classification import ClassifiedExport
    from fmgsync.domain.model import Record
    from fmgsync.domain.ports.translation import RecordTranslator

log = getLogger(__name__)

type Collection = tuple[Record | None, ...]


def _empty_collections() -> Mapping[EntityKind, Collection]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class EntityGraphStore:
    """Ordered collections addressable by positional id.

    Positions whose element was malformed or a placeholder (``0`` or ``{}``)
    hold ``None`` so every other record keeps its positional id.
    """

    header: MapHeader = field(default_factory=MapHeader)
    collections: Mapping[EntityKind, Collection] = field(default_factory=_empty_collections)

    @classmethod
    def from_export(
        cls, export: ClassifiedExport, translate: RecordTranslator
    ) -> EntityGraphStore:
        collections: dict[EntityKind, Collection] = {}
        for record_kind, raw in export.collections.items():
            kind = record_kind.entity_kind
            if kind is None:
                continue
            collections[kind] = tuple(
                _translate_element(translate, kind, position, element)
                for position, element in enumerate(raw)
            )
        return cls(header=export.header, collections=MappingProxyType(collections))

    def has(self, kind: EntityKind) -> bool:
        return kind in self.collections

    def all(self, kind: EntityKind) -> Collection:
        return self.collections.get(kind, ())

    def get(self, kind: EntityKind, entity_id: int) -> Record | None:
        collection = self.all(kind)
        if entity_id < 0 or entity_id >= len(collection):
            return None
        return collection[entity_id]

    def leading_sentinel_stripped(self, kind: EntityKind) -> Collection:
        """Return the collection without its dummy head (Culture/Country/Religion)."""

        if kind not in SENTINEL_HEADED_KINDS:
            raise ValueError(f"{kind} collections have no leading sentinel")
        return self.all(kind)[1:]

    def counts(self) -> dict[EntityKind, int]:
        return {
            kind: sum(record is not None for record in collection)
            for kind, collection in self.collections.items()
        }


def _translate_element(
    translate: RecordTranslator, kind: EntityKind, position: int, element: object
) -> Record | None:
    try:
        return translate(kind, position, element)
    except MalformedRecordError as exc:
        log.warning("Skipping record: %s", exc)
        return None
