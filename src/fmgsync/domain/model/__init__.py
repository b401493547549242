"""Public domain model surface."""

from __future__ import annotations

from fmgsync.domain.model.document import (
    Document,
    DocumentCollection,
    DocumentRecord,
    MaterializedIdentity,
)
from fmgsync.domain.model.enums import (
    COLLECTION_BY_KIND,
    SENTINEL_HEADED_KINDS,
    UNKNOWN,
    EntityKind,
    Permission,
    RecordKind,
    Unresolved,
)
from fmgsync.domain.model.records import (
    Burg,
    Country,
    Culture,
    MapHeader,
    Province,
    Record,
    Religion,
    River,
)
from fmgsync.domain.model.resolved import (
    BurgSummary,
    EntityRef,
    ResolvedBurg,
    ResolvedCountry,
    ResolvedCulture,
    ResolvedEntity,
    ResolvedProvince,
    ResolvedView,
)

__all__ = [  # noqa: RUF022
    # documents
    "Document",
    "DocumentCollection",
    "DocumentRecord",
    "MaterializedIdentity",
    # enums
    "COLLECTION_BY_KIND",
    "SENTINEL_HEADED_KINDS",
    "UNKNOWN",
    "EntityKind",
    "Permission",
    "RecordKind",
    "Unresolved",
    # records
    "Burg",
    "Country",
    "Culture",
    "MapHeader",
    "Province",
    "Record",
    "Religion",
    "River",
    # resolved views
    "BurgSummary",
    "EntityRef",
    "ResolvedBurg",
    "ResolvedCountry",
    "ResolvedCulture",
    "ResolvedEntity",
    "ResolvedProvince",
    "ResolvedView",
]
