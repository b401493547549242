"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import Enum, StrEnum


class EntityKind(StrEnum):
    """Entity collections held by the graph store; values double as template names."""

    CULTURE = "culture"
    COUNTRY = "country"
    PROVINCE = "province"
    BURG = "burg"
    RELIGION = "religion"
    RIVER = "river"


class RecordKind(StrEnum):
    """Outcome of structurally classifying one line of a map export."""

    PROVINCES = "provinces"
    BURGS = "burgs"
    COUNTRIES = "countries"
    RELIGIONS = "religions"
    CULTURES = "cultures"
    RIVERS = "rivers"
    UNRECOGNIZED = "unrecognized"

    @property
    def entity_kind(self) -> EntityKind | None:
        return _ENTITY_KIND_BY_RECORD_KIND.get(self)


_ENTITY_KIND_BY_RECORD_KIND: dict[RecordKind, EntityKind] = {
    RecordKind.PROVINCES: EntityKind.PROVINCE,
    RecordKind.BURGS: EntityKind.BURG,
    RecordKind.COUNTRIES: EntityKind.COUNTRY,
    RecordKind.RELIGIONS: EntityKind.RELIGION,
    RecordKind.CULTURES: EntityKind.CULTURE,
    RecordKind.RIVERS: EntityKind.RIVER,
}


class Permission(StrEnum):
    """Default visibility of a materialized document for non-owners."""

    NONE = "none"
    LIMITED = "limited"
    OBSERVER = "observer"
    OWNER = "owner"


class Unresolved(Enum):
    """Marker for a foreign key that does not resolve inside the batch."""

    UNKNOWN = "unknown"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNKNOWN"


UNKNOWN = Unresolved.UNKNOWN


SENTINEL_HEADED_KINDS: frozenset[EntityKind] = frozenset(
    {EntityKind.CULTURE, EntityKind.COUNTRY, EntityKind.RELIGION}
)

COLLECTION_BY_KIND: dict[EntityKind, str] = {
    EntityKind.CULTURE: "Cultures",
    EntityKind.PROVINCE: "Provinces",
    EntityKind.COUNTRY: "Countries",
    EntityKind.BURG: "Burgs",
}
