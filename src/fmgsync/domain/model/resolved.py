"""Resolved, denormalized views produced by the cross-reference resolver.

Views wrap the immutable source record and add joined references. A view is
never patched after construction: the second resolution pass builds new
province views with ``dataclasses.replace`` instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .enums import EntityKind, Unresolved
from .records import Burg, Country, Culture, Province

if TYPE_CHECKING:
    from uuid import UUID

    from .records import Record


@dataclass(frozen=True, slots=True)
class EntityRef:
    """Lightweight pointer to another entity of the same batch."""

    kind: EntityKind
    id: int
    name: str


@dataclass(frozen=True, slots=True, kw_only=True)
class BurgSummary:
    """Settlement summary embedded in a province once burgs are materialized."""

    id: int
    name: str
    handle: UUID | None = None
    x: float = 0.0
    y: float = 0.0


type Reference = EntityRef | Unresolved
type OptionalReference = EntityRef | Unresolved | None


@dataclass(frozen=True, slots=True, kw_only=True)
class ResolvedEntity[TRecord: Record]:
    record: TRecord

    @property
    def i(self) -> int:
        return self.record.i

    @property
    def name(self) -> str:
        return self.record.name

    @property
    def removed(self) -> bool:
        return getattr(self.record, "removed", False)


@dataclass(frozen=True, slots=True, kw_only=True)
class ResolvedCulture(ResolvedEntity[Culture]):
    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class ResolvedCountry(ResolvedEntity[Country]):
    culture: OptionalReference = None
    diplomacy: tuple[str, ...] = ()
    provinces: tuple[Reference, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class ResolvedBurg(ResolvedEntity[Burg]):
    index: int
    culture: OptionalReference = None
    country: OptionalReference = None
    province: EntityRef | None = None
    url: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ResolvedProvince(ResolvedEntity[Province]):
    country: OptionalReference = None
    members: tuple[BurgSummary | Unresolved, ...] = ()
    center: BurgSummary | None = None


type ResolvedView = ResolvedCulture | ResolvedCountry | ResolvedBurg | ResolvedProvince
