"""Reconciliation plan types shared by the planner, the engine and callers.

A plan is either a create batch, an update batch, or a refusal carrying an
``IntegrityWarning``; it never mixes creates and updates.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import TYPE_CHECKING

from fmgsync.domain.model import Permission

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID

    from fmgsync.domain.model import DocumentRecord, EntityKind, MaterializedIdentity


class ReconciliationStrategy(StrEnum):
    CREATE = "create"
    UPDATE = "update"
    REFUSED = "refused"


@dataclass(frozen=True, slots=True, kw_only=True)
class IntegrityWarning:
    """Prior and new collections cannot be paired positionally."""

    collection: str
    expected: int
    actual: int
    reason: str
    first_mismatch: int | None = None

    @property
    def message(self) -> str:
        detail = f"{self.collection}: {self.reason} (stored={self.expected}, new={self.actual}"
        if self.first_mismatch is not None:
            detail += f", first mismatch at position {self.first_mismatch}"
        return detail + "); rerun with a fresh create to rebuild the collection"


@dataclass(frozen=True, slots=True, kw_only=True)
class ReconciliationPlan:
    collection: str
    strategy: ReconciliationStrategy
    creates: tuple[DocumentRecord, ...] = ()
    updates: tuple[tuple[UUID, DocumentRecord], ...] = ()
    warning: IntegrityWarning | None = None

    def __post_init__(self) -> None:
        if self.creates and self.updates:
            raise ValueError("A reconciliation plan cannot both create and update")
        if (self.strategy is ReconciliationStrategy.REFUSED) != (self.warning is not None):
            raise ValueError("Only refused plans carry an integrity warning")


@dataclass(slots=True, kw_only=True)
class ReconciliationOutcome:
    """Result of applying one plan, with identities keyed by positional id."""

    kind: EntityKind
    collection: str
    strategy: ReconciliationStrategy
    identities: dict[int, UUID] = field(default_factory=dict[int, "UUID"])
    warning: IntegrityWarning | None = None

    @property
    def created(self) -> int:
        return len(self.identities) if self.strategy is ReconciliationStrategy.CREATE else 0

    @property
    def updated(self) -> int:
        return len(self.identities) if self.strategy is ReconciliationStrategy.UPDATE else 0


def _ordering_violation(records: Sequence[DocumentRecord]) -> int | None:
    for position in range(1, len(records)):
        if records[position].ordering_key <= records[position - 1].ordering_key:
            return position
    return None


def _first_mismatch(
    prior: Sequence[MaterializedIdentity], records: Sequence[DocumentRecord]
) -> int | None:
    for position, (identity, record) in enumerate(zip(prior, records, strict=True)):
        if identity.ordering_key != record.ordering_key:
            return position
    return None


def plan_reconciliation(
    collection: str,
    prior: Sequence[MaterializedIdentity] | None,
    records: Sequence[DocumentRecord],
) -> ReconciliationPlan:
    """Decide how ``records`` are materialized given the ``prior`` identities.

    ``records`` must be ordered by strictly increasing ordering key. With no
    prior collection every record is created with the default permission;
    otherwise records are paired positionally with the prior identities, which
    is only accepted when counts and ordering keys agree.
    """

    def refuse(reason: str, first_mismatch: int | None = None) -> ReconciliationPlan:
        return ReconciliationPlan(
            collection=collection,
            strategy=ReconciliationStrategy.REFUSED,
            warning=IntegrityWarning(
                collection=collection,
                expected=0 if prior is None else len(prior),
                actual=len(records),
                reason=reason,
                first_mismatch=first_mismatch,
            ),
        )

    violation = _ordering_violation(records)
    if violation is not None:
        return refuse("new records are not in increasing source order", violation)

    if prior is None:
        return ReconciliationPlan(
            collection=collection,
            strategy=ReconciliationStrategy.CREATE,
            creates=tuple(replace(record, permission=Permission.OBSERVER) for record in records),
        )

    if len(prior) != len(records):
        return refuse("entity count changed since the last import")

    mismatch = _first_mismatch(prior, records)
    if mismatch is not None:
        return refuse("entity ordering changed since the last import", mismatch)

    return ReconciliationPlan(
        collection=collection,
        strategy=ReconciliationStrategy.UPDATE,
        updates=tuple(
            (identity.id, replace(record, permission=None))
            for identity, record in zip(prior, records, strict=True)
        ),
    )
