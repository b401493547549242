"""Reconciliation of resolved collections against previously materialized documents.

Flow per collection:
1) drop sentinel, removed and unparsed entities
2) render a document record per entity
3) plan a create batch, an update batch, or a refusal
4) apply the plan through the ``DocumentStore`` port
"""

from __future__ import annotations

from .engine import ReconciliationEngine, emit_eligible
from .phase import ReconciliationPhase
from .plan import (
    IntegrityWarning,
    ReconciliationOutcome,
    ReconciliationPlan,
    ReconciliationStrategy,
    plan_reconciliation,
)

__all__ = [
    "IntegrityWarning",
    "ReconciliationEngine",
    "ReconciliationOutcome",
    "ReconciliationPhase",
    "ReconciliationPlan",
    "ReconciliationStrategy",
    "emit_eligible",
    "plan_reconciliation",
]
