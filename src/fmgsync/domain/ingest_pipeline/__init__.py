"""Map import pipeline.

The pipeline splits an import into explicit, testable phases. Each phase
reads the immutable ``EntityGraphStore`` and communicates through a shared
``ImportSession`` created for the run.
"""

from __future__ import annotations

from .classification import ClassifiedExport, classify_export, classify_record, parse_header
from .context import HandleRegistry, ImportSession, ResolvedWorld
from .orchestrator import IngestionPipeline, PipelinePhase
from .resolution import CyclicResolutionPhase, LeafResolutionPhase
from .store import EntityGraphStore

__all__ = [
    "ClassifiedExport",
    "CyclicResolutionPhase",
    "EntityGraphStore",
    "HandleRegistry",
    "ImportSession",
    "IngestionPipeline",
    "LeafResolutionPhase",
    "PipelinePhase",
    "ResolvedWorld",
    "classify_export",
    "classify_record",
    "parse_header",
]
