"""Errors raised while importing a map export."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fmgsync.domain.model import EntityKind


class WorldImportError(RuntimeError):
    """Base class for map import failures."""


class IncompleteExportError(WorldImportError):
    """Raised when a required collection is missing from the export."""

    def __init__(self, missing: tuple[EntityKind, ...]) -> None:
        self.missing = missing
        names = ", ".join(str(kind) for kind in missing)
        super().__init__(f"Map export is missing required collections: {names}")


class MissingHeaderFieldError(WorldImportError, ValueError):
    """Raised when a derivation needs a header field the export did not provide."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"Map header has no {field_name}")


class MalformedRecordError(WorldImportError, ValueError):
    """Raised when a raw collection element cannot be turned into a record."""

    def __init__(self, kind: EntityKind, position: int, reason: str) -> None:
        self.kind = kind
        self.position = position
        super().__init__(f"Malformed {kind} record at position {position}: {reason}")
