"""Port for turning raw export elements into typed records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from fmgsync.domain.model import EntityKind, Record


class RecordTranslator(Protocol):
    """Translate one element of a raw collection.

    Returns ``None`` for placeholder elements and raises
    ``MalformedRecordError`` for elements that cannot be parsed.
    """

    def __call__(self, kind: EntityKind, position: int, element: object) -> Record | None: ...
