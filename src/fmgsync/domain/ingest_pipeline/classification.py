"""Structural classification of map export lines.

The export carries no schema tag and its line order is not contractually
fixed, so every line is parsed permissively and typed by inspecting fields of
its first two elements. The checks overlap, which makes the order of
``DECISION_TABLE`` significant: the first matching row wins.
"""

from __future__ import annotations

import json
import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from logging import getLogger
from typing import Final, cast

from fmgsync.domain.model import MapHeader, RecordKind

log = getLogger(__name__)

_LINE_BREAKS: Final = re.compile(r"[\r\n]+")

HEADER_SEPARATOR: Final[str] = "|"
HEADER_VERSION_FIELD: Final[int] = 0
HEADER_SEED_FIELD: Final[int] = 3
HEADER_WIDTH_FIELD: Final[int] = 4
HEADER_HEIGHT_FIELD: Final[int] = 5

RELIGION_SENTINEL_NAME: Final[str] = "No religion"
CULTURE_SENTINEL_NAME: Final[str] = "Wildlands"

type RawCollection = list[object]
type Predicate = Callable[[RawCollection], bool]


def _element(parsed: RawCollection, index: int) -> Mapping[str, object] | None:
    if len(parsed) <= index:
        return None
    element = parsed[index]
    if not isinstance(element, Mapping):
        return None
    return cast(Mapping[str, object], element)


def _has_fields(index: int, *present: str, absent: Sequence[str] = ()) -> Predicate:
    def predicate(parsed: RawCollection) -> bool:
        element = _element(parsed, index)
        if element is None:
            return False
        return all(name in element for name in present) and not any(
            name in element for name in absent
        )

    return predicate


def _named(index: int, name: str) -> Predicate:
    def predicate(parsed: RawCollection) -> bool:
        element = _element(parsed, index)
        return element is not None and element.get("name") == name

    return predicate


DECISION_TABLE: Final[tuple[tuple[Predicate, RecordKind], ...]] = (
    (_has_fields(1, "state", absent=("cell",)), RecordKind.PROVINCES),
    (_has_fields(1, "population", "citadel"), RecordKind.BURGS),
    (_has_fields(0, "diplomacy"), RecordKind.COUNTRIES),
    (_named(0, RELIGION_SENTINEL_NAME), RecordKind.RELIGIONS),
    (_named(0, CULTURE_SENTINEL_NAME), RecordKind.CULTURES),
    (_has_fields(0, "mouth"), RecordKind.RIVERS),
)


def classify_record(parsed: object) -> RecordKind:
    """Return the record kind of one parsed line (``UNRECOGNIZED`` if none match)."""

    if not isinstance(parsed, list):
        return RecordKind.UNRECOGNIZED
    collection = cast(RawCollection, parsed)
    for predicate, kind in DECISION_TABLE:
        if predicate(collection):
            return kind
    return RecordKind.UNRECOGNIZED


def split_lines(text: str) -> list[str]:
    """Split on runs of CR/LF characters, so blank lines collapse."""

    return _LINE_BREAKS.split(text)


def _field(fields: Sequence[str], index: int) -> str | None:
    if len(fields) <= index:
        return None
    value = fields[index].strip()
    return value or None


def _int_field(fields: Sequence[str], index: int) -> int | None:
    value = _field(fields, index)
    if value is None:
        return None
    try:
        return int(float(value))
    except (ValueError, OverflowError):
        log.warning("Ignoring non-numeric header field %s: %r", index, value)
        return None


def parse_header(line: str) -> MapHeader:
    """Parse the pipe-delimited header; absent fields are left as ``None``."""

    fields = line.split(HEADER_SEPARATOR)
    return MapHeader(
        version=_field(fields, HEADER_VERSION_FIELD),
        seed=_field(fields, HEADER_SEED_FIELD),
        width=_int_field(fields, HEADER_WIDTH_FIELD),
        height=_int_field(fields, HEADER_HEIGHT_FIELD),
    )


@dataclass(slots=True)
class ClassifiedExport:
    """Header plus the raw array found for each recognised record kind."""

    header: MapHeader
    collections: dict[RecordKind, RawCollection] = field(
        default_factory=dict[RecordKind, RawCollection]
    )
    duplicates: list[RecordKind] = field(default_factory=list[RecordKind])
    skipped_lines: int = 0

    def collection(self, kind: RecordKind) -> RawCollection | None:
        return self.collections.get(kind)


def _parse_line(line: str) -> object | None:
    try:
        return json.loads(line)
    except (ValueError, RecursionError):
        return None


def classify_export(text: str) -> ClassifiedExport:
    """Classify every structured line of ``text``.

    Lines that are not JSON, or JSON that matches no row of the decision table,
    are noise and are skipped. When two lines classify to the same kind the
    later one wins and the kind is recorded in ``duplicates``.
    """

    lines = split_lines(text)
    export = ClassifiedExport(header=parse_header(lines[0]))

    for number, line in enumerate(lines[1:], start=1):
        parsed = _parse_line(line)
        kind = RecordKind.UNRECOGNIZED if parsed is None else classify_record(parsed)
        if kind is RecordKind.UNRECOGNIZED:
            log.debug("Skipping line %s: not a map collection", number)
            export.skipped_lines += 1
            continue
        if kind in export.collections:
            log.warning(
                "Line %s repeats already classified %s; keeping the later one", number, kind
            )
            export.duplicates.append(kind)
        log.debug("Line %s classified as %s", number, kind)
        export.collections[kind] = cast(RawCollection, parsed)

    log.info(
        "Classified export: kinds=%s, skipped_lines=%s",
        sorted(str(kind) for kind in export.collections),
        export.skipped_lines,
    )
    return export
