"""Translate raw export elements into domain records."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from logging import getLogger
from typing import Any, cast

from pydantic import ValidationError

from fmgsync.domain.errors import MalformedRecordError
from fmgsync.domain.model import (
    Burg,
    Country,
    Culture,
    EntityKind,
    Province,
    Record,
    Religion,
    River,
)
from fmgsync.domain.model.records import Point

from .schema import (
    BurgPayload,
    CountryPayload,
    CulturePayload,
    FmgBaseModel,
    ProvincePayload,
    ReligionPayload,
    RiverPayload,
)

log = getLogger(__name__)


def _point(values: list[float] | None) -> Point | None:
    if values is None or len(values) < 2:  # noqa: PLR2004
        return None
    return (values[0], values[1])


def _culture(payload: CulturePayload, i: int) -> Culture:
    return Culture(
        i=i,
        name=payload.name,
        color=payload.color,
        type=payload.type,
        code=payload.code,
        removed=payload.removed,
    )


def _country(payload: CountryPayload, i: int) -> Country:
    return Country(
        i=i,
        name=payload.name,
        full_name=payload.full_name,
        form=payload.form,
        color=payload.color,
        culture=payload.culture,
        capital=payload.capital,
        diplomacy=tuple(payload.diplomacy),
        provinces=tuple(payload.provinces),
        pole=_point(payload.pole),
        urban=payload.urban,
        rural=payload.rural,
        removed=payload.removed,
    )


def _province(payload: ProvincePayload, i: int) -> Province:
    return Province(
        i=i,
        name=payload.name,
        full_name=payload.full_name,
        form=payload.form,
        color=payload.color,
        state=payload.state,
        burg=payload.burg,
        burgs=tuple(payload.burgs),
        pole=_point(payload.pole),
        removed=payload.removed,
    )


def _burg(payload: BurgPayload, i: int) -> Burg:
    return Burg(
        i=i,
        name=payload.name,
        x=payload.x,
        y=payload.y,
        population=payload.population,
        size=payload.size,
        state=payload.state,
        culture=payload.culture,
        capital=payload.capital,
        coast=payload.is_coastal,
        citadel=payload.citadel,
        plaza=payload.plaza,
        temple=payload.temple,
        walls=payload.walls,
        shanty=payload.shanty,
        removed=payload.removed,
    )


def _religion(payload: ReligionPayload, i: int) -> Religion:
    return Religion(
        i=i,
        name=payload.name,
        color=payload.color,
        type=payload.type,
        form=payload.form,
        deity=payload.deity,
        removed=payload.removed,
    )


def _river(payload: RiverPayload, i: int) -> River:
    mouth = _point(payload.mouth) if isinstance(payload.mouth, list) else payload.mouth
    return River(
        i=i,
        name=payload.name,
        type=payload.type,
        mouth=mouth,
        source=payload.source,
        length=payload.length,
        discharge=payload.discharge,
    )


type _Builder = tuple[type[FmgBaseModel], Callable[[Any, int], Record]]

_BUILDERS: dict[EntityKind, _Builder] = {
    EntityKind.CULTURE: (CulturePayload, _culture),
    EntityKind.COUNTRY: (CountryPayload, _country),
    EntityKind.PROVINCE: (ProvincePayload, _province),
    EntityKind.BURG: (BurgPayload, _burg),
    EntityKind.RELIGION: (ReligionPayload, _religion),
    EntityKind.RIVER: (RiverPayload, _river),
}


def _describe(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "record"
    return f"{location}: {first['msg']}"


def translate_record(kind: EntityKind, position: int, element: object) -> Record | None:
    """Translate one element; placeholders (``0``, ``{}``) yield ``None``.

    The identifier is always ``position``; province member lists and store
    lookups are positional, so a conflicting declared ``i`` is logged and ignored.
    """

    if not isinstance(element, Mapping):
        if element in (0, None):
            return None
        raise MalformedRecordError(kind, position, f"expected an object, got {element!r}")
    mapping = cast(Mapping[str, object], element)
    if not mapping:
        return None

    payload_type, build = _BUILDERS[kind]
    try:
        payload = payload_type.model_validate(mapping)
    except ValidationError as exc:
        raise MalformedRecordError(kind, position, _describe(exc)) from exc

    if payload.i is not None and payload.i != position:
        log.warning(
            "%s at position %s declares i=%s; using the position", kind, position, payload.i
        )
    return build(payload, position)
