"""Render resolved views into HTML document bodies with ``string.Template``."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from html import escape
from logging import getLogger
from typing import TYPE_CHECKING, Final

from fmgsync.domain.burg_urls import population_value
from fmgsync.domain.ingest_pipeline.context import HandleRegistry
from fmgsync.domain.model import (
    BurgSummary,
    EntityKind,
    ResolvedBurg,
    ResolvedCountry,
    ResolvedCulture,
    ResolvedProvince,
    Unresolved,
)

from .templates import DEFAULT_TEMPLATES

if TYPE_CHECKING:
    from string import Template
    from uuid import UUID

    from fmgsync.domain.model import ResolvedView
    from fmgsync.domain.model.resolved import OptionalReference

log = getLogger(__name__)

UNKNOWN_LABEL: Final[str] = "Unknown"
NONE_LABEL: Final[str] = "None"
EMPTY_ITEM: Final[str] = "  <li>None</li>"


def document_link(handle: UUID | None, name: str) -> str:
    """Cross-link to a materialized document, or the plain name without a handle."""

    label = escape(name)
    if handle is None:
        return label
    return f"@Document[{handle}]{{{label}}}"


def _text(value: object) -> str:
    if value is None or value == "":
        return NONE_LABEL
    return escape(str(value))


def _reference(ref: OptionalReference, handles: HandleRegistry) -> str:
    if ref is None:
        return NONE_LABEL
    if isinstance(ref, Unresolved):
        return UNKNOWN_LABEL
    return document_link(handles.handle_for(ref.kind, ref.id), ref.name)


def _summary(summary: BurgSummary | Unresolved | None) -> str:
    if summary is None:
        return NONE_LABEL
    if isinstance(summary, Unresolved):
        return UNKNOWN_LABEL
    return document_link(summary.handle, summary.name)


def _items(entries: Sequence[str]) -> str:
    if not entries:
        return EMPTY_ITEM
    return "\n".join(f"  <li>{entry}</li>" for entry in entries)


def _handles(extras: Mapping[str, object]) -> HandleRegistry:
    handles = extras.get("handles")
    if isinstance(handles, HandleRegistry):
        return handles
    return HandleRegistry()


def _countries(extras: Mapping[str, object]) -> Sequence[ResolvedCountry]:
    countries = extras.get("countries")
    if isinstance(countries, Sequence):
        return [country for country in countries if isinstance(country, ResolvedCountry)]
    return ()


def _culture_context(entity: ResolvedCulture) -> dict[str, str]:
    record = entity.record
    return {
        "name": _text(record.name),
        "color": _text(record.color),
        "type": _text(record.type),
        "code": _text(record.code),
    }


def _diplomacy(
    entity: ResolvedCountry, countries: Sequence[ResolvedCountry], handles: HandleRegistry
) -> list[str]:
    # filtered statuses line up with the visible countries minus the sentinel and itself
    others = [other for other in countries if other.i not in (0, entity.i)]
    entries: list[str] = []
    for other, status in zip(others, entity.diplomacy, strict=False):
        link = document_link(handles.handle_for(EntityKind.COUNTRY, other.i), other.name)
        entries.append(f"{link}: {escape(status)}")
    return entries


def _country_context(entity: ResolvedCountry, extras: Mapping[str, object]) -> dict[str, str]:
    record = entity.record
    handles = _handles(extras)
    return {
        "full_name": _text(record.full_name or record.name),
        "color": _text(record.color),
        "form": _text(record.form),
        "culture": _reference(entity.culture, handles),
        "urban": _text(record.urban),
        "rural": _text(record.rural),
        "provinces": _items([_reference(ref, handles) for ref in entity.provinces]),
        "diplomacy": _items(_diplomacy(entity, _countries(extras), handles)),
    }


def _province_context(entity: ResolvedProvince, extras: Mapping[str, object]) -> dict[str, str]:
    record = entity.record
    handles = _handles(extras)
    return {
        "full_name": _text(record.full_name or record.name),
        "color": _text(record.color),
        "form": _text(record.form),
        "country": _reference(entity.country, handles),
        "center": _summary(entity.center),
        "members": _items([_summary(member) for member in entity.members]),
    }


def _features(entity: ResolvedBurg) -> str:
    record = entity.record
    features = [
        label
        for label, present in (
            ("capital", record.capital),
            ("port", record.coast),
            ("citadel", record.citadel),
            ("plaza", record.plaza),
            ("temple", record.temple),
            ("walls", record.walls),
            ("shanty town", record.shanty),
        )
        if present
    ]
    return ", ".join(features) or NONE_LABEL


def _burg_context(entity: ResolvedBurg, extras: Mapping[str, object]) -> dict[str, str]:
    record = entity.record
    handles = _handles(extras)
    city_map = (
        f'<a href="{escape(entity.url)}">City map</a>' if entity.url else "No city map available"
    )
    return {
        "name": _text(record.name),
        "country": _reference(entity.country, handles),
        "province": _reference(entity.province, handles),
        "culture": _reference(entity.culture, handles),
        "population": _text(population_value(record.population)),
        "x": _text(record.x),
        "y": _text(record.y),
        "features": _features(entity),
        "city_map": city_map,
    }


class TemplateRenderer:
    """Renderer port implementation backed by ``string.Template`` bodies."""

    def __init__(self, templates: Mapping[str, Template] | None = None) -> None:
        self._templates = dict(DEFAULT_TEMPLATES if templates is None else templates)

    def __call__(
        self, template_name: str, entity: ResolvedView, extras: Mapping[str, object]
    ) -> str:
        template = self._templates.get(template_name)
        if template is None:
            raise ValueError(f"Unknown template {template_name!r}")
        log.debug("Rendering %s %s with template %s", type(entity).__name__, entity.i, template_name)
        return template.substitute(self._context(entity, extras)).strip()

    @staticmethod
    def _context(entity: ResolvedView, extras: Mapping[str, object]) -> dict[str, str]:
        match entity:
            case ResolvedCulture():
                return _culture_context(entity)
            case ResolvedCountry():
                return _country_context(entity, extras)
            case ResolvedProvince():
                return _province_context(entity, extras)
            case ResolvedBurg():
                return _burg_context(entity, extras)
