"""Two-pass cross-reference resolution.

Countries list their provinces, provinces point back at their state and list
their burgs, and burgs point at their state. Instead of resolving that cycle
recursively, every entity is addressed by integer id into the flat
collections of the ``EntityGraphStore``:

* pass 1 (``LeafResolutionPhase``) joins cultures and states, builds the
  burg -> province inverse index and generates burg URLs;
* pass 2 (``CyclicResolutionPhase``) runs after burgs are materialized and
  rebuilds province views with burg summaries carrying document handles.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from logging import getLogger
from typing import TYPE_CHECKING, Final

from fmgsync.domain.burg_urls import generate_burg_url
from fmgsync.domain.errors import MissingHeaderFieldError
from fmgsync.domain.model import (
    SENTINEL_HEADED_KINDS,
    UNKNOWN,
    Burg,
    BurgSummary,
    Country,
    Culture,
    EntityKind,
    EntityRef,
    Province,
    ResolvedBurg,
    ResolvedCountry,
    ResolvedCulture,
    ResolvedProvince,
    Unresolved,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from fmgsync.domain.ingest_pipeline.context import HandleRegistry, ImportSession
    from fmgsync.domain.ingest_pipeline.store import EntityGraphStore
    from fmgsync.domain.model import Record
    from fmgsync.domain.model.resolved import OptionalReference, Reference

log = getLogger(__name__)

REMOVED_COUNTRY_PLACEHOLDER: Final[str] = "x"
NO_REFERENCE: Final[int] = 0

_RESOLUTION_ERRORS = (LookupError, TypeError, ValueError)


def lookup(store: EntityGraphStore, kind: EntityKind, entity_id: int) -> Record | None:
    """Find ``entity_id`` in ``kind``, 1-based past the sentinel where there is one."""

    if kind not in SENTINEL_HEADED_KINDS:
        return store.get(kind, entity_id)
    stripped = store.leading_sentinel_stripped(kind)
    if entity_id < 1 or entity_id > len(stripped):
        return None
    return stripped[entity_id - 1]


def reference(store: EntityGraphStore, kind: EntityKind, entity_id: int) -> Reference:
    record = lookup(store, kind, entity_id)
    if record is None:
        return UNKNOWN
    return EntityRef(kind=kind, id=record.i, name=record.name)


def optional_reference(
    store: EntityGraphStore, kind: EntityKind, entity_id: int
) -> OptionalReference:
    """Like ``reference`` but id 0 (the sentinel) means "no reference"."""

    if entity_id == NO_REFERENCE:
        return None
    return reference(store, kind, entity_id)


def province_index(store: EntityGraphStore) -> dict[int, Province]:
    """Map every burg id to the province whose member list contains it."""

    index: dict[int, Province] = {}
    for province in store.all(EntityKind.PROVINCE):
        if not isinstance(province, Province):
            continue
        for burg_id in province.burgs:
            owner = index.setdefault(burg_id, province)
            if owner is not province:
                log.warning(
                    "Burg %s listed by provinces %s and %s; keeping %s",
                    burg_id,
                    owner.i,
                    province.i,
                    owner.i,
                )
    return index


def burg_summary(
    store: EntityGraphStore, burg_id: int, handles: HandleRegistry
) -> BurgSummary | Unresolved:
    burg = store.get(EntityKind.BURG, burg_id)
    if not isinstance(burg, Burg):
        return UNKNOWN
    return BurgSummary(
        id=burg.i,
        name=burg.name,
        handle=handles.handle_for(EntityKind.BURG, burg.i),
        x=burg.x,
        y=burg.y,
    )


def _resolve_each[TRecord: Record, TView](
    store: EntityGraphStore,
    kind: EntityKind,
    record_type: type[TRecord],
    resolve: Callable[[int, TRecord], TView],
) -> tuple[TView | None, ...]:
    views: list[TView | None] = []
    for position, record in enumerate(store.all(kind)):
        if not isinstance(record, record_type):
            views.append(None)
            continue
        try:
            views.append(resolve(position, record))
        except _RESOLUTION_ERRORS:
            log.warning("Could not resolve %s %s", kind, position, exc_info=True)
            views.append(None)
    return tuple(views)


@dataclass(slots=True)
class LeafResolutionPhase:
    """Pass 1: joins that do not depend on materialized documents."""

    name: str = "leaf-resolution"

    def run(self, store: EntityGraphStore, *, session: ImportSession) -> None:
        has_provinces = store.has(EntityKind.PROVINCE)
        provinces_by_burg = province_index(store) if has_provinces else {}

        def resolve_country(_position: int, country: Country) -> ResolvedCountry:
            provinces: tuple[Reference, ...] = ()
            if has_provinces:
                provinces = tuple(
                    reference(store, EntityKind.PROVINCE, province_id)
                    for province_id in country.provinces
                )
            return ResolvedCountry(
                record=country,
                culture=optional_reference(store, EntityKind.CULTURE, country.culture),
                diplomacy=tuple(
                    status
                    for status in country.diplomacy
                    if status != REMOVED_COUNTRY_PLACEHOLDER
                ),
                provinces=provinces,
            )

        def resolve_burg(position: int, burg: Burg) -> ResolvedBurg:
            owner = provinces_by_burg.get(burg.i)
            return ResolvedBurg(
                record=burg,
                index=position,
                culture=optional_reference(store, EntityKind.CULTURE, burg.culture),
                country=optional_reference(store, EntityKind.COUNTRY, burg.state),
                province=(
                    None
                    if owner is None
                    else EntityRef(kind=EntityKind.PROVINCE, id=owner.i, name=owner.name)
                ),
                url=self._burg_url(store, session, burg, position),
            )

        def resolve_province(_position: int, province: Province) -> ResolvedProvince:
            return ResolvedProvince(
                record=province,
                country=optional_reference(store, EntityKind.COUNTRY, province.state),
            )

        resolved = session.resolved
        resolved.has_provinces = has_provinces
        resolved.cultures = _resolve_each(
            store,
            EntityKind.CULTURE,
            Culture,
            lambda _position, culture: ResolvedCulture(record=culture),
        )
        resolved.countries = _resolve_each(store, EntityKind.COUNTRY, Country, resolve_country)
        resolved.burgs = _resolve_each(store, EntityKind.BURG, Burg, resolve_burg)
        resolved.provinces = _resolve_each(
            store, EntityKind.PROVINCE, Province, resolve_province
        )

        if session.failed_urls:
            log.warning("No generator URL for %s burgs (map seed missing)", session.failed_urls)
        log.info(
            "Pass 1 resolved: cultures=%s, countries=%s, burgs=%s, provinces=%s",
            len(resolved.cultures),
            len(resolved.countries),
            len(resolved.burgs),
            len(resolved.provinces),
        )

    @staticmethod
    def _burg_url(
        store: EntityGraphStore, session: ImportSession, burg: Burg, position: int
    ) -> str | None:
        try:
            return generate_burg_url(
                burg,
                position,
                seed=store.header.seed,
                base_url=session.city_generator_url,
            )
        except MissingHeaderFieldError:
            session.failed_urls += 1
            return None


@dataclass(slots=True)
class CyclicResolutionPhase:
    """Pass 2: rebuild province views with fully joined burg summaries."""

    name: str = "cyclic-resolution"

    def run(self, store: EntityGraphStore, *, session: ImportSession) -> None:
        resolved = session.resolved
        if not resolved.has_provinces:
            log.info("Export has no provinces; skipping pass 2")
            return

        rebuilt: list[ResolvedProvince | None] = []
        for view in resolved.provinces:
            if view is None:
                rebuilt.append(None)
                continue
            try:
                rebuilt.append(self._rebuild(store, session.handles, view))
            except _RESOLUTION_ERRORS:
                log.warning("Could not rebuild province %s", view.i, exc_info=True)
                rebuilt.append(view)
        resolved.provinces = tuple(rebuilt)
        log.info("Pass 2 rebuilt %s provinces", sum(view is not None for view in rebuilt))

    @staticmethod
    def _rebuild(
        store: EntityGraphStore, handles: HandleRegistry, view: ResolvedProvince
    ) -> ResolvedProvince:
        province = view.record
        center: BurgSummary | None = None
        if province.burg != NO_REFERENCE:
            summary = burg_summary(store, province.burg, handles)
            if isinstance(summary, BurgSummary):
                center = summary
            else:
                log.debug("Province %s names unknown burg %s", province.i, province.burg)
        return replace(
            view,
            country=optional_reference(store, EntityKind.COUNTRY, province.state),
            members=tuple(burg_summary(store, burg_id, handles) for burg_id in province.burgs),
            center=center,
        )
