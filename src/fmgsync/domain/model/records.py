"""Typed records parsed from a map export.

Records are immutable snapshots of the source. Every record carries its
positional identifier ``i``; references to other collections are kept as the
raw integer ids found in the export and are only joined by the resolver.
"""

from __future__ import annotations

from dataclasses import dataclass

type Point = tuple[float, float]


@dataclass(frozen=True, slots=True, kw_only=True)
class MapHeader:
    """Metadata from the pipe-delimited first line; absent fields stay ``None``."""

    seed: str | None = None
    width: int | None = None
    height: int | None = None
    version: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Culture:
    i: int
    name: str
    color: str | None = None
    type: str | None = None
    code: str | None = None
    removed: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class Country:
    i: int
    name: str
    full_name: str | None = None
    form: str | None = None
    color: str | None = None
    culture: int = 0
    capital: int = 0
    diplomacy: tuple[str, ...] = ()
    provinces: tuple[int, ...] = ()
    pole: Point | None = None
    urban: float | None = None
    rural: float | None = None
    removed: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class Province:
    i: int
    name: str
    full_name: str | None = None
    form: str | None = None
    color: str | None = None
    state: int = 0
    burg: int = 0
    burgs: tuple[int, ...] = ()
    pole: Point | None = None
    removed: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class Burg:
    i: int
    name: str
    x: float = 0.0
    y: float = 0.0
    population: float | str = 0
    size: float | None = None
    state: int = 0
    culture: int = 0
    capital: bool = False
    coast: bool = False
    citadel: bool = False
    plaza: bool = False
    temple: bool = False
    walls: bool = False
    shanty: bool = False
    removed: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class Religion:
    i: int
    name: str
    color: str | None = None
    type: str | None = None
    form: str | None = None
    deity: str | None = None
    removed: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class River:
    i: int
    name: str = ""
    type: str | None = None
    mouth: int | Point | None = None
    source: int | None = None
    length: float | None = None
    discharge: float | None = None


type Record = Culture | Country | Province | Burg | Religion | River
