"""Public interface for the map export adapter."""

from __future__ import annotations

from .reader import read_map_text
from .schema import (
    BurgPayload,
    CountryPayload,
    CulturePayload,
    ProvincePayload,
    ReligionPayload,
    RiverPayload,
)
from .translator import translate_record

__all__ = [
    "BurgPayload",
    "CountryPayload",
    "CulturePayload",
    "ProvincePayload",
    "ReligionPayload",
    "RiverPayload",
    "read_map_text",
    "translate_record",
]
