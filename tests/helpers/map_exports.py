"""Builders for map export texts used across the test-suite."""

from __future__ import annotations

import json
from typing import Any

SEED = "SEED1"
HEADER = f"x|y|z|{SEED}|2000|1500|extra"


def export_text(*lines: object, header: str = HEADER) -> str:
    """Serialize the collections (or raw strings) into a map export, header first."""

    body = [line if isinstance(line, str) else json.dumps(line) for line in lines]
    return "\n".join([header, *body])


def scenario_cultures() -> list[Any]:
    return [{"i": 0, "name": "Wildlands"}, {"i": 1, "name": "Elves", "type": "Generic"}]


def scenario_countries() -> list[Any]:
    return [
        {"i": 0, "name": "Neutrals", "diplomacy": ["x", "x"]},
        {"i": 1, "name": "Vostria", "culture": 1, "diplomacy": ["x", "x"], "provinces": []},
    ]


def scenario_burgs() -> list[Any]:
    return [
        {},
        {
            "i": 1,
            "name": "Ashford",
            "cell": 42,
            "x": 120.5,
            "y": 80.25,
            "state": 1,
            "culture": 1,
            "population": "12.500",
            "citadel": 1,
            "plaza": 1,
            "temple": 0,
            "walls": 1,
            "shanty": 0,
            "port": 0,
        },
    ]


def scenario_export() -> str:
    """Smallest complete world: one culture, one country and one burg."""

    return export_text(scenario_cultures(), scenario_countries(), scenario_burgs())


def world_cultures() -> list[Any]:
    return [
        {"i": 0, "name": "Wildlands"},
        {"i": 1, "name": "Elves", "type": "Generic", "code": "El", "color": "#aa5500"},
        {"i": 2, "name": "Dwarves", "type": "Highland", "code": "Dw", "color": "#555555"},
    ]


def world_countries() -> list[Any]:
    return [
        {"i": 0, "name": "Neutrals", "diplomacy": ["x", "x", "x"]},
        {
            "i": 1,
            "name": "Vostria",
            "fullName": "Kingdom of Vostria",
            "formName": "Kingdom",
            "color": "#3366cc",
            "culture": 1,
            "capital": 1,
            "provinces": [1, 2],
            "diplomacy": ["x", "x", "Ally"],
            "urban": 15.7,
            "rural": 40.2,
        },
        {
            "i": 2,
            "name": "Karth",
            "fullName": "Karth Hold",
            "formName": "Hold",
            "culture": 2,
            "capital": 3,
            "provinces": [3],
            "diplomacy": ["x", "Ally", "x"],
        },
    ]


def world_provinces() -> list[Any]:
    return [
        0,
        {"i": 1, "name": "Northmarch", "fullName": "March of North", "state": 1, "burg": 1,
         "burgs": [1, 2]},
        {"i": 2, "name": "Southvale", "state": 1, "burg": 0, "burgs": []},
        {"i": 3, "name": "Karthmoor", "state": 2, "burg": 3, "burgs": [3]},
    ]


def world_burgs() -> list[Any]:
    return [
        {},
        {
            "i": 1,
            "name": "Ashford",
            "cell": 42,
            "x": 120.5,
            "y": 80.25,
            "state": 1,
            "culture": 1,
            "population": "12.500",
            "capital": 1,
            "port": 3,
            "citadel": 1,
            "plaza": 1,
            "temple": 1,
            "walls": 1,
            "shanty": 0,
        },
        {
            "i": 2,
            "name": "Brindle",
            "cell": 77,
            "x": 140.0,
            "y": 95.0,
            "state": 1,
            "culture": 1,
            "population": 3.2,
            "citadel": 0,
            "plaza": 0,
        },
        {
            "i": 3,
            "name": "Karthhold",
            "cell": 91,
            "x": 300.0,
            "y": 210.0,
            "state": 2,
            "culture": 2,
            "population": 8.0,
            "capital": 1,
            "citadel": 1,
            "walls": 1,
        },
    ]


def world_religions() -> list[Any]:
    return [{"i": 0, "name": "No religion"}, {"i": 1, "name": "Old Faith", "deity": "Sun"}]


def world_rivers() -> list[Any]:
    return [{"i": 1, "name": "Long River", "mouth": 12, "source": 3, "length": 140.5}]


def world_export(*, shuffled: bool = False) -> str:
    """World with every collection, provinces included, plus noise lines."""

    lines: list[object] = [
        world_cultures(),
        "not json at all",
        world_countries(),
        world_provinces(),
        world_burgs(),
        {"settings": True},
        world_religions(),
        world_rivers(),
        "",
    ]
    if shuffled:
        lines.reverse()
    return export_text(*lines)
