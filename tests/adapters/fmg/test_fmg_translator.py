from __future__ import annotations

from pathlib import Path

import pytest

from fmgsync.adapters.fmg import read_map_text, translate_record
from fmgsync.domain.errors import MalformedRecordError
from fmgsync.domain.model import Burg, Country, Culture, EntityKind, Province, River


@pytest.mark.parametrize("element", [0, None, {}])
def test_placeholders_translate_to_none(element: object) -> None:
    assert translate_record(EntityKind.PROVINCE, 0, element) is None


def test_non_object_element_is_malformed() -> None:
    with pytest.raises(MalformedRecordError) as excinfo:
        translate_record(EntityKind.BURG, 4, "Ashford")

    assert excinfo.value.position == 4
    assert excinfo.value.kind is EntityKind.BURG


def test_invalid_field_is_malformed() -> None:
    with pytest.raises(MalformedRecordError, match="state"):
        translate_record(EntityKind.PROVINCE, 2, {"name": "Southvale", "state": "north"})


def test_country_aliases_and_defaults() -> None:
    country = translate_record(
        EntityKind.COUNTRY,
        1,
        {
            "i": 1,
            "name": "Vostria",
            "fullName": "Kingdom of Vostria",
            "formName": "Kingdom",
            "culture": None,
            "diplomacy": ["x", "Ally", 3],
            "pole": [10.5, 20.0],
            "unknownField": "ignored",
        },
    )

    assert country == Country(
        i=1,
        name="Vostria",
        full_name="Kingdom of Vostria",
        form="Kingdom",
        culture=0,
        diplomacy=("x", "Ally", "3"),
        pole=(10.5, 20.0),
    )


def test_position_fills_missing_identifier() -> None:
    culture = translate_record(EntityKind.CULTURE, 3, {"name": "Dwarves"})

    assert culture == Culture(i=3, name="Dwarves")


def test_position_overrides_conflicting_identifier() -> None:
    culture = translate_record(EntityKind.CULTURE, 3, {"i": 9, "name": "Dwarves"})

    assert culture == Culture(i=3, name="Dwarves")


def test_burg_flags_are_coerced() -> None:
    burg = translate_record(
        EntityKind.BURG,
        1,
        {
            "i": 1,
            "name": "Ashford",
            "population": "12.500",
            "capital": 1,
            "port": 2,
            "citadel": "1",
            "plaza": 0,
            "walls": None,
            "shanty": "false",
        },
    )

    assert isinstance(burg, Burg)
    assert burg.population == "12.500"
    assert burg.capital
    assert burg.coast
    assert burg.citadel
    assert not burg.plaza
    assert not burg.walls
    assert not burg.shanty


def test_burg_accepts_coastal_alias() -> None:
    burg = translate_record(EntityKind.BURG, 2, {"name": "Brindle", "coastal": True})

    assert isinstance(burg, Burg)
    assert burg.coast


def test_removed_province_keeps_position() -> None:
    province = translate_record(EntityKind.PROVINCE, 5, {"i": 5, "removed": True})

    assert province == Province(i=5, name="", removed=True)


def test_river_mouth_point() -> None:
    river = translate_record(EntityKind.RIVER, 1, {"i": 1, "name": "Long", "mouth": [3, 4]})

    assert isinstance(river, River)
    assert river.mouth == (3.0, 4.0)


def test_read_map_text_strips_bom(tmp_path: Path) -> None:
    path = tmp_path / "world.map"
    path.write_bytes("\ufeffx|y|z|SEED1\n[]".encode())

    assert read_map_text(path) == "x|y|z|SEED1\n[]"
