from __future__ import annotations

import pytest

from fmgsync.adapters.fmg import translate_record
from fmgsync.domain.ingest_pipeline import EntityGraphStore, classify_export
from fmgsync.domain.model import Burg, Culture, EntityKind, Province
from tests.helpers.map_exports import export_text, world_burgs, world_cultures


def test_positions_double_as_identifiers(world_store: EntityGraphStore) -> None:
    burg = world_store.get(EntityKind.BURG, 2)

    assert isinstance(burg, Burg)
    assert burg.i == 2
    assert burg.name == "Brindle"


def test_placeholders_keep_their_position(world_store: EntityGraphStore) -> None:
    provinces = world_store.all(EntityKind.PROVINCE)

    assert provinces[0] is None
    assert isinstance(provinces[3], Province)
    assert world_store.get(EntityKind.BURG, 0) is None


@pytest.mark.parametrize("entity_id", [-1, 4, 100])
def test_get_out_of_range_returns_none(world_store: EntityGraphStore, entity_id: int) -> None:
    assert world_store.get(EntityKind.BURG, entity_id) is None


def test_leading_sentinel_stripped(world_store: EntityGraphStore) -> None:
    stripped = world_store.leading_sentinel_stripped(EntityKind.CULTURE)

    assert [culture.name for culture in stripped if isinstance(culture, Culture)] == [
        "Elves",
        "Dwarves",
    ]


def test_leading_sentinel_stripped_rejects_burgs(world_store: EntityGraphStore) -> None:
    with pytest.raises(ValueError, match="no leading sentinel"):
        world_store.leading_sentinel_stripped(EntityKind.BURG)


def test_counts_ignore_placeholders(world_store: EntityGraphStore) -> None:
    counts = world_store.counts()

    assert counts[EntityKind.CULTURE] == 3
    assert counts[EntityKind.PROVINCE] == 3
    assert counts[EntityKind.BURG] == 3
    assert counts[EntityKind.RIVER] == 1


def test_missing_collection_is_absent(scenario_store: EntityGraphStore) -> None:
    assert not scenario_store.has(EntityKind.PROVINCE)
    assert scenario_store.all(EntityKind.PROVINCE) == ()


def test_malformed_record_is_dropped_in_place() -> None:
    burgs = world_burgs()
    burgs[2]["x"] = "far east"
    store = EntityGraphStore.from_export(
        classify_export(export_text(world_cultures(), burgs)), translate_record
    )

    assert store.get(EntityKind.BURG, 2) is None
    third = store.get(EntityKind.BURG, 3)
    assert isinstance(third, Burg)
    assert third.name == "Karthhold"
