"""Deterministic links into the procedural city generator."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final
from urllib.parse import urlencode

from fmgsync.config import DEFAULT_CITY_GENERATOR_URL
from fmgsync.domain.errors import MissingHeaderFieldError

if TYPE_CHECKING:
    from fmgsync.domain.model import Burg

SEED_INDEX_WIDTH: Final[int] = 4

_GROUPING: Final = re.compile(r"[.,\s_']")


def burg_seed(map_seed: str, index: int) -> str:
    """Append ``index`` zero-padded to four digits to the map seed."""

    return f"{map_seed}{str(index).zfill(SEED_INDEX_WIDTH)}"


def population_value(population: float | str) -> int:
    """Return the population with grouping punctuation stripped.

    ``"12.500"`` becomes ``12500``; integral floats lose their fractional part
    before stripping so ``12.0`` stays ``12``.
    """

    if isinstance(population, float) and population.is_integer():
        population = int(population)
    digits = _GROUPING.sub("", str(population))
    if not digits:
        return 0
    try:
        return int(digits)
    except ValueError:
        return 0


def _flag(value: object) -> int:
    return 1 if value else 0


def generate_burg_url(
    burg: Burg,
    index: int,
    *,
    seed: str | None,
    base_url: str = DEFAULT_CITY_GENERATOR_URL,
) -> str:
    """Build the generator URL for ``burg`` at ``index`` of the full burg collection."""

    if not seed:
        raise MissingHeaderFieldError("seed")

    query = urlencode(
        [
            ("random", 0),
            ("continuous", 0),
            ("name", burg.name),
            ("population", population_value(burg.population)),
            ("size", int(burg.size or 0)),
            ("seed", burg_seed(seed, index)),
            ("coast", _flag(burg.coast)),
            ("citadel", _flag(burg.citadel)),
            ("plaza", _flag(burg.plaza)),
            ("temple", _flag(burg.temple)),
            ("walls", _flag(burg.walls)),
            ("shantytown", _flag(burg.shanty)),
        ]
    )
    return f"{base_url}?{query}"
