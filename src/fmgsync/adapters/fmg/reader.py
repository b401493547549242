"""Loading map exports from disk."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

log = getLogger(__name__)


def read_map_text(path: Path) -> str:
    """Return the UTF-8 text of a ``.map`` export, without a byte-order mark."""

    text = path.read_text(encoding="utf-8-sig")
    log.info("Read map export %s (%s characters)", path, len(text))
    return text
