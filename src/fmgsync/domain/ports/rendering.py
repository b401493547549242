"""Port for rendering document bodies."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    from fmgsync.domain.model import ResolvedView


class Renderer(Protocol):
    """Render ``entity`` with the named template and resolution-time extras."""

    def __call__(
        self, template_name: str, entity: ResolvedView, extras: Mapping[str, object]
    ) -> str: ...
