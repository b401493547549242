"""Rendering adapter producing document bodies for reconciled entities."""

from __future__ import annotations

from .renderer import TemplateRenderer, document_link
from .templates import DEFAULT_TEMPLATES

__all__ = ["DEFAULT_TEMPLATES", "TemplateRenderer", "document_link"]
