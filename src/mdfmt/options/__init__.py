#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the mdfmt parser and renderer.

Options are frozen dataclasses: build one per configuration and share it
freely, or derive variants with ``create_updated``.
"""

from __future__ import annotations

from mdfmt.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from mdfmt.options.markdown import MarkdownParserOptions, MarkdownRendererOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MarkdownParserOptions",
    "MarkdownRendererOptions",
]
