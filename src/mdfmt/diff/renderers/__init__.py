#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/diff/renderers/__init__.py
"""Diff output renderers."""

from mdfmt.diff.renderers.unified import UnifiedDiffRenderer

__all__ = ["UnifiedDiffRenderer"]
