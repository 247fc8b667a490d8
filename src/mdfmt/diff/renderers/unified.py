#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/diff/renderers/unified.py
"""Unified diff renderer with optional colours.

Lines are turned into rich ``Text`` objects so the console decides whether
the styles become terminal escape codes.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from rich.console import Console
from rich.text import Text


class UnifiedDiffRenderer:
    """Render unified diff lines with optional styles.

    - Red for deletions (lines starting with -)
    - Green for additions (lines starting with +)
    - Cyan for hunk headers (lines starting with @@)
    - Bold for file headers (lines starting with --- or +++)

    Parameters
    ----------
    use_color : bool, default = True
        If False, lines are rendered without styles

    Examples
    --------
        >>> from mdfmt.diff import unified_diff
        >>> renderer = UnifiedDiffRenderer(use_color=False)
        >>> lines = list(renderer.render(unified_diff("a\\n", "b\\n", "x.md")))
        >>> [line.plain for line in lines][:2]
        ['--- a/x.md', '+++ b/x.md']

    """

    def __init__(self, use_color: bool = True):
        """Initialize the unified diff renderer."""
        self.use_color = use_color

    @staticmethod
    def style_for(line: str) -> Optional[str]:
        """Return the rich style for a diff line, or None for context lines."""
        if line.startswith("---") or line.startswith("+++"):
            return "bold"
        if line.startswith("@@"):
            return "cyan"
        if line.startswith("+"):
            return "green"
        if line.startswith("-"):
            return "red"
        return None

    def render(self, diff_lines: Iterable[str]) -> Iterator[Text]:
        """Yield one ``Text`` per diff line."""
        for line in diff_lines:
            style = self.style_for(line) if self.use_color else None
            yield Text(line, style=style or "")

    def write(self, diff_lines: Iterable[str], console: Console) -> int:
        """Print diff lines to ``console`` and return how many were written."""
        count = 0
        for text in self.render(diff_lines):
            console.print(text, soft_wrap=True, highlight=False)
            count += 1
        return count
