#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/diff/__init__.py
"""Diffs between Markdown sources and their formatted output.

Examples
--------
    >>> from mdfmt.diff import unified_diff
    >>> print("\\n".join(unified_diff("# a\\nb\\n", "# a\\n\\nb\\n", "doc.md")))
    --- a/doc.md
    +++ b/doc.md
    @@ -1,2 +1,3 @@
     # a
    +
     b

"""

from mdfmt.diff.renderers import UnifiedDiffRenderer
from mdfmt.diff.text_diff import diff_labels, unified_diff

__all__ = ["UnifiedDiffRenderer", "diff_labels", "unified_diff"]
