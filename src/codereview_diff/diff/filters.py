"""
Display Filter

Selects which classified lines are shown.
"""

from dataclasses import dataclass
from typing import List

from ..models.diff_line import DiffLine, LineKind


@dataclass
class DisplayOptions:
    """Toggles offered by the diff viewer"""
    show_full_context: bool = False  # include meta lines
    show_hunk_headers: bool = True


class DisplayFilter:
    """Drops meta and hunk header lines according to DisplayOptions."""

    def apply(self, lines: List[DiffLine], options: DisplayOptions) -> List[DiffLine]:
        """
        Filter lines for display, preserving order.

        Args:
            lines: Numbered lines
            options: Display toggles

        Returns:
            The visible subsequence
        """
        return [line for line in lines if self.is_visible(line, options)]

    def is_visible(self, line: DiffLine, options: DisplayOptions) -> bool:
        if line.kind == LineKind.META:
            return options.show_full_context
        if line.kind == LineKind.HUNK_HEADER:
            return options.show_hunk_headers
        return True
