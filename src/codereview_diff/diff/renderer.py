"""
Diff Renderers

Turn numbered lines and change pairs into flat row models that a
presentation layer can draw without further logic. Missing line numbers
and missing sides are rendered as blanks.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..models.diff_line import ChangePair, DiffLine, LineKind


@dataclass
class UnifiedRow:
    """Single-column row"""
    line_number: Optional[int]
    text: str
    kind: LineKind
    line_id: int

    @property
    def line_number_label(self) -> str:
        return str(self.line_number) if self.line_number else ''


@dataclass
class SideBySideRow:
    """Two-column row; a side with no line has ``None`` text"""
    left_number: Optional[int]
    left_text: Optional[str]
    right_number: Optional[int]
    right_text: Optional[str]
    row_type: str

    @property
    def left_is_empty(self) -> bool:
        return self.left_text is None

    @property
    def right_is_empty(self) -> bool:
        return self.right_text is None


@dataclass
class PlainTextRow:
    """Row of the plain text view, numbered by position in the patch"""
    position: int
    text: str
    kind: LineKind


class UnifiedRenderer:
    """Renders the unified (single column) view."""

    def render(self, lines: List[DiffLine]) -> List[UnifiedRow]:
        return [
            UnifiedRow(
                line_number=self.line_number_for(line),
                text=line.display_text,
                kind=line.kind,
                line_id=line.index,
            )
            for line in lines
        ]

    def line_number_for(self, line: DiffLine) -> Optional[int]:
        """Old number for deletions and context, new number for additions."""
        if line.kind == LineKind.ADDITION:
            return line.new_line_number
        if line.kind in (LineKind.DELETION, LineKind.CONTEXT):
            return line.old_line_number
        return None


class SideBySideRenderer:
    """Renders change pairs as two-column rows."""

    def render(self, pairs: List[ChangePair]) -> List[SideBySideRow]:
        rows = []
        for pair in pairs:
            left = pair.left
            right = pair.right
            rows.append(SideBySideRow(
                left_number=left.old_line_number if left else None,
                left_text=left.display_text if left else None,
                right_number=right.new_line_number if right else None,
                right_text=right.display_text if right else None,
                row_type=pair.pair_type,
            ))
        return rows


class PlainTextRenderer:
    """Renders every patch line as-is, numbered from 1."""

    def render(self, lines: List[DiffLine]) -> List[PlainTextRow]:
        return [
            PlainTextRow(position=line.index + 1, text=line.text, kind=line.kind)
            for line in lines
        ]
