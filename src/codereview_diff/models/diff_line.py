"""
Diff Line Data Models

Classified, line-numbered lines of a unified diff and the pairs
built from them for side-by-side display.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class LineKind(str, Enum):
    """Classification of a single patch line."""
    CONTEXT = "context"
    ADDITION = "addition"
    DELETION = "deletion"
    HUNK_HEADER = "hunk-header"
    META = "meta"

    @property
    def is_change(self) -> bool:
        return self in (LineKind.ADDITION, LineKind.DELETION)


@dataclass
class DiffLine:
    """One line of a patch"""
    index: int
    text: str
    content: str
    kind: LineKind
    old_line_number: Optional[int] = None
    new_line_number: Optional[int] = None

    def __post_init__(self):
        if self.index < 0:
            raise ValueError("Line index must be non-negative")

    @property
    def display_text(self) -> str:
        """Raw text for meta and hunk headers, marker-free content otherwise"""
        if self.kind in (LineKind.META, LineKind.HUNK_HEADER):
            return self.text
        return self.content


@dataclass
class ChangePair:
    """
    A row of the side-by-side view.

    Context, hunk header and meta lines produce a degenerate pair where
    both sides are the same line. ``pair_type`` is ``change`` when a
    deletion was matched with an addition.
    """
    left: Optional[DiffLine]
    right: Optional[DiffLine]
    pair_type: str

    def __post_init__(self):
        if self.left is None and self.right is None:
            raise ValueError("A change pair needs at least one side")
        if (
            self.left is not None
            and self.right is not None
            and self.left is not self.right
            and self.left.kind == self.right.kind
        ):
            raise ValueError(f"Cannot pair two {self.left.kind.value} lines")

    @property
    def is_change(self) -> bool:
        return self.pair_type == "change"


@dataclass
class DiffStats:
    """Added/removed line counts computed from a classified patch"""
    additions: int = 0
    deletions: int = 0

    @property
    def total(self) -> int:
        return self.additions + self.deletions
