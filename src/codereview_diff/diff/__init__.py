"""
Diff Processing Layer

Parses unified-diff patches, assigns line numbers, filters lines for
display and builds unified and side-by-side rendering models.
"""

from .parser import PatchParser, count_changes
from .numbering import LineNumberAssigner
from .filters import DisplayOptions, DisplayFilter
from .pairing import SideBySidePairer, calculate_similarity
from .renderer import (
    UnifiedRenderer,
    UnifiedRow,
    SideBySideRenderer,
    SideBySideRow,
    PlainTextRenderer,
    PlainTextRow,
)

__all__ = [
    'PatchParser',
    'count_changes',
    'LineNumberAssigner',
    'DisplayOptions',
    'DisplayFilter',
    'SideBySidePairer',
    'calculate_similarity',
    'UnifiedRenderer',
    'UnifiedRow',
    'SideBySideRenderer',
    'SideBySideRow',
    'PlainTextRenderer',
    'PlainTextRow',
]
