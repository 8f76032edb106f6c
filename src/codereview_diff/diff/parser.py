"""
Patch Parser

Splits a unified-diff patch into classified lines.
Any input is accepted; lines that match no rule are treated as context.
"""

import logging
from typing import Iterable, List

from ..models.diff_line import DiffLine, DiffStats, LineKind


logger = logging.getLogger(__name__)


META_PREFIXES = (
    'diff --git',
    'index ',
    '--- ',
    '+++ ',
    'Binary files',
    'new file mode',
    'deleted file mode',
)


class PatchParser:
    """
    Parser for the ``patch`` field of GitHub pull request files.

    Produces one DiffLine per line of the patch in document order.
    Line numbers are left unset; see LineNumberAssigner.
    """

    def parse(self, patch: str) -> List[DiffLine]:
        """
        Parse a patch into classified lines.

        Args:
            patch: Raw unified-diff text for one file

        Returns:
            Classified lines, empty for an empty patch
        """
        if not patch:
            return []

        lines = [
            self._parse_line(index, text)
            for index, text in enumerate(patch.split('\n'))
        ]

        logger.debug(f"Parsed {len(lines)} patch lines")
        return lines

    def classify(self, line: str) -> LineKind:
        """
        Classify a single patch line.

        Args:
            line: Raw patch line without its trailing newline

        Returns:
            Kind of the line
        """
        if line.startswith('@@'):
            return LineKind.HUNK_HEADER
        if line.startswith(META_PREFIXES):
            return LineKind.META
        if line.startswith('+') and not line.startswith('+++'):
            return LineKind.ADDITION
        if line.startswith('-') and not line.startswith('---'):
            return LineKind.DELETION
        return LineKind.CONTEXT

    def _parse_line(self, index: int, text: str) -> DiffLine:
        kind = self.classify(text)
        content = text[1:] if kind.is_change else text
        return DiffLine(index=index, text=text, content=content, kind=kind)


def count_changes(lines: Iterable[DiffLine]) -> DiffStats:
    """
    Count added and removed lines.

    Counts come from the classification, so they can differ from the
    additions/deletions GitHub reports for the same file.
    """
    stats = DiffStats()
    for line in lines:
        if line.kind == LineKind.ADDITION:
            stats.additions += 1
        elif line.kind == LineKind.DELETION:
            stats.deletions += 1
    return stats
