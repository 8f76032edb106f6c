"""
Line Number Assigner

Assigns old/new file line numbers to classified patch lines.
"""

import re
import logging
from dataclasses import replace
from typing import List

from ..models.diff_line import DiffLine, LineKind


logger = logging.getLogger(__name__)


class LineNumberAssigner:
    """
    Walks classified lines in document order keeping an old and a new
    line counter.

    A hunk header resets both counters from its declared start values.
    Headers without explicit counts (``@@ -1 +1 @@``) do not match and
    leave the counters where they are.
    """

    def __init__(self):
        self.hunk_header_pattern = re.compile(r'@@ -(\d+),\d+ \+(\d+),\d+ @@')

    def assign(self, lines: List[DiffLine]) -> List[DiffLine]:
        """
        Return copies of the lines with line numbers filled in.

        Args:
            lines: Classified lines in document order

        Returns:
            New DiffLine objects; the input is not modified
        """
        old_line = 0
        new_line = 0
        numbered = []

        for line in lines:
            old_number = None
            new_number = None

            if line.kind == LineKind.HUNK_HEADER:
                match = self.hunk_header_pattern.search(line.text)
                if match:
                    old_line = int(match.group(1)) - 1
                    new_line = int(match.group(2)) - 1
                else:
                    logger.debug(f"Hunk header without counts, keeping counters: {line.text!r}")
            elif line.kind == LineKind.CONTEXT:
                old_line += 1
                new_line += 1
                old_number = old_line
                new_number = new_line
            elif line.kind == LineKind.DELETION:
                old_line += 1
                old_number = old_line
            elif line.kind == LineKind.ADDITION:
                new_line += 1
                new_number = new_line

            numbered.append(replace(line, old_line_number=old_number, new_line_number=new_number))

        return numbered
