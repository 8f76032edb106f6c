"""
Side-by-Side Pairer

Pairs deleted lines with the added lines that most likely replace them
so a two-column view can show an edit on a single row.
"""

import logging
from typing import List, Optional, Tuple

from ..models.diff_line import ChangePair, DiffLine, LineKind


logger = logging.getLogger(__name__)


DEFAULT_LOOKAHEAD_WINDOW = 4
DEFAULT_SIMILARITY_THRESHOLD = 0.5


def calculate_similarity(a: str, b: str) -> float:
    """
    Rough similarity between two lines in the range 0.0 - 1.0.

    Identical lines (ignoring surrounding whitespace) score 1.0. Otherwise
    the score is the number of characters of the shorter line that occur
    anywhere in the longer line, divided by the length of the longer line.
    Character positions are ignored.
    """
    if not a or not b:
        return 0.0

    trim_a = a.strip()
    trim_b = b.strip()

    if trim_a == trim_b:
        return 1.0

    if len(trim_a) < len(trim_b):
        shorter, longer = trim_a, trim_b
    else:
        shorter, longer = trim_b, trim_a

    common_chars = sum(1 for char in shorter if char in longer)
    return common_chars / len(longer)


class SideBySidePairer:
    """
    Builds the row sequence of the side-by-side view.

    A deletion looks ahead over the following run of changed lines (at
    most ``lookahead_window`` lines) for the most similar addition. If the
    best score is above ``similarity_threshold`` the two are emitted as a
    ``change`` row and the addition is removed from the remaining input.
    """

    def __init__(
        self,
        lookahead_window: int = DEFAULT_LOOKAHEAD_WINDOW,
        similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD
    ):
        """
        Initialize pairer.

        Args:
            lookahead_window: Number of lines after a deletion searched for a match
            similarity_threshold: Minimum score (exclusive) for pairing
        """
        if lookahead_window < 0:
            raise ValueError("Lookahead window must be non-negative")
        self.lookahead_window = lookahead_window
        self.similarity_threshold = similarity_threshold

    def pair(self, lines: List[DiffLine]) -> List[ChangePair]:
        """
        Pair numbered (and usually filtered) lines for two-column display.

        Args:
            lines: Lines in document order

        Returns:
            Change pairs in display order
        """
        working = list(lines)
        pairs = []
        matched = 0
        i = 0

        while i < len(working):
            current = working[i]

            if current.kind == LineKind.DELETION:
                best_index, best_score = self._find_best_addition(working, i)
                if best_index is not None and best_score > self.similarity_threshold:
                    pairs.append(ChangePair(left=current, right=working[best_index], pair_type='change'))
                    del working[best_index]
                    matched += 1
                else:
                    pairs.append(ChangePair(left=current, right=None, pair_type='deletion'))
            elif current.kind == LineKind.ADDITION:
                pairs.append(ChangePair(left=None, right=current, pair_type='addition'))
            else:
                pairs.append(ChangePair(left=current, right=current, pair_type=current.kind.value))

            i += 1

        logger.debug(f"Built {len(pairs)} side-by-side rows, {matched} paired changes")
        return pairs

    def _find_best_addition(self, working: List[DiffLine], start: int) -> Tuple[Optional[int], float]:
        """Return the index and score of the best addition after ``start``."""
        deletion = working[start]
        best_index = None
        best_score = 0.0

        end = min(len(working), start + self.lookahead_window + 1)
        for j in range(start + 1, end):
            candidate = working[j]
            if not candidate.kind.is_change:
                break
            if candidate.kind != LineKind.ADDITION:
                continue

            score = calculate_similarity(deletion.content, candidate.content)
            if score > best_score:
                best_score = score
                best_index = j

        return best_index, best_score
