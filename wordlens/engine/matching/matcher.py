"""Keyword occurrence matching.

Every call is a full recomputation over its inputs; nothing is cached
between calls apart from the compiled patterns themselves.
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

from ..errors import PatternCompilationError
from .patterns import compile_keyword_pattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeywordMatch:
    """One occurrence of a keyword in a text.

    Attributes:
        word: The keyword that matched
        start: Offset of the first matched character
        end: Offset one past the last matched character
        order: Position of the keyword in the batch (ties in overlap
            resolution go to the earlier keyword)
    """

    word: str
    start: int
    end: int
    order: int = 0

    @property
    def length(self) -> int:
        return self.end - self.start


def count_matches(text: str, pattern: re.Pattern[str]) -> int:
    """Count non-overlapping matches of a compiled pattern."""
    return sum(1 for _ in pattern.finditer(text))


def _keyword_pattern(word: str, case_sensitive: bool) -> re.Pattern[str] | None:
    """Compile a keyword pattern, logging instead of raising on failure."""
    try:
        return compile_keyword_pattern(word, case_sensitive)
    except PatternCompilationError as e:
        logger.warning(f"Skipping keyword, count recorded as 0: {e}")
        return None


def count_keywords(
    text: str,
    words: Iterable[str],
    case_sensitive: bool = False,
) -> dict[str, int]:
    """Count occurrences of each keyword (count-only path).

    A keyword whose pattern cannot be compiled or applied is logged and
    counted as 0; the rest of the batch is still processed.

    Args:
        text: Normalized document text.
        words: Keywords to count.
        case_sensitive: Match exact case only when True.

    Returns:
        Mapping of keyword to occurrence count.
    """
    counts: dict[str, int] = {}
    for word in words:
        pattern = _keyword_pattern(word, case_sensitive)
        if pattern is None:
            counts[word] = 0
            continue
        try:
            counts[word] = count_matches(text, pattern)
        except (re.error, TypeError) as e:
            logger.warning(f"Matching failed for keyword {word!r}, count recorded as 0: {e}")
            counts[word] = 0
    return counts


def find_matches(
    text: str,
    words: Iterable[str],
    case_sensitive: bool = False,
) -> tuple[list[KeywordMatch], dict[str, int]]:
    """Find every keyword occurrence with its position.

    Uses the same patterns and failure handling as :func:`count_keywords`,
    so the returned counts always equal the count-only path's.

    Args:
        text: Normalized text (a whole document or one line).
        words: Keywords to find, in priority order.
        case_sensitive: Match exact case only when True.

    Returns:
        Tuple of (matches sorted by position, counts per keyword).
    """
    matches: list[KeywordMatch] = []
    counts: dict[str, int] = {}

    for order, word in enumerate(words):
        pattern = _keyword_pattern(word, case_sensitive)
        if pattern is None:
            counts[word] = 0
            continue
        try:
            found = [
                KeywordMatch(word=word, start=m.start(), end=m.end(), order=order)
                for m in pattern.finditer(text)
            ]
        except (re.error, TypeError) as e:
            logger.warning(f"Matching failed for keyword {word!r}, count recorded as 0: {e}")
            counts[word] = 0
            continue
        counts[word] = len(found)
        matches.extend(found)

    matches.sort(key=lambda m: (m.start, -m.length, m.order))
    return matches, counts
