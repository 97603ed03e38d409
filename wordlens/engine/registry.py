"""Keyword registry.

Holds the ordered set of tracked keywords for one document session.
Words are stored lowercased and trimmed; no two keywords share a word.
"""

import logging
from collections.abc import Iterator
from uuid import uuid4

from .constants import COLOR_PATTERN, DEFAULT_COLORS
from .core.document import Keyword
from .errors import DuplicateKeywordError, InvalidKeywordError, KeywordNotFoundError

logger = logging.getLogger(__name__)


def normalize_keyword(word: str) -> str:
    """Trim and lowercase a keyword as entered by a user."""
    return word.strip().lower()


def validate_color(color: str) -> str:
    """Check that a color token is safe to place in a marker's style.

    Raises:
        InvalidKeywordError: If the color is not a hex token or color name.
    """
    color = color.strip()
    if not COLOR_PATTERN.match(color):
        raise InvalidKeywordError(f"Invalid color: {color!r}")
    return color


class KeywordRegistry:
    """Ordered collection of tracked keywords."""

    def __init__(
        self,
        max_keywords: int | None = None,
        max_keyword_length: int | None = None,
        palette: tuple[str, ...] = DEFAULT_COLORS,
    ):
        self._keywords: list[Keyword] = []
        self._max_keywords = max_keywords
        self._max_keyword_length = max_keyword_length
        self._palette = palette
        self._next_color = 0

    def __iter__(self) -> Iterator[Keyword]:
        return iter(list(self._keywords))

    def __len__(self) -> int:
        return len(self._keywords)

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        target = normalize_keyword(word)
        return any(k.word == target for k in self._keywords)

    @property
    def words(self) -> list[str]:
        """Keyword words in registration order."""
        return [k.word for k in self._keywords]

    def _pick_color(self) -> str:
        color = self._palette[self._next_color % len(self._palette)]
        self._next_color += 1
        return color

    def add(self, word: str, color: str | None = None) -> Keyword:
        """Track a new keyword.

        Args:
            word: Keyword as entered; trimmed and lowercased before storage.
            color: Marker color. The next palette color is used when omitted.

        Returns:
            The created Keyword (count 0 until the next count pass).

        Raises:
            InvalidKeywordError: Empty, too long, registry full, or bad color.
            DuplicateKeywordError: The word is already tracked.
        """
        normalized = normalize_keyword(word or "")
        if not normalized:
            raise InvalidKeywordError("Please enter a keyword")
        if self._max_keyword_length is not None and len(normalized) > self._max_keyword_length:
            raise InvalidKeywordError(
                f"Keyword must not exceed {self._max_keyword_length} characters"
            )
        if normalized in self:
            raise DuplicateKeywordError(normalized)
        if self._max_keywords is not None and len(self._keywords) >= self._max_keywords:
            raise InvalidKeywordError(f"At most {self._max_keywords} keywords can be tracked")

        keyword = Keyword(
            id=uuid4().hex,
            word=normalized,
            color=validate_color(color) if color else self._pick_color(),
        )
        self._keywords.append(keyword)
        logger.debug(f"Added keyword: {keyword.word}")
        return keyword

    def get(self, keyword_id: str) -> Keyword:
        """Look up a keyword by id.

        Raises:
            KeywordNotFoundError: If no keyword has this id.
        """
        for keyword in self._keywords:
            if keyword.id == keyword_id:
                return keyword
        raise KeywordNotFoundError(f"Keyword not found: {keyword_id}")

    def remove(self, keyword_id: str) -> Keyword:
        """Stop tracking a keyword.

        Raises:
            KeywordNotFoundError: If no keyword has this id.
        """
        keyword = self.get(keyword_id)
        self._keywords.remove(keyword)
        logger.debug(f"Removed keyword: {keyword.word}")
        return keyword

    def apply_counts(self, counts: dict[str, int]) -> None:
        """Store counts from a count pass (keywords missing from it get 0)."""
        for keyword in self._keywords:
            keyword.count = counts.get(keyword.word, 0)
