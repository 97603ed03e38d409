"""Document statistics and keyword density."""

from dataclasses import dataclass

from ..constants import DEFAULT_DENSITY_LIMIT


@dataclass(frozen=True)
class DocumentStats:
    """Character, word and line totals for a document."""

    characters: int
    words: int
    lines: int


@dataclass(frozen=True)
class KeywordDensity:
    """Share of a document's words taken by one keyword, as a percentage."""

    word: str
    color: str
    count: int
    density: float


def count_words(text: str) -> int:
    """Count whitespace-separated words."""
    return len(text.split())


def get_document_stats(text: str) -> DocumentStats:
    """Compute statistics for (normalized) document text.

    Args:
        text: Document text.

    Returns:
        DocumentStats; all zero for empty text.
    """
    if not text:
        return DocumentStats(characters=0, words=0, lines=0)
    return DocumentStats(
        characters=len(text),
        words=count_words(text),
        lines=text.count("\n") + 1,
    )


def calculate_density(
    keywords: list[tuple[str, str, int]],
    total_words: int,
    limit: int | None = DEFAULT_DENSITY_LIMIT,
) -> list[KeywordDensity]:
    """Rank keywords by density.

    Density is ``count / total_words * 100``. Keywords that do not occur are
    left out.

    Args:
        keywords: ``(word, color, count)`` triples.
        total_words: Word count of the whole document.
        limit: Maximum entries to return (None for all).

    Returns:
        Densities sorted from highest to lowest.
    """
    entries = [
        KeywordDensity(
            word=word,
            color=color,
            count=count,
            density=(count / total_words * 100) if total_words > 0 else 0.0,
        )
        for word, color, count in keywords
        if count > 0
    ]
    entries.sort(key=lambda e: e.density, reverse=True)
    if limit is not None:
        entries = entries[:limit]
    return entries
