"""Single-shot document analysis.

The engine's boundary contract: given content, keywords, a case-sensitivity
flag and a highlight flag, return keyword counts and renderable content.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from .constants import DEFAULT_DENSITY_LIMIT
from .core.normalizer import normalize_content
from .core.stats import DocumentStats, KeywordDensity, calculate_density, get_document_stats
from .matching import HighlightSpan, KeywordProtocol, count_keywords, highlight

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    """Result of :func:`analyze`.

    Attributes:
        counts: Occurrences per keyword over the whole document
        renderable_content: Highlighted text, or the normalized text when
            highlighting is disabled
        normalized_content: Content after normalization
        stats: Character, word and line totals of the normalized content
        density: Keywords ranked by density
        spans: Highlighted regions (empty when highlighting is disabled)
    """

    counts: dict[str, int]
    renderable_content: str
    normalized_content: str
    stats: DocumentStats
    density: list[KeywordDensity] = field(default_factory=list)
    spans: list[HighlightSpan] = field(default_factory=list)


def analyze(
    content: str,
    keywords: Sequence[KeywordProtocol],
    case_sensitive: bool = False,
    highlight_enabled: bool = True,
    density_limit: int | None = DEFAULT_DENSITY_LIMIT,
) -> AnalysisResult:
    """Count and highlight keywords in a document.

    The count pass always runs. The highlighter is bypassed entirely when
    ``highlight_enabled`` is False.

    Args:
        content: Raw document content (plain text or RTF).
        keywords: Keywords with their colors.
        case_sensitive: Match exact case only when True.
        highlight_enabled: Produce highlighted markup when True.
        density_limit: Maximum density entries (None for all).

    Returns:
        AnalysisResult.
    """
    normalized = normalize_content(content)
    counts = count_keywords(normalized, [k.word for k in keywords], case_sensitive)

    spans: list[HighlightSpan] = []
    if highlight_enabled and keywords:
        result = highlight(normalized, keywords, case_sensitive)
        renderable = result.html
        spans = result.spans
        if result.counts != counts:
            logger.error(f"Highlight counts diverged from count pass: {result.counts} != {counts}")
    else:
        renderable = normalized

    stats = get_document_stats(normalized)
    density = calculate_density(
        [(k.word, k.color, counts.get(k.word, 0)) for k in keywords],
        stats.words,
        limit=density_limit,
    )

    return AnalysisResult(
        counts=counts,
        renderable_content=renderable,
        normalized_content=normalized,
        stats=stats,
        density=density,
        spans=spans,
    )
