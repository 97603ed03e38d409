"""Keyword matching engine.

This package turns keywords into safe patterns, counts their occurrences
and highlights them:
- Pattern compilation with escaping and word boundaries
- Batch counting with per-keyword failure isolation
- Highlighting with overlap resolution and a search overlay

Usage:
    from wordlens.engine.matching import count_keywords, highlight
"""

from .highlighter import (
    HighlightResult,
    HighlightSpan,
    KeywordProtocol,
    find_search_ranges,
    highlight,
    render_markup,
    resolve_overlaps,
    strip_markers,
)
from .matcher import KeywordMatch, count_keywords, count_matches, find_matches
from .patterns import compile_keyword_pattern, compile_search_pattern

__all__ = [
    # Patterns
    "compile_keyword_pattern",
    "compile_search_pattern",
    # Matcher
    "KeywordMatch",
    "count_keywords",
    "count_matches",
    "find_matches",
    # Highlighter
    "HighlightResult",
    "HighlightSpan",
    "KeywordProtocol",
    "find_search_ranges",
    "highlight",
    "render_markup",
    "resolve_overlaps",
    "strip_markers",
]
