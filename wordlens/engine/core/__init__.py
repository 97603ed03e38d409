"""Engine core module.

This module contains core utilities and data structures for the engine:
- Document and keyword data structures
- Content normalization (RTF stripping, whitespace)
- Document statistics and keyword density
"""

from .document import Document, Keyword
from .normalizer import (
    is_rtf,
    normalize_content,
    normalize_whitespace,
    strip_rtf,
)
from .stats import (
    DocumentStats,
    KeywordDensity,
    calculate_density,
    count_words,
    get_document_stats,
)

__all__ = [
    # Data structures
    "Document",
    "Keyword",
    # Normalization
    "is_rtf",
    "normalize_content",
    "normalize_whitespace",
    "strip_rtf",
    # Statistics
    "DocumentStats",
    "KeywordDensity",
    "calculate_density",
    "count_words",
    "get_document_stats",
]
