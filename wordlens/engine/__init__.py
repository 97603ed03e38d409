"""WordLens keyword occurrence and highlighting engine.

Subpackages and modules:
- core: document structures, content normalization, statistics
- matching: pattern compilation, counting, highlighting
- registry: the tracked keyword set
- renderer: virtualized line rendering and search navigation
- session: per-document state machine
- analyzer: single-shot analysis (the engine's boundary contract)
- suggestions: keyword suggestions
"""

from .analyzer import AnalysisResult, analyze
from .core import Document, Keyword, normalize_content
from .errors import (
    DuplicateKeywordError,
    InvalidKeywordError,
    KeywordError,
    KeywordNotFoundError,
    NormalizationError,
    PatternCompilationError,
    ReadTimeoutError,
    SessionNotFoundError,
    UnsupportedFileTypeError,
    UploadTooLargeError,
    WordLensError,
)
from .registry import KeywordRegistry
from .renderer import RenderedLine, SearchCursor, VirtualizedLineRenderer
from .session import AnalysisSession, SessionState
from .suggestions import get_keyword_suggestions

__all__ = [
    # Analysis
    "AnalysisResult",
    "analyze",
    # Data
    "Document",
    "Keyword",
    "KeywordRegistry",
    "normalize_content",
    # Rendering and sessions
    "RenderedLine",
    "SearchCursor",
    "VirtualizedLineRenderer",
    "AnalysisSession",
    "SessionState",
    "get_keyword_suggestions",
    # Errors
    "WordLensError",
    "PatternCompilationError",
    "NormalizationError",
    "ReadTimeoutError",
    "UploadTooLargeError",
    "UnsupportedFileTypeError",
    "KeywordError",
    "InvalidKeywordError",
    "DuplicateKeywordError",
    "KeywordNotFoundError",
    "SessionNotFoundError",
]
