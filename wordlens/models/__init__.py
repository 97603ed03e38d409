"""Pydantic models for the WordLens API."""

from .requests import (
    AddKeywordRequest,
    AnalyzeRequest,
    KeywordInput,
    NormalizeRequest,
    OptionsRequest,
)
from .results import (
    AnalyzeResult,
    DensityInfo,
    HealthResponse,
    KeywordInfo,
    LineInfo,
    LinesResult,
    NormalizeResult,
    SearchResult,
    SessionInfo,
    SpanInfo,
    StatsInfo,
    SuggestionsResult,
)

__all__ = [
    # Requests
    "AddKeywordRequest",
    "AnalyzeRequest",
    "KeywordInput",
    "NormalizeRequest",
    "OptionsRequest",
    # Results
    "AnalyzeResult",
    "DensityInfo",
    "HealthResponse",
    "KeywordInfo",
    "LineInfo",
    "LinesResult",
    "NormalizeResult",
    "SearchResult",
    "SessionInfo",
    "SpanInfo",
    "StatsInfo",
    "SuggestionsResult",
]
