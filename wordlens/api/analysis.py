"""Stateless analysis endpoints.

Base URL: /v1
"""

import logging

from fastapi import APIRouter

from ..engine import KeywordRegistry, analyze
from ..engine.core import is_rtf, normalize_content
from ..models import (
    AnalyzeRequest,
    AnalyzeResult,
    DensityInfo,
    NormalizeRequest,
    NormalizeResult,
    SpanInfo,
    StatsInfo,
)
from .deps import SettingsDep

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["Analysis"])


@router.post("/analyze", response_model=AnalyzeResult)
async def analyze_content(request: AnalyzeRequest, settings: SettingsDep) -> AnalyzeResult:
    """
    Count and highlight keywords in a document.

    Keywords go through the same registry rules as a document session:
    trimmed, lowercased, unique, with a validated color.
    """
    registry = KeywordRegistry(
        max_keywords=settings.max_keywords,
        max_keyword_length=settings.max_keyword_length,
    )
    for keyword in request.keywords:
        registry.add(keyword.word, keyword.color)

    result = analyze(
        request.content,
        list(registry),
        case_sensitive=request.case_sensitive,
        highlight_enabled=request.highlight_enabled,
        density_limit=request.density_limit,
    )
    logger.debug(f"Analyzed {result.stats.words} words for {len(registry)} keywords")

    return AnalyzeResult(
        counts=result.counts,
        renderable_content=result.renderable_content,
        normalized_content=result.normalized_content,
        stats=StatsInfo(
            characters=result.stats.characters,
            words=result.stats.words,
            lines=result.stats.lines,
        ),
        density=[
            DensityInfo(word=d.word, color=d.color, count=d.count, density=d.density)
            for d in result.density
        ],
        spans=[SpanInfo(word=s.word, start=s.start, end=s.end) for s in result.spans],
    )


@router.post("/normalize", response_model=NormalizeResult)
async def normalize(request: NormalizeRequest) -> NormalizeResult:
    """Strip rich-text markup and normalize whitespace."""
    return NormalizeResult(
        content=normalize_content(request.content),
        is_rtf=is_rtf(request.content),
    )
