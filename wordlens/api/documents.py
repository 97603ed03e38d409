"""Document session endpoints.

A session holds one uploaded document, its keywords and display flags.
Keyword counts always cover the whole document; the lines endpoint only
renders the requested window.

Base URL: /v1/documents
"""

import logging
from typing import Annotated

from fastapi import APIRouter, File, Query, Response, UploadFile

from ..engine import AnalysisSession
from ..models import (
    AddKeywordRequest,
    DensityInfo,
    KeywordInfo,
    LineInfo,
    LinesResult,
    OptionsRequest,
    SearchResult,
    SessionInfo,
    StatsInfo,
    SuggestionsResult,
)
from ..services import get_file_type, read_upload
from .deps import SessionDep, SessionStoreDep, SettingsDep

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/documents", tags=["Documents"])


def session_info(session: AnalysisSession) -> SessionInfo:
    """Build the API summary of a session."""
    stats = session.stats()
    document = session.document
    return SessionInfo(
        id=session.id,
        filename=document.filename if document else None,
        file_type=get_file_type(document.filename) if document else None,
        upload_date=document.upload_date if document else None,
        state=session.state,
        case_sensitive=session.case_sensitive,
        highlight_enabled=session.highlight_enabled,
        line_count=len(session.renderer) if session.renderer else 0,
        stats=StatsInfo(characters=stats.characters, words=stats.words, lines=stats.lines),
        keywords=[
            KeywordInfo(id=k.id, word=k.word, color=k.color, count=k.count)
            for k in session.registry
        ],
    )


def search_result(session: AnalysisSession) -> SearchResult:
    """Build the API view of a session's search cursor."""
    cursor = session.search_cursor
    return SearchResult(
        query=cursor.query,
        matches=list(cursor.matches),
        total=len(cursor.matches),
        current=cursor.current_line,
    )


# ============ SESSIONS ============


@router.post("", response_model=SessionInfo, status_code=201)
async def upload_document(
    file: Annotated[UploadFile, File(description="Text document to analyze")],
    sessions: SessionStoreDep,
    settings: SettingsDep,
) -> SessionInfo:
    """Upload a document and open an analysis session for it."""
    document = await read_upload(
        file,
        timeout=settings.read_timeout_seconds,
        max_bytes=settings.max_upload_bytes,
        allowed_extensions=settings.allowed_extensions,
    )
    session = sessions.create()
    session.load(document)
    return session_info(session)


@router.get("/{session_id}", response_model=SessionInfo)
async def get_document(session: SessionDep) -> SessionInfo:
    """Summary of a document session."""
    return session_info(session)


@router.delete("/{session_id}", status_code=204)
async def close_document(session_id: str, sessions: SessionStoreDep) -> Response:
    """Close a document session."""
    sessions.delete(session_id)
    return Response(status_code=204)


# ============ KEYWORDS AND OPTIONS ============


@router.post("/{session_id}/keywords", response_model=KeywordInfo, status_code=201)
async def add_keyword(request: AddKeywordRequest, session: SessionDep) -> KeywordInfo:
    """Track a keyword; counts are recomputed over the whole document."""
    keyword = session.add_keyword(request.word, request.color)
    return KeywordInfo(id=keyword.id, word=keyword.word, color=keyword.color, count=keyword.count)


@router.delete("/{session_id}/keywords/{keyword_id}", response_model=SessionInfo)
async def remove_keyword(keyword_id: str, session: SessionDep) -> SessionInfo:
    """Stop tracking a keyword."""
    session.remove_keyword(keyword_id)
    return session_info(session)


@router.put("/{session_id}/options", response_model=SessionInfo)
async def set_options(request: OptionsRequest, session: SessionDep) -> SessionInfo:
    """Change case sensitivity and/or highlighting."""
    session.set_options(
        case_sensitive=request.case_sensitive,
        highlight_enabled=request.highlight_enabled,
    )
    return session_info(session)


# ============ RENDERING ============


@router.get("/{session_id}/lines", response_model=LinesResult)
async def get_lines(
    session: SessionDep,
    start: Annotated[int, Query(ge=0, description="First visible line")] = 0,
    stop: Annotated[int, Query(ge=0, description="One past the last visible line")] = 50,
    search: Annotated[str | None, Query(max_length=200, description="Search overlay")] = None,
) -> LinesResult:
    """Render the visible window of lines."""
    lines = session.render_lines(start, stop, search_query=search or None)
    return LinesResult(
        start=lines[0].index if lines else start,
        stop=lines[-1].index + 1 if lines else start,
        total_lines=len(session.renderer) if session.renderer else 0,
        lines=[LineInfo(index=line.index, text=line.text, html=line.html) for line in lines],
        counts=dict(session.counts),
    )


@router.get("/{session_id}/search", response_model=SearchResult)
async def search_lines(
    session: SessionDep,
    q: Annotated[str, Query(min_length=1, max_length=200, description="Search query")],
) -> SearchResult:
    """Indices of lines containing a query (case-insensitive)."""
    session.search(q)
    return search_result(session)


@router.post("/{session_id}/search/next", response_model=SearchResult)
async def search_next(session: SessionDep) -> SearchResult:
    """Move the search cursor to the next matching line (wraps around)."""
    session.search_cursor.next()
    return search_result(session)


@router.post("/{session_id}/search/prev", response_model=SearchResult)
async def search_prev(session: SessionDep) -> SearchResult:
    """Move the search cursor to the previous matching line (wraps around)."""
    session.search_cursor.prev()
    return search_result(session)


# ============ REPORTS ============


@router.get("/{session_id}/density", response_model=list[DensityInfo])
async def get_density(
    session: SessionDep,
    limit: Annotated[int, Query(ge=1, le=100)] = 5,
) -> list[DensityInfo]:
    """Keywords ranked by density."""
    return [
        DensityInfo(word=d.word, color=d.color, count=d.count, density=d.density)
        for d in session.density(limit=limit)
    ]


@router.get("/{session_id}/suggestions", response_model=SuggestionsResult)
async def get_suggestions(session: SessionDep) -> SuggestionsResult:
    """Keyword suggestions for the document."""
    return SuggestionsResult(suggestions=session.suggestions())
