"""Response models for the WordLens API."""

from datetime import datetime

from pydantic import BaseModel, Field

from ..engine import SessionState


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Service version")
    timestamp: datetime = Field(..., description="Server time")


class StatsInfo(BaseModel):
    """Document statistics."""

    characters: int = Field(default=0, ge=0, description="Character count")
    words: int = Field(default=0, ge=0, description="Whitespace-separated word count")
    lines: int = Field(default=0, ge=0, description="Line count")


class DensityInfo(BaseModel):
    """Density of one keyword."""

    word: str = Field(..., description="Keyword")
    color: str = Field(..., description="Marker color")
    count: int = Field(..., ge=0, description="Occurrences")
    density: float = Field(..., ge=0, description="Percentage of document words")


class SpanInfo(BaseModel):
    """A highlighted region of the normalized content."""

    word: str = Field(..., description="Keyword")
    start: int = Field(..., ge=0, description="Start offset")
    end: int = Field(..., ge=0, description="End offset (exclusive)")


class AnalyzeResult(BaseModel):
    """Result of stateless analysis."""

    counts: dict[str, int] = Field(default_factory=dict, description="Occurrences per keyword")
    renderable_content: str = Field(..., description="Highlighted or normalized content")
    normalized_content: str = Field(..., description="Content after normalization")
    stats: StatsInfo = Field(..., description="Document statistics")
    density: list[DensityInfo] = Field(default_factory=list, description="Keyword density")
    spans: list[SpanInfo] = Field(default_factory=list, description="Highlighted regions")


class NormalizeResult(BaseModel):
    """Result of content normalization."""

    content: str = Field(..., description="Normalized content")
    is_rtf: bool = Field(..., description="Whether the input was RTF")


class KeywordInfo(BaseModel):
    """A tracked keyword."""

    id: str = Field(..., description="Keyword ID")
    word: str = Field(..., description="Keyword")
    color: str = Field(..., description="Marker color")
    count: int = Field(default=0, ge=0, description="Occurrences in the whole document")


class SessionInfo(BaseModel):
    """Summary of a document session."""

    id: str = Field(..., description="Session ID")
    filename: str | None = Field(default=None, description="Uploaded file name")
    file_type: str | None = Field(default=None, description="File type label")
    upload_date: datetime | None = Field(default=None, description="Upload time")
    state: SessionState = Field(..., description="Session state")
    case_sensitive: bool = Field(..., description="Match exact case only")
    highlight_enabled: bool = Field(..., description="Highlight keywords")
    line_count: int = Field(default=0, ge=0, description="Non-empty lines")
    stats: StatsInfo = Field(default_factory=StatsInfo, description="Document statistics")
    keywords: list[KeywordInfo] = Field(default_factory=list, description="Tracked keywords")


class LineInfo(BaseModel):
    """One rendered line."""

    index: int = Field(..., ge=0, description="Line index")
    text: str = Field(..., description="Plain text")
    html: str = Field(..., description="Text with markers")


class LinesResult(BaseModel):
    """A rendered window of lines."""

    start: int = Field(..., ge=0, description="First rendered line")
    stop: int = Field(..., ge=0, description="One past the last rendered line")
    total_lines: int = Field(..., ge=0, description="Non-empty lines in the document")
    lines: list[LineInfo] = Field(default_factory=list, description="Rendered lines")
    counts: dict[str, int] = Field(
        default_factory=dict, description="Whole-document occurrences per keyword"
    )


class SearchResult(BaseModel):
    """Lines matching a search query."""

    query: str = Field(..., description="Search query")
    matches: list[int] = Field(default_factory=list, description="Matching line indices")
    total: int = Field(default=0, ge=0, description="Number of matching lines")
    current: int | None = Field(default=None, description="Line the search cursor is on")


class SuggestionsResult(BaseModel):
    """Keyword suggestions."""

    suggestions: list[str] = Field(default_factory=list, description="Suggested keywords")
