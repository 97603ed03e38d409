"""Request models for the WordLens API."""

from pydantic import BaseModel, Field


class KeywordInput(BaseModel):
    """A keyword as supplied by a client."""

    word: str = Field(..., min_length=1, description="Keyword literal (trimmed, lowercased)")
    color: str | None = Field(
        default=None,
        description="Marker color (#hex or CSS color name); next palette color when omitted",
    )


class AnalyzeRequest(BaseModel):
    """Request body for stateless analysis."""

    content: str = Field(..., description="Document content (plain text or RTF)")
    keywords: list[KeywordInput] = Field(default_factory=list, description="Keywords to track")
    case_sensitive: bool = Field(default=False, description="Match exact case only")
    highlight_enabled: bool = Field(default=True, description="Return highlighted markup")
    density_limit: int = Field(default=5, ge=1, le=100, description="Maximum density entries")


class NormalizeRequest(BaseModel):
    """Request body for content normalization."""

    content: str = Field(..., description="Raw content to normalize")


class AddKeywordRequest(KeywordInput):
    """Request body for adding a keyword to a document session."""


class OptionsRequest(BaseModel):
    """Request body for updating a session's display flags."""

    case_sensitive: bool | None = Field(default=None, description="Match exact case only")
    highlight_enabled: bool | None = Field(default=None, description="Highlight keywords")
