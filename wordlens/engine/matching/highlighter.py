"""Keyword highlighting.

Wraps every keyword occurrence in a colored ``<mark>`` marker and, when a
search query is given, layers a search overlay on top. Text outside the
markers is left byte-identical to the input.

Matches come from :func:`find_matches`, the same routine behind the
count-only path, so highlighted and non-highlighted counts cannot diverge.
"""

import html
from bisect import bisect_right
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from ..constants import (
    KEYWORD_MARKER_CLOSE,
    KEYWORD_MARKER_OPEN,
    MARKER_PATTERN,
    SEARCH_MARKER_CLOSE,
    SEARCH_MARKER_OPEN,
)
from .matcher import KeywordMatch, find_matches
from .patterns import compile_search_pattern


class KeywordProtocol(Protocol):
    """Protocol for Keyword-like objects."""

    word: str
    color: str


@dataclass(frozen=True)
class HighlightSpan:
    """A highlighted region of the text."""

    word: str
    color: str
    start: int
    end: int


@dataclass
class HighlightResult:
    """Output of :func:`highlight`.

    Attributes:
        html: Text with markers inserted
        counts: Occurrences per keyword (every match, including ones whose
            marker lost an overlap)
        spans: Regions that received a keyword marker, in text order
    """

    html: str
    counts: dict[str, int] = field(default_factory=dict)
    spans: list[HighlightSpan] = field(default_factory=list)


def resolve_overlaps(matches: list[KeywordMatch]) -> list[KeywordMatch]:
    """Pick the matches that receive a marker.

    Markers cannot overlap. With matches sorted by start, then longest
    first, then keyword order, the first match at a position wins and any
    later match starting inside it is dropped from the markup.
    """
    kept: list[KeywordMatch] = []
    last_end = -1
    for match in matches:
        if match.start >= last_end:
            kept.append(match)
            last_end = match.end
    return kept


def find_search_ranges(text: str, query: str | None) -> list[tuple[int, int]]:
    """Find case-insensitive occurrences of a search query."""
    if not query:
        return []
    pattern = compile_search_pattern(query)
    return [(m.start(), m.end()) for m in pattern.finditer(text)]


def _covering(starts: list[int], ends: list[int], offset: int) -> int | None:
    index = bisect_right(starts, offset) - 1
    if index >= 0 and ends[index] > offset:
        return index
    return None


def render_markup(
    text: str,
    spans: Sequence[HighlightSpan],
    search_ranges: Sequence[tuple[int, int]] = (),
) -> str:
    """Insert keyword and search markers into text.

    Keyword markers are the outer layer. A search range crossing a keyword
    marker's edge is split so the markup stays well nested.

    Args:
        text: Plain text.
        spans: Non-overlapping keyword spans sorted by start.
        search_ranges: Non-overlapping search ranges sorted by start.

    Returns:
        Text with markers.
    """
    if not spans and not search_ranges:
        return text

    points = {0, len(text)}
    for span in spans:
        points.update((span.start, span.end))
    for start, end in search_ranges:
        points.update((start, end))
    boundaries = sorted(points)

    span_starts = [s.start for s in spans]
    span_ends = [s.end for s in spans]
    search_starts = [start for start, _ in search_ranges]
    search_ends = [end for _, end in search_ranges]

    parts: list[str] = []
    open_span: int | None = None

    for start, end in zip(boundaries, boundaries[1:]):
        piece = text[start:end]
        span_index = _covering(span_starts, span_ends, start)

        if span_index != open_span:
            if open_span is not None:
                parts.append(KEYWORD_MARKER_CLOSE)
            if span_index is not None:
                color = html.escape(spans[span_index].color, quote=True)
                parts.append(KEYWORD_MARKER_OPEN.format(color=color))
            open_span = span_index

        if _covering(search_starts, search_ends, start) is not None:
            piece = f"{SEARCH_MARKER_OPEN}{piece}{SEARCH_MARKER_CLOSE}"
        parts.append(piece)

    if open_span is not None:
        parts.append(KEYWORD_MARKER_CLOSE)

    return "".join(parts)


def highlight(
    text: str,
    keywords: Sequence[KeywordProtocol],
    case_sensitive: bool = False,
    search_query: str | None = None,
) -> HighlightResult:
    """Highlight keyword occurrences in text.

    Args:
        text: Normalized text.
        keywords: Keywords with their colors, in priority order.
        case_sensitive: Match exact case only when True.
        search_query: Optional search overlay term.

    Returns:
        HighlightResult with marked-up text, counts and spans.
    """
    colors = {k.word: k.color for k in keywords}
    matches, counts = find_matches(text, [k.word for k in keywords], case_sensitive)

    spans = [
        HighlightSpan(word=m.word, color=colors[m.word], start=m.start, end=m.end)
        for m in resolve_overlaps(matches)
    ]
    markup = render_markup(text, spans, find_search_ranges(text, search_query))
    return HighlightResult(html=markup, counts=counts, spans=spans)


def strip_markers(markup: str) -> str:
    """Remove highlight markers, recovering the plain text.

    Only markers emitted by :func:`render_markup` are removed. A closing tag
    counts as a marker only when it closes the innermost open marker, so
    ``</span>`` or ``</mark>`` tags belonging to HTML documents are kept.
    """
    parts: list[str] = []
    closers: list[str] = []
    pos = 0
    for match in MARKER_PATTERN.finditer(markup):
        token = match.group()
        if token in (KEYWORD_MARKER_CLOSE, SEARCH_MARKER_CLOSE):
            if not closers or closers[-1] != token:
                continue
            closers.pop()
        elif token == SEARCH_MARKER_OPEN:
            closers.append(SEARCH_MARKER_CLOSE)
        else:
            closers.append(KEYWORD_MARKER_CLOSE)
        parts.append(markup[pos : match.start()])
        pos = match.end()
    parts.append(markup[pos:])
    return "".join(parts)
