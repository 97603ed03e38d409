"""Virtualized line rendering.

Large documents are displayed a window of lines at a time. Only the lines
in the visible window go through the highlighter; aggregate keyword counts
always come from a single pass over the whole document and never from the
rendered lines, so scrolling cannot change or double them.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from .core.normalizer import normalize_content
from .matching import (
    KeywordProtocol,
    compile_search_pattern,
    count_keywords,
    find_search_ranges,
    highlight,
    render_markup,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedLine:
    """One visible line, ready for display.

    Attributes:
        index: Position in the document's non-empty lines (0-indexed)
        text: Plain line text
        html: Line text with keyword and search markers
    """

    index: int
    text: str
    html: str


class VirtualizedLineRenderer:
    """Split a document into lines and render visible windows of them."""

    def __init__(self, content: str, normalized: bool = False):
        """
        Args:
            content: Document content.
            normalized: True when ``content`` has already been through
                :func:`normalize_content`.
        """
        self.content = content if normalized else normalize_content(content)
        self.lines = [line for line in self.content.split("\n") if line.strip()]

    def __len__(self) -> int:
        return len(self.lines)

    def count(self, words: Sequence[str], case_sensitive: bool = False) -> dict[str, int]:
        """Count keywords over the entire document, not just visible lines."""
        return count_keywords(self.content, words, case_sensitive)

    def visible_window(self, visible: range) -> range:
        """Clamp a requested window to the document's lines."""
        start = max(0, visible.start)
        stop = min(len(self.lines), max(start, visible.stop))
        return range(start, stop)

    def render(
        self,
        visible: range,
        keywords: Sequence[KeywordProtocol],
        case_sensitive: bool = False,
        highlight_enabled: bool = True,
        search_query: str | None = None,
    ) -> list[RenderedLine]:
        """Render the lines in a visible window.

        Args:
            visible: Line indices currently in view.
            keywords: Keywords with their colors.
            case_sensitive: Match exact case only when True.
            highlight_enabled: Skip keyword markers entirely when False.
            search_query: Optional search overlay term.

        Returns:
            RenderedLine for each line in the clamped window.
        """
        window = self.visible_window(visible)
        rendered = []
        for index in window:
            line = self.lines[index]
            if highlight_enabled and keywords:
                markup = highlight(line, keywords, case_sensitive, search_query).html
            else:
                markup = render_markup(line, (), find_search_ranges(line, search_query))
            rendered.append(RenderedLine(index=index, text=line, html=markup))

        logger.debug(f"Rendered lines {window.start}-{window.stop} of {len(self.lines)}")
        return rendered

    def search(self, query: str) -> list[int]:
        """Indices of lines containing the query (case-insensitive)."""
        if not query:
            return []
        pattern = compile_search_pattern(query)
        return [index for index, line in enumerate(self.lines) if pattern.search(line)]


class SearchCursor:
    """Navigates search hits line by line, wrapping at either end."""

    def __init__(self, query: str = "", matches: list[int] | None = None):
        self.query = query
        self.matches = list(matches or [])
        self.position = 0

    @property
    def current_line(self) -> int | None:
        if not self.matches:
            return None
        return self.matches[self.position]

    def next(self) -> int | None:
        if self.matches:
            self.position = (self.position + 1) % len(self.matches)
        return self.current_line

    def prev(self) -> int | None:
        if self.matches:
            self.position = (self.position - 1) % len(self.matches)
        return self.current_line

    def clear(self) -> None:
        self.query = ""
        self.matches = []
        self.position = 0
