"""Per-document analysis session.

A session owns one loaded document, its keyword registry and display
flags, and moves through these states:

    UNLOADED -> NORMALIZING -> COUNTING -> IDLE <-> RENDERING_VISIBLE_LINES

Changing the document, the keyword set or case sensitivity re-enters
COUNTING. Rendering a visible window never re-runs COUNTING.
"""

import logging
import time
from enum import StrEnum
from uuid import uuid4

from .constants import DEFAULT_DENSITY_LIMIT
from .core.document import Document, Keyword
from .core.stats import DocumentStats, KeywordDensity, calculate_density, get_document_stats
from .registry import KeywordRegistry
from .renderer import RenderedLine, SearchCursor, VirtualizedLineRenderer
from .suggestions import get_keyword_suggestions

logger = logging.getLogger(__name__)


class SessionState(StrEnum):
    """Lifecycle states of an analysis session."""

    UNLOADED = "unloaded"
    NORMALIZING = "normalizing"
    COUNTING = "counting"
    IDLE = "idle"
    RENDERING_VISIBLE_LINES = "rendering_visible_lines"


class AnalysisSession:
    """Keyword analysis state for one loaded document.

    Count passes are numbered. A pass whose results arrive after a newer
    pass has started is discarded, so the most recent input always wins.
    """

    def __init__(
        self,
        session_id: str | None = None,
        registry: KeywordRegistry | None = None,
        case_sensitive: bool = False,
        highlight_enabled: bool = True,
        max_visible_lines: int | None = None,
    ):
        self.id = session_id or uuid4().hex
        self.registry = registry if registry is not None else KeywordRegistry()
        self.case_sensitive = case_sensitive
        self.highlight_enabled = highlight_enabled
        self.max_visible_lines = max_visible_lines

        self.state = SessionState.UNLOADED
        self.document: Document | None = None
        self.renderer: VirtualizedLineRenderer | None = None
        self.counts: dict[str, int] = {}
        self.search_cursor = SearchCursor()
        self.generation = 0
        self.last_access = time.monotonic()

    @property
    def is_loaded(self) -> bool:
        return self.document is not None and self.renderer is not None

    @property
    def normalized_content(self) -> str:
        return self.renderer.content if self.renderer else ""

    # ============ LOADING ============

    def load(self, document: Document) -> None:
        """Load (or replace) the document and recount keywords."""
        self.state = SessionState.NORMALIZING
        self.document = document
        self.renderer = VirtualizedLineRenderer(document.content)
        self.search_cursor.clear()
        logger.info(
            f"Session {self.id}: loaded '{document.filename}' "
            f"({len(self.renderer)} lines, {len(self.renderer.content)} chars)"
        )
        self.recount()

    # ============ COUNTING ============

    def begin_count(self) -> int:
        """Start a count pass and return its generation number."""
        self.generation += 1
        self.state = SessionState.COUNTING
        return self.generation

    def complete_count(self, generation: int, counts: dict[str, int]) -> bool:
        """Apply a count pass's results unless a newer pass has started.

        Returns:
            True if the counts were applied, False if they were stale.
        """
        if generation != self.generation:
            logger.debug(f"Session {self.id}: discarding stale counts (pass {generation})")
            return False
        self.counts = counts
        self.registry.apply_counts(counts)
        self.state = SessionState.IDLE if self.is_loaded else SessionState.UNLOADED
        return True

    def recount(self) -> dict[str, int]:
        """Count every keyword over the whole document."""
        generation = self.begin_count()
        counts = (
            self.renderer.count(self.registry.words, self.case_sensitive)
            if self.renderer is not None
            else dict.fromkeys(self.registry.words, 0)
        )
        self.complete_count(generation, counts)
        return self.counts

    # ============ KEYWORDS AND OPTIONS ============

    def add_keyword(self, word: str, color: str | None = None) -> Keyword:
        keyword = self.registry.add(word, color)
        self.recount()
        return keyword

    def remove_keyword(self, keyword_id: str) -> Keyword:
        keyword = self.registry.remove(keyword_id)
        self.recount()
        return keyword

    def set_options(
        self,
        case_sensitive: bool | None = None,
        highlight_enabled: bool | None = None,
    ) -> None:
        """Update display flags. Only a case-sensitivity change recounts."""
        if highlight_enabled is not None:
            self.highlight_enabled = highlight_enabled
        if case_sensitive is not None and case_sensitive != self.case_sensitive:
            self.case_sensitive = case_sensitive
            self.recount()

    # ============ RENDERING ============

    def render_lines(
        self,
        start: int,
        stop: int,
        search_query: str | None = None,
    ) -> list[RenderedLine]:
        """Render the visible window ``[start, stop)`` of lines."""
        if self.renderer is None:
            return []
        if self.max_visible_lines is not None:
            stop = min(stop, start + self.max_visible_lines)

        previous = self.state
        self.state = SessionState.RENDERING_VISIBLE_LINES
        try:
            return self.renderer.render(
                range(start, stop),
                list(self.registry),
                case_sensitive=self.case_sensitive,
                highlight_enabled=self.highlight_enabled,
                search_query=search_query,
            )
        finally:
            self.state = previous

    def search(self, query: str) -> list[int]:
        """Find lines containing a query and reset the search cursor."""
        matches = self.renderer.search(query) if self.renderer is not None else []
        self.search_cursor = SearchCursor(query, matches)
        return matches

    # ============ REPORTS ============

    def stats(self) -> DocumentStats:
        return get_document_stats(self.normalized_content)

    def density(self, limit: int | None = DEFAULT_DENSITY_LIMIT) -> list[KeywordDensity]:
        return calculate_density(
            [(k.word, k.color, k.count) for k in self.registry],
            self.stats().words,
            limit=limit,
        )

    def suggestions(self) -> list[str]:
        return get_keyword_suggestions(self.normalized_content, exclude=self.registry.words)
