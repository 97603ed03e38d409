"""Document data structures for the WordLens engine.

This module contains the core data structures for representing an
uploaded document and the keywords tracked against it.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(frozen=True)
class Document:
    """An uploaded document.

    Immutable once loaded; a new upload replaces it rather than mutating it.

    Attributes:
        content: Raw uploaded text, possibly RTF-encoded
        filename: Original file name
        upload_date: When the document was loaded (UTC)
    """

    content: str
    filename: str
    upload_date: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass
class Keyword:
    """A tracked keyword.

    Attributes:
        id: Unique opaque identifier
        word: Lowercased, trimmed, non-empty literal
        color: Display color token used by the highlight marker
        count: Occurrences in the current document (derived, recomputed on
            every document, keyword-set or case-sensitivity change)
    """

    id: str
    word: str
    color: str
    count: int = 0
