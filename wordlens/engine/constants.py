"""Constants for the WordLens engine.

This module contains:
- Highlight marker templates for keyword and search overlays
- The default keyword color palette
- Keyword suggestion vocabulary and thresholds
"""

import re

# ============ HIGHLIGHT MARKERS ============

KEYWORD_MARKER_OPEN = (
    '<mark style="background-color: {color}; padding: 2px 4px; '
    'border-radius: 3px; color: #000;">'
)
KEYWORD_MARKER_CLOSE = "</mark>"

SEARCH_MARKER_OPEN = (
    '<span class="search-highlight" style="background-color: #ffeb3b; '
    'padding: 1px 2px; border-radius: 2px; border: 1px solid #fbc02d;">'
)
SEARCH_MARKER_CLOSE = "</span>"

# The exact markers emitted above (used to recover the plain text). Document
# tags that merely resemble them do not match the opening forms.
MARKER_PATTERN = re.compile(
    "|".join(
        (
            re.escape(KEYWORD_MARKER_OPEN).replace(re.escape("{color}"), r'[^"<>]*'),
            re.escape(KEYWORD_MARKER_CLOSE),
            re.escape(SEARCH_MARKER_OPEN),
            re.escape(SEARCH_MARKER_CLOSE),
        )
    )
)

# ============ KEYWORD COLORS ============

# Palette offered by the keyword manager, assigned round-robin when a
# keyword is added without an explicit color.
DEFAULT_COLORS = (
    "#fbbf24",
    "#34d399",
    "#60a5fa",
    "#f87171",
    "#a78bfa",
    "#fb7185",
    "#4ade80",
    "#38bdf8",
    "#818cf8",
)

# Hex tokens (#rgb, #rgba, #rrggbb, #rrggbbaa) or a bare CSS color name.
# Anything else could break out of the marker's style attribute.
COLOR_PATTERN = re.compile(r"^(#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})|[a-zA-Z]{3,20})$")

# ============ KEYWORD SUGGESTIONS ============

SUGGESTION_VOCABULARY = (
    "respect",
    "inclusion",
    "diversity",
    "equity",
    "belonging",
    "tolerance",
    "acceptance",
    "understanding",
    "empathy",
    "collaboration",
    "teamwork",
    "fairness",
    "justice",
    "equality",
    "opportunity",
    "bias",
    "discrimination",
    "harassment",
    "culture",
    "values",
    "ethics",
    "integrity",
    "trust",
    "communication",
    "feedback",
    "support",
    "mentorship",
    "development",
    "growth",
    "innovation",
    "creativity",
    "perspective",
    "voice",
    "opinion",
)

MAX_SUGGESTIONS = 10
MAX_FREQUENT_SUGGESTIONS = 5
MIN_FREQUENT_WORD_LENGTH = 5  # strictly longer than 4 characters
MIN_FREQUENT_WORD_COUNT = 3
MIN_COUNTED_WORD_LENGTH = 4  # words of 3 characters or fewer are ignored

# ============ DENSITY ============

DEFAULT_DENSITY_LIMIT = 5
