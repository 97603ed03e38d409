"""Keyword pattern compiler.

Turns a user-supplied keyword into a compiled regular expression that
matches the literal keyword as a whole word. Keywords are always escaped
before compilation; raw user input never becomes pattern syntax.
"""

import re
from functools import lru_cache

from ..errors import PatternCompilationError

# A word character may not touch the match on either side. Equivalent to
# \b for keywords that start and end with word characters, and still
# anchors keywords such as "c++" or ".net" that do not.
_BOUNDARY_BEFORE = r"(?<!\w)"
_BOUNDARY_AFTER = r"(?!\w)"


@lru_cache(maxsize=1024)
def compile_keyword_pattern(word: str, case_sensitive: bool = False) -> re.Pattern[str]:
    """Compile a word-boundary pattern for a literal keyword.

    Args:
        word: The keyword. Callers reject empty keywords first.
        case_sensitive: Match exact case only when True.

    Returns:
        Compiled pattern matching ``word`` as a whole word.

    Raises:
        PatternCompilationError: If the keyword is empty or the pattern
            cannot be compiled.
    """
    if not word or not word.strip():
        raise PatternCompilationError(word, "keyword is empty")

    flags = 0 if case_sensitive else re.IGNORECASE
    try:
        return re.compile(f"{_BOUNDARY_BEFORE}{re.escape(word)}{_BOUNDARY_AFTER}", flags)
    except re.error as e:
        raise PatternCompilationError(word, str(e)) from e


@lru_cache(maxsize=256)
def compile_search_pattern(query: str) -> re.Pattern[str]:
    """Compile a case-insensitive substring pattern for a search overlay.

    Unlike keywords, search terms match anywhere, including inside words.

    Raises:
        PatternCompilationError: If the query is empty.
    """
    if not query:
        raise PatternCompilationError(query, "search query is empty")
    return re.compile(re.escape(query), re.IGNORECASE)
