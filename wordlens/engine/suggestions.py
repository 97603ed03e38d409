"""Keyword suggestions for a document.

Suggests curated vocabulary terms that occur in the document, followed by
the document's own most frequent longer words.
"""

import re
from collections import Counter
from collections.abc import Iterable

from .constants import (
    MAX_FREQUENT_SUGGESTIONS,
    MAX_SUGGESTIONS,
    MIN_COUNTED_WORD_LENGTH,
    MIN_FREQUENT_WORD_COUNT,
    MIN_FREQUENT_WORD_LENGTH,
    SUGGESTION_VOCABULARY,
)


def word_frequencies(text: str) -> Counter[str]:
    """Frequency of each lowercased word, punctuation removed.

    Words shorter than four characters are not counted.
    """
    frequencies: Counter[str] = Counter()
    for token in text.lower().split():
        word = re.sub(r"[^\w]", "", token)
        if len(word) >= MIN_COUNTED_WORD_LENGTH:
            frequencies[word] += 1
    return frequencies


def get_keyword_suggestions(text: str, exclude: Iterable[str] = ()) -> list[str]:
    """Suggest keywords for a document.

    Args:
        text: Normalized document text.
        exclude: Keywords already tracked (left out of the suggestions).

    Returns:
        Up to ten suggestions, vocabulary terms first.
    """
    if not text:
        return []

    frequencies = word_frequencies(text)
    excluded = {w.lower() for w in exclude}

    vocabulary_hits = [term for term in SUGGESTION_VOCABULARY if frequencies[term] >= 1]
    frequent = [
        word
        for word, count in frequencies.most_common()
        if count >= MIN_FREQUENT_WORD_COUNT and len(word) >= MIN_FREQUENT_WORD_LENGTH
    ][:MAX_FREQUENT_SUGGESTIONS]

    suggestions: list[str] = []
    for word in vocabulary_hits + frequent:
        if word not in excluded and word not in suggestions:
            suggestions.append(word)
    return suggestions[:MAX_SUGGESTIONS]
