"""
Tests for Document Statistics, Density and Suggestions
======================================================
"""

from wordlens.engine.core import calculate_density, get_document_stats
from wordlens.engine.suggestions import get_keyword_suggestions, word_frequencies

SUGGESTION_TEXT = (
    "Respect matters. We value respect and inclusion. "
    "Teamwork teamwork teamwork builds trust. Process process process."
)


class TestDocumentStats:
    def test_counts(self):
        stats = get_document_stats("Hello world\nBye")
        assert (stats.characters, stats.words, stats.lines) == (15, 3, 2)

    def test_empty(self):
        stats = get_document_stats("")
        assert (stats.characters, stats.words, stats.lines) == (0, 0, 0)


class TestDensity:
    def test_sorted_and_zero_counts_dropped(self):
        density = calculate_density([("a", "#111", 2), ("b", "#222", 0), ("c", "#333", 1)], 10)

        assert [(d.word, d.density) for d in density] == [("a", 20.0), ("c", 10.0)]

    def test_limit(self):
        keywords = [(f"w{i}", "#111", i) for i in range(1, 9)]
        density = calculate_density(keywords, 100, limit=3)
        assert [d.word for d in density] == ["w8", "w7", "w6"]
        assert len(calculate_density(keywords, 100, limit=None)) == 8

    def test_no_words(self):
        density = calculate_density([("a", "#111", 1)], 0)
        assert density[0].density == 0.0


class TestSuggestions:
    def test_word_frequencies_ignore_short_words(self):
        frequencies = word_frequencies("The cat sat. Cats, cats!")
        assert frequencies == {"cats": 2}

    def test_vocabulary_first_then_frequent(self):
        assert get_keyword_suggestions(SUGGESTION_TEXT) == [
            "respect",
            "inclusion",
            "teamwork",
            "trust",
            "process",
        ]

    def test_tracked_keywords_excluded(self):
        suggestions = get_keyword_suggestions(SUGGESTION_TEXT, exclude=["Respect"])
        assert suggestions == ["inclusion", "teamwork", "trust", "process"]

    def test_at_most_ten(self):
        text = " ".join(
            ["respect inclusion diversity equity belonging tolerance acceptance"]
            + ["understanding empathy collaboration teamwork fairness"]
        )
        assert len(get_keyword_suggestions(text)) == 10

    def test_empty_text(self):
        assert get_keyword_suggestions("") == []
