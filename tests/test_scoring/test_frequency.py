"""Tests for term frequency counting."""

from termweight.scoring.frequency import term_frequencies, term_frequency


class TestTermFrequency:
    """Tests for term_frequency function."""

    def test_empty_document(self) -> None:
        """Test with empty document."""
        assert term_frequency([]) == {}

    def test_counts_occurrences(self) -> None:
        """Test raw occurrence counts."""
        result = term_frequency(["love", "hate", "love", "love"])
        assert result == {"love": 3, "hate": 1}

    def test_exact_string_equality(self) -> None:
        """Test terms are not normalized."""
        result = term_frequency(["Love", "love"])
        assert result == {"Love": 1, "love": 1}

    def test_returns_plain_dict(self) -> None:
        """Test result is a plain dictionary."""
        assert type(term_frequency(["a"])) is dict


class TestTermFrequencies:
    """Tests for term_frequencies function."""

    def test_one_map_per_document(self) -> None:
        """Test each document gets its own map, in order."""
        result = term_frequencies([["a", "a"], [], ["b"]])
        assert result == [{"a": 2}, {}, {"b": 1}]

    def test_empty_batch(self) -> None:
        """Test with no documents."""
        assert term_frequencies([]) == []
