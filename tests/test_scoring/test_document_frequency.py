"""Tests for document frequency accumulation."""

from termweight.scoring.document_frequency import PHANTOM_DOCUMENTS, DocumentFrequencies


class TestDocumentFrequencies:
    """Tests for DocumentFrequencies."""

    def test_starts_empty(self) -> None:
        """Test a new accumulator tracks no terms."""
        df = DocumentFrequencies()
        assert len(df) == 0
        assert df.as_dict() == {}

    def test_unseen_term_default(self) -> None:
        """Test unseen terms report the phantom document count."""
        df = DocumentFrequencies()
        assert df.get("love") == PHANTOM_DOCUMENTS == 1
        assert "love" not in df

    def test_effective_document_count(self) -> None:
        """Test the returned count includes the phantom document."""
        df = DocumentFrequencies()
        assert df.accumulate([["a"], ["b"], []]) == 4

    def test_empty_batch(self) -> None:
        """Test an empty batch counts only the phantom document."""
        df = DocumentFrequencies()
        assert df.accumulate([]) == 1
        assert len(df) == 0

    def test_first_occurrence_starts_at_two(self) -> None:
        """Test a term seen in one document counts the phantom document too."""
        df = DocumentFrequencies()
        df.accumulate([["love"]])
        assert df["love"] == 2

    def test_counts_once_per_document(self) -> None:
        """Test repeated terms within a document count once."""
        df = DocumentFrequencies()
        df.accumulate([["love", "love", "love"]])
        assert df["love"] == 2

    def test_multiple_documents(self) -> None:
        """Test counts across a batch."""
        df = DocumentFrequencies()
        df.accumulate([["a", "b"], ["a"]])
        assert df.as_dict() == {"a": 3, "b": 2}

    def test_accumulates_across_batches(self) -> None:
        """Test counts are never reset between batches."""
        df = DocumentFrequencies()
        df.accumulate([["a", "b"], ["a"]])
        df.accumulate([["a"]])
        assert df["a"] == 4
        assert df["b"] == 2

    def test_as_dict_is_copy(self) -> None:
        """Test the exported dictionary is detached from the accumulator."""
        df = DocumentFrequencies()
        df.accumulate([["a"]])
        exported = df.as_dict()
        exported["a"] = 100
        assert df["a"] == 2

    def test_items(self) -> None:
        """Test iteration over accumulated counts."""
        df = DocumentFrequencies()
        df.accumulate([["a", "b"]])
        assert dict(df.items()) == {"a": 2, "b": 2}
