"""Corpus model orchestrating vocabulary, frequencies and TF-IDF vectors."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from termweight.exceptions import DocumentNotFoundError, InvalidInputError
from termweight.logging import get_logger
from termweight.scoring.document_frequency import DocumentFrequencies
from termweight.scoring.frequency import term_frequencies, term_frequency
from termweight.scoring.idf import calculate_idf_map
from termweight.scoring.models import DocumentVector, ModelSummary
from termweight.scoring.tfidf import combine_tfidf
from termweight.scoring.vocabulary import UNCATEGORIZED, Vocabulary

logger = get_logger("scoring.corpus")


def _validate_document(document: Iterable[str] | None, **context: object) -> list[str]:
    if document is None:
        raise InvalidInputError("Document is required", argument="document", **context)
    if isinstance(document, str):
        raise InvalidInputError(
            "Document must be a sequence of terms, not a string",
            argument="document",
            **context,
        )
    return list(document)


class CorpusModel:
    """TF-IDF model trained on an initial corpus and extended one document at a time.

    ``fit_documents`` scores a batch of documents and grows the vocabulary.
    ``add_document`` scores a single document at lower cost, casting terms
    outside the vocabulary to the sentinel term; it never grows the vocabulary.
    Document frequencies accumulate across both entry points.

    Instances are not thread-safe.

    Attributes:
        unknown_term: Sentinel substituted for unrecognized terms.
    """

    def __init__(self, unknown_term: str = UNCATEGORIZED) -> None:
        self.unknown_term = unknown_term
        self._vocabulary = Vocabulary(sentinel=unknown_term)
        self._document_frequencies = DocumentFrequencies()
        self._vectors: list[dict[str, float]] = []

    def fit_documents(self, documents: Iterable[Iterable[str]] | None) -> None:
        """Score a corpus and absorb its terms into the vocabulary.

        All documents of the batch share one IDF map, computed after a single
        document frequency accumulation over the whole batch.

        Args:
            documents: Corpus of tokenized documents.

        Raises:
            InvalidInputError: If the corpus or one of its documents is missing.
        """
        if documents is None:
            raise InvalidInputError("Document collection is required", argument="documents")
        if isinstance(documents, str):
            raise InvalidInputError(
                "Document collection must be a sequence of documents", argument="documents"
            )
        corpus = [
            _validate_document(document, position=position)
            for position, document in enumerate(documents)
        ]

        tfs = term_frequencies(corpus)
        total_documents = self._document_frequencies.accumulate(corpus)
        idf_scores = calculate_idf_map(self._document_frequencies, total_documents)
        for tf in tfs:
            self._vectors.append(combine_tfidf(tf, idf_scores))
        for document in corpus:
            self._vocabulary.absorb(document)

        logger.debug(
            "fit batch=%d n=%d vocabulary=%d tracked=%d",
            len(corpus),
            total_documents,
            len(self._vocabulary),
            len(self._document_frequencies),
        )

    def add_document(self, document: Iterable[str] | None) -> None:
        """Score one more document against the established vocabulary.

        Unknown terms are cast to the sentinel term. IDF scores are computed
        with this document as the whole batch.

        Args:
            document: Tokenized document.

        Raises:
            InvalidInputError: If the document is missing.
        """
        cleaned = self._vocabulary.remap(_validate_document(document))

        tf = term_frequency(cleaned)
        total_documents = self._document_frequencies.accumulate([cleaned])
        idf_scores = calculate_idf_map(self._document_frequencies, total_documents)
        self._vectors.append(combine_tfidf(tf, idf_scores))

        logger.debug(
            "add index=%d terms=%d unknown=%d n=%d",
            len(self._vectors) - 1,
            len(cleaned),
            tf.get(self.unknown_term, 0),
            total_documents,
        )

    @property
    def tfidf_vectors(self) -> list[dict[str, float]]:
        """Copies of every vector produced so far, in processing order."""
        return [dict(vector) for vector in self._vectors]

    @property
    def vocabulary(self) -> frozenset[str]:
        return self._vocabulary.terms

    @property
    def document_frequencies(self) -> dict[str, int]:
        return self._document_frequencies.as_dict()

    @property
    def documents_processed(self) -> int:
        return len(self._vectors)

    def vector(self, index: int) -> DocumentVector:
        """Return the sorted vector of a processed document.

        Args:
            index: Zero-based position in processing order.

        Returns:
            DocumentVector for that document.

        Raises:
            DocumentNotFoundError: If no document was processed at that index.
        """
        if not 0 <= index < len(self._vectors):
            raise DocumentNotFoundError(
                f"No document at index {index}; {len(self._vectors)} processed",
                index=index,
            )
        return DocumentVector.from_mapping(index, self._vectors[index])

    def vectors(self) -> tuple[DocumentVector, ...]:
        """Sorted vectors of every processed document."""
        return tuple(
            DocumentVector.from_mapping(index, vector)
            for index, vector in enumerate(self._vectors)
        )

    def summary(self) -> ModelSummary:
        return ModelSummary(
            documents_processed=len(self._vectors),
            vocabulary_size=len(self._vocabulary),
            tracked_terms=len(self._document_frequencies),
        )

    def __len__(self) -> int:
        return len(self._vectors)


def fit_corpus(
    documents: Sequence[Iterable[str]] | None,
    unknown_term: str = UNCATEGORIZED,
) -> CorpusModel:
    """Create a model and fit it on a corpus.

    Args:
        documents: Corpus of tokenized documents.
        unknown_term: Sentinel substituted for unrecognized terms.

    Returns:
        The fitted CorpusModel.
    """
    model = CorpusModel(unknown_term=unknown_term)
    model.fit_documents(documents)
    return model
