"""TF-IDF scoring of tokenized documents."""

from termweight.scoring.corpus import CorpusModel, fit_corpus
from termweight.scoring.document_frequency import PHANTOM_DOCUMENTS, DocumentFrequencies
from termweight.scoring.frequency import term_frequencies, term_frequency
from termweight.scoring.idf import calculate_idf, calculate_idf_map
from termweight.scoring.models import DocumentVector, ModelSummary, TermScore
from termweight.scoring.tfidf import ABSENT_TERM_FREQUENCY, combine_tfidf
from termweight.scoring.vocabulary import UNCATEGORIZED, Vocabulary

__all__ = [
    # Models
    "DocumentVector",
    "ModelSummary",
    "TermScore",
    # Vocabulary
    "UNCATEGORIZED",
    "Vocabulary",
    # Frequencies
    "term_frequency",
    "term_frequencies",
    "PHANTOM_DOCUMENTS",
    "DocumentFrequencies",
    # IDF / TF-IDF
    "calculate_idf",
    "calculate_idf_map",
    "ABSENT_TERM_FREQUENCY",
    "combine_tfidf",
    # Corpus
    "CorpusModel",
    "fit_corpus",
]
