"""termweight - TF-IDF scoring for pre-tokenized document corpora."""

from termweight.config import Settings, settings
from termweight.exceptions import (
    CorpusFileError,
    DocumentNotFoundError,
    InvalidInputError,
    TermWeightError,
)
from termweight.scoring import UNCATEGORIZED, CorpusModel, fit_corpus

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Configuration
    "Settings",
    "settings",
    # Model
    "UNCATEGORIZED",
    "CorpusModel",
    "fit_corpus",
    # Exceptions
    "CorpusFileError",
    "DocumentNotFoundError",
    "InvalidInputError",
    "TermWeightError",
]
