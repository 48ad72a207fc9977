"""Loading of pre-tokenized documents from files."""

from __future__ import annotations

import json
from pathlib import Path

from termweight.exceptions import CorpusFileError
from termweight.logging import get_logger

logger = get_logger("documents")


def parse_json_documents(content: str, path: str | None = None) -> list[list[str]]:
    """Parse a JSON array of token arrays.

    Args:
        content: JSON text.
        path: Source path, used in error messages.

    Returns:
        List of documents.

    Raises:
        CorpusFileError: If the content is not an array of string arrays.
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise CorpusFileError(f"Invalid JSON: {e}", path=path) from e

    if not isinstance(data, list):
        raise CorpusFileError("Expected a JSON array of documents", path=path)

    documents: list[list[str]] = []
    for position, document in enumerate(data):
        if not isinstance(document, list) or not all(isinstance(t, str) for t in document):
            raise CorpusFileError(
                f"Document {position} is not an array of strings", path=path
            )
        documents.append(document)
    return documents


def parse_text_documents(content: str) -> list[list[str]]:
    """Split text into one document per line, terms separated by whitespace.

    Blank lines become empty documents.
    """
    return [line.split() for line in content.splitlines()]


def load_documents(path: Path) -> list[list[str]]:
    """Load tokenized documents from a file.

    ``.json`` files must hold an array of token arrays; any other file is
    read as UTF-8 text with one document per line.

    Args:
        path: File to read.

    Returns:
        List of documents in file order.

    Raises:
        CorpusFileError: If the file cannot be read or parsed.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusFileError(f"Cannot read corpus file: {e}", path=str(path)) from e

    if path.suffix.lower() == ".json":
        documents = parse_json_documents(content, path=str(path))
    else:
        documents = parse_text_documents(content)

    logger.debug("Loaded %d documents from %s", len(documents), path)
    return documents
