"""Custom exceptions for termweight."""

from typing import Any


class TermWeightError(Exception):
    """Base exception for termweight.

    Attributes:
        message: Human-readable error message
        context: Additional context information
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class InvalidInputError(TermWeightError):
    """Document collection or document is missing or malformed.

    Attributes:
        argument: Name of the offending argument
    """

    def __init__(self, message: str, argument: str | None = None, **context: Any) -> None:
        super().__init__(message, argument=argument, **context)
        self.argument = argument


class DocumentNotFoundError(TermWeightError):
    """No vector exists for the requested document.

    Attributes:
        index: The requested document index
    """

    def __init__(self, message: str, index: int | None = None) -> None:
        super().__init__(message, index=index)
        self.index = index


class CorpusFileError(TermWeightError):
    """Corpus file could not be read or parsed.

    Attributes:
        path: Path of the corpus file
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message, path=path)
        self.path = path
