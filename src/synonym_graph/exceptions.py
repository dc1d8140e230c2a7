"""Custom exception hierarchy for synonym-graph."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from synonym_graph.models import ValidationFailure


class SynonymGraphError(Exception):
    """Base exception for all synonym-graph errors."""


class ValidationError(SynonymGraphError):
    """Invalid input (blank word, empty synonym list, self-reference)."""

    def __init__(
        self, message: str, failure: ValidationFailure | None = None
    ) -> None:
        super().__init__(message)
        self.failure = failure


class WordNotFoundError(SynonymGraphError):
    """No synonyms are known for the requested word."""


class InvariantViolationError(SynonymGraphError):
    """The relation graph is corrupt (asymmetric or self links)."""


class DataImportError(SynonymGraphError):
    """Failed to seed the graph from an external lexicon."""
