"""Request-level operations on top of a SynonymStore.

``get_synonyms`` and ``save_synonyms`` are the two contracts callers
(a CLI, an HTTP handler, an RPC layer) map their transport onto.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from synonym_graph.exceptions import ValidationError, WordNotFoundError
from synonym_graph.models import ValidationFailure
from synonym_graph.store import SynonymStore
from synonym_graph.words import is_blank

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SynonymsResponse:
    """Synonyms found for a word, sorted case-insensitively."""

    word: str
    synonyms: list[str]


@dataclass(frozen=True, slots=True)
class SaveResponse:
    """Outcome of a save request."""

    success: bool
    message: str
    failure: ValidationFailure | None = None


class SynonymService:
    """Maps get/save requests onto a store.

    Lookups expand transitively unless ``transitive=False``.
    """

    def __init__(
        self, store: SynonymStore | None = None, *, transitive: bool = True
    ) -> None:
        self.store = store if store is not None else SynonymStore()
        self.transitive = transitive

    def get_synonyms(self, word: str) -> SynonymsResponse:
        if is_blank(word):
            raise ValidationError(
                "The word parameter cannot be null, empty, or whitespace.",
                ValidationFailure.INVALID_WORD,
            )
        if self.transitive:
            group = self.store.resolve_transitive(word)
        else:
            group = self.store.lookup(word)
        if not group:
            raise WordNotFoundError(f"No synonyms found for the word: {word}")
        return SynonymsResponse(word=group.word, synonyms=list(group))

    def save_synonyms(self, word: str, synonyms: Iterable[str]) -> SaveResponse:
        result = self.store.link(word, synonyms)
        if not result.is_valid:
            logger.info(f"Save rejected for {word!r}: {result.message}")
            return SaveResponse(
                success=False,
                message=result.message or "",
                failure=result.failure,
            )
        return SaveResponse(success=True, message="Synonyms saved successfully.")
