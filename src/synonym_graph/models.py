"""Domain model dataclasses and enums for synonym-graph."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from synonym_graph.exceptions import ValidationError
from synonym_graph.words import canonical, is_blank

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class ValidationFailure(str, Enum):
    """Reason a proposed link was rejected."""

    INVALID_WORD = "InvalidWord"
    INVALID_SYNONYM_LIST = "InvalidSynonymList"
    SELF_REFERENCE = "SelfReference"


class EditOperation(str, Enum):
    """Type of mutation recorded in the edit history."""

    LINK = "LINK"


class FindingSeverity(str, Enum):
    """Severity level for graph invariant findings."""

    ERROR = "ERROR"
    WARNING = "WARNING"


# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating a proposed link: ok, or one failure kind."""

    failure: ValidationFailure | None = None
    message: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.failure is None

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls()

    @classmethod
    def fail(cls, failure: ValidationFailure, message: str) -> ValidationResult:
        return cls(failure=failure, message=message)

    def raise_for_failure(self) -> None:
        """Raise ValidationError if this result is a rejection."""
        if self.failure is not None:
            raise ValidationError(self.message or self.failure.value, self.failure)


@dataclass(frozen=True, slots=True)
class SynonymGroup:
    """A word plus its resolved synonym set.

    Synonyms are display spellings; identity and membership are
    case-insensitive. Blank candidates, the word itself and canonical
    duplicates are dropped (the first spelling wins).
    """

    word: str
    synonyms: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        if is_blank(self.word):
            raise ValidationError(
                "Synonym group word cannot be empty",
                ValidationFailure.INVALID_WORD,
            )
        object.__setattr__(
            self, "synonyms", _collect(self.word, self.synonyms)
        )

    def add(self, candidate: str) -> SynonymGroup:
        """Return a group that also holds *candidate*.

        Blank candidates, the group's own word and existing members are
        ignored and the same group is returned.
        """
        if is_blank(candidate) or candidate in self:
            return self
        if canonical(candidate) == canonical(self.word):
            return self
        return SynonymGroup(self.word, (*self.synonyms, candidate))

    def __contains__(self, candidate: object) -> bool:
        if not isinstance(candidate, str):
            return False
        key = canonical(candidate)
        return any(canonical(s) == key for s in self.synonyms)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.synonyms, key=_sort_key))

    def __len__(self) -> int:
        return len(self.synonyms)

    def to_dict(self) -> dict[str, Any]:
        return {"word": self.word, "synonyms": list(self)}


@dataclass(frozen=True, slots=True)
class EditRecord:
    """A single edit-history entry recording one successful link."""

    id: int
    operation: str
    word: str
    synonyms: tuple[str, ...]
    new_relations: int
    timestamp: str


@dataclass(frozen=True, slots=True)
class InvariantFinding:
    """A single graph invariant finding."""

    rule_id: str
    severity: str
    word: str
    message: str
    details: dict[str, Any] | None


def _collect(word: str, candidates: Iterable[str]) -> frozenset[str]:
    own = canonical(word)
    seen: dict[str, str] = {}
    for candidate in candidates:
        if is_blank(candidate):
            continue
        key = canonical(candidate)
        if key == own or key in seen:
            continue
        seen[key] = candidate
    return frozenset(seen.values())


def _sort_key(word: str) -> tuple[str, str]:
    return (canonical(word), word)
