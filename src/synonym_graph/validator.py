"""Validation engine for synonym-graph.

Two layers live here: :func:`validate_link` guards a single mutation
before it reaches the store, and :func:`check_graph` audits a whole
neighbor map for the relation invariants.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Set

from synonym_graph.models import (
    FindingSeverity,
    InvariantFinding,
    ValidationFailure,
    ValidationResult,
)
from synonym_graph.words import canonical, is_blank


def validate_link(word: object, synonyms: object) -> ValidationResult:
    """Check a proposed (word, synonyms) pair.

    Rules run in order and the first failure is reported. Nothing is
    normalized or deduplicated here; the store does that after a pass.
    """
    if is_blank(word):
        return ValidationResult.fail(
            ValidationFailure.INVALID_WORD,
            "Word cannot be null or whitespace.",
        )

    items = _as_list(synonyms)
    if not items or any(is_blank(s) for s in items):
        return ValidationResult.fail(
            ValidationFailure.INVALID_SYNONYM_LIST,
            "Synonyms list cannot be empty or contain null, empty, "
            "or whitespace values.",
        )

    own = canonical(word)  # type: ignore[arg-type]
    if any(canonical(s) == own for s in items):
        return ValidationResult.fail(
            ValidationFailure.SELF_REFERENCE,
            "Synonyms list cannot contain the word itself.",
        )

    return ValidationResult.ok()


def _as_list(synonyms: object) -> list:
    # A bare string is iterable but is never a synonym list.
    if synonyms is None or isinstance(synonyms, (str, bytes)):
        return []
    if not isinstance(synonyms, Iterable):
        return []
    return list(synonyms)


# ---------------------------------------------------------------------------
# Graph invariants
# ---------------------------------------------------------------------------

def check_graph(
    neighbors: Mapping[str, Set[str]],
    display: Mapping[str, str],
) -> list[InvariantFinding]:
    """Run all invariant rules over a neighbor map."""
    results: list[InvariantFinding] = []
    results.extend(_val_sym_001(neighbors, display))
    results.extend(_val_sym_002(neighbors, display))
    results.extend(_val_sym_003(neighbors, display))
    return results


def _val_sym_001(
    neighbors: Mapping[str, Set[str]], display: Mapping[str, str]
) -> list[InvariantFinding]:
    """Asymmetric links."""
    results = []
    for key, linked in neighbors.items():
        for other in sorted(linked):
            if key in neighbors.get(other, ()):
                continue
            results.append(InvariantFinding(
                rule_id="VAL-SYM-001",
                severity=FindingSeverity.ERROR.value,
                word=display.get(key, key),
                message=f"Missing reverse link from {display.get(other, other)!r}",
                details={"source": key, "target": other},
            ))
    return results


def _val_sym_002(
    neighbors: Mapping[str, Set[str]], display: Mapping[str, str]
) -> list[InvariantFinding]:
    """Self links."""
    return [
        InvariantFinding(
            rule_id="VAL-SYM-002",
            severity=FindingSeverity.ERROR.value,
            word=display.get(key, key),
            message="Word is linked to itself",
            details=None,
        )
        for key, linked in neighbors.items()
        if key in linked
    ]


def _val_sym_003(
    neighbors: Mapping[str, Set[str]], display: Mapping[str, str]
) -> list[InvariantFinding]:
    """Non-canonical keys and words without a display spelling."""
    results = []
    referenced = set(neighbors)
    for linked in neighbors.values():
        referenced.update(linked)
    for key in sorted(referenced):
        if canonical(key) != key:
            results.append(InvariantFinding(
                rule_id="VAL-SYM-003",
                severity=FindingSeverity.ERROR.value,
                word=key,
                message="Stored key is not in canonical form",
                details={"expected": canonical(key)},
            ))
        elif key not in display:
            results.append(InvariantFinding(
                rule_id="VAL-SYM-003",
                severity=FindingSeverity.WARNING.value,
                word=key,
                message="Word has no display spelling",
                details=None,
            ))
    return results
