"""SynonymStore: the in-memory synonym graph engine."""

from __future__ import annotations

import logging
import threading
from collections.abc import Generator, Iterable
from contextlib import contextmanager
from typing import Any

from synonym_graph import history as _hist
from synonym_graph.exceptions import InvariantViolationError, ValidationError
from synonym_graph.models import (
    EditRecord,
    FindingSeverity,
    InvariantFinding,
    SynonymGroup,
    ValidationFailure,
    ValidationResult,
)
from synonym_graph.validator import check_graph, validate_link
from synonym_graph.words import canonical, is_blank

logger = logging.getLogger(__name__)


class SynonymStore:
    """Bidirectional synonym relations between case-insensitive words.

    Every successful :meth:`link` joins the word and all of its synonyms
    into one fully connected group. All state is guarded by a single
    re-entrant lock, so readers never see a half-applied link or batch.
    """

    def __init__(self, *, record_history: bool = True) -> None:
        self._neighbors: dict[str, set[str]] = {}
        self._display: dict[str, str] = {}
        self._history: list[EditRecord] = []
        self._record_history = record_history
        self._lock = threading.RLock()
        self._batch_depth = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._neighbors)

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        with self._lock:
            return canonical(word) in self._neighbors

    # ------------------------------------------------------------------
    # Batch context manager
    # ------------------------------------------------------------------

    @contextmanager
    def batch(self) -> Generator[None, None, None]:
        """Apply multiple links atomically.

        The lock is held for the whole block. If a block raises, the graph
        and the history are restored to their state at entry of that block
        and the exception propagates. Nested blocks act as savepoints: an
        inner block that raises undoes only its own links.
        """
        with self._lock:
            self._batch_depth += 1
            snapshot = self._snapshot()
            try:
                yield
            except BaseException:
                self._restore(snapshot)
                logger.debug(f"Rolled back batch at depth {self._batch_depth}")
                raise
            finally:
                self._batch_depth -= 1

    def _snapshot(self) -> tuple[dict[str, set[str]], dict[str, str], int]:
        return (
            {key: set(linked) for key, linked in self._neighbors.items()},
            dict(self._display),
            len(self._history),
        )

    def _restore(
        self, snapshot: tuple[dict[str, set[str]], dict[str, str], int]
    ) -> None:
        neighbors, display, history_len = snapshot
        self._neighbors = neighbors
        self._display = display
        del self._history[history_len:]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def link(self, word: str, synonyms: Iterable[str]) -> ValidationResult:
        """Link *word* and *synonyms* as one group of mutual synonyms.

        Returns the validation result. A rejected link leaves the store
        untouched; a repeated link is a no-op.
        """
        if isinstance(synonyms, Iterable) and not isinstance(synonyms, (str, bytes)):
            synonyms = list(synonyms)
        result = validate_link(word, synonyms)
        if not result.is_valid:
            logger.debug(f"Rejected link for {word!r}: {result.message}")
            return result

        members: dict[str, str] = {}
        for spelling in (word, *synonyms):
            members.setdefault(canonical(spelling), spelling)

        with self._lock:
            added = 0
            for key, spelling in members.items():
                self._display.setdefault(key, spelling)
                linked = self._neighbors.setdefault(key, set())
                before = len(linked)
                linked.update(other for other in members if other != key)
                added += len(linked) - before

            if self._record_history and added:
                _hist.record_link(self._history, word, list(synonyms), added // 2)

        logger.debug(
            f"Linked {word!r} with {len(members) - 1} synonym(s), "
            f"{added // 2} new relation(s)"
        )
        return result

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def lookup(self, word: str) -> SynonymGroup:
        """Return the direct synonyms of *word* (empty if unknown)."""
        _require_word(word)
        with self._lock:
            linked = self._neighbors.get(canonical(word), ())
            return SynonymGroup(word, [self._display[k] for k in linked])

    def resolve_transitive(self, word: str) -> SynonymGroup:
        """Return every word reachable from *word* through synonym links."""
        _require_word(word)
        start = canonical(word)
        with self._lock:
            if start not in self._neighbors:
                return SynonymGroup(word)
            visited = {start}
            stack = [start]
            while stack:
                current = stack.pop()
                for other in self._neighbors.get(current, ()):
                    if other not in visited:
                        visited.add(other)
                        stack.append(other)
            visited.discard(start)
            return SynonymGroup(word, [self._display[k] for k in visited])

    def words(self) -> list[str]:
        """All known words in display spelling, sorted case-insensitively."""
        with self._lock:
            return sorted(self._display.values(), key=lambda w: (canonical(w), w))

    def components(self) -> list[list[str]]:
        """Connected synonym groups, each sorted, largest first."""
        with self._lock:
            seen: set[str] = set()
            groups: list[list[str]] = []
            for key in self._neighbors:
                if key in seen:
                    continue
                seen.add(key)
                stack = [key]
                members = []
                while stack:
                    current = stack.pop()
                    members.append(self._display[current])
                    for other in self._neighbors[current]:
                        if other not in seen:
                            seen.add(other)
                            stack.append(other)
                groups.append(sorted(members, key=lambda w: (canonical(w), w)))
        groups.sort(key=lambda g: (-len(g), canonical(g[0])))
        return groups

    # ------------------------------------------------------------------
    # Change Tracking
    # ------------------------------------------------------------------

    def get_history(
        self,
        *,
        word: str | None = None,
        since: str | None = None,
        operation: str | None = None,
    ) -> list[EditRecord]:
        with self._lock:
            return _hist.query_history(
                self._history, word=word, since=since, operation=operation,
            )

    def get_changes_since(self, timestamp: str) -> list[EditRecord]:
        return self.get_history(since=timestamp)

    # ------------------------------------------------------------------
    # Invariants
    # ------------------------------------------------------------------

    def check_invariants(self) -> list[InvariantFinding]:
        with self._lock:
            return check_graph(self._neighbors, self._display)

    def assert_invariants(self) -> None:
        """Raise InvariantViolationError if the graph has ERROR findings."""
        errors = [
            f for f in self.check_invariants()
            if f.severity == FindingSeverity.ERROR.value
        ]
        if errors:
            raise InvariantViolationError(
                f"{len(errors)} invariant violation(s), first: "
                f"{errors[0].rule_id} {errors[0].word!r}: {errors[0].message}"
            )

    def to_dict(self) -> dict[str, Any]:
        """Adjacency view keyed by display spelling, for inspection."""
        with self._lock:
            return {
                self._display[key]: sorted(
                    (self._display[k] for k in linked),
                    key=lambda w: (canonical(w), w),
                )
                for key, linked in self._neighbors.items()
            }


def _require_word(word: object) -> None:
    if is_blank(word):
        raise ValidationError(
            "Word cannot be null or whitespace.",
            ValidationFailure.INVALID_WORD,
        )
