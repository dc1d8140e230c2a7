"""Edit history recording and querying for synonym-graph."""

from __future__ import annotations

import datetime
from collections.abc import Sequence

from synonym_graph.models import EditOperation, EditRecord
from synonym_graph.words import canonical

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"


def now_timestamp() -> str:
    """Current UTC time in the history timestamp format."""
    return datetime.datetime.now(datetime.timezone.utc).strftime(
        TIMESTAMP_FORMAT
    )


def record_link(
    records: list[EditRecord],
    word: str,
    synonyms: Sequence[str],
    new_relations: int,
) -> EditRecord:
    """Append a LINK operation to *records*."""
    record = EditRecord(
        id=len(records) + 1,
        operation=EditOperation.LINK.value,
        word=word,
        synonyms=tuple(synonyms),
        new_relations=new_relations,
        timestamp=now_timestamp(),
    )
    records.append(record)
    return record


def query_history(
    records: Sequence[EditRecord],
    *,
    word: str | None = None,
    since: str | None = None,
    operation: str | None = None,
) -> list[EditRecord]:
    """Query edit history with optional filters."""
    key = canonical(word) if word is not None else None
    results: list[EditRecord] = []
    for record in records:
        if key is not None and key not in _record_keys(record):
            continue
        if since is not None and not record.timestamp > since:
            continue
        if operation is not None and record.operation != operation:
            continue
        results.append(record)
    return results


def _record_keys(record: EditRecord) -> set[str]:
    keys = {canonical(s) for s in record.synonyms}
    keys.add(canonical(record.word))
    return keys
