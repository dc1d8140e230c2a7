"""
Executor for batch link requests.

Applies groups to a SynonymStore in file order.
"""
from __future__ import annotations

import logging
import time
from typing import List

from ..exceptions import ValidationError
from ..store import SynonymStore
from ..validator import validate_link
from .schema import BatchResult, GroupResult, GroupSpec, LinkRequest

logger = logging.getLogger(__name__)


def execute_link_request(
    request: LinkRequest,
    store: SynonymStore,
    dry_run: bool = False,
    atomic: bool = False,
) -> BatchResult:
    """Execute a batch link request.

    Args:
        request: The link request to execute
        store: Store the groups are linked into
        dry_run: If True, only validate each group without linking
        atomic: If True, the first rejected group rolls back every group
            already applied and stops execution

    Returns:
        BatchResult with details of each group
    """
    start_time = time.time()
    results: List[GroupResult] = []
    rolled_back = False

    if dry_run:
        results = [_dry_run_group(group) for group in request.groups]
    elif atomic:
        try:
            with store.batch():
                for group in request.groups:
                    result = _apply_group(group, store)
                    results.append(result)
                    if not result.success:
                        raise ValidationError(result.message)
        except ValidationError:
            rolled_back = True
            logger.warning(
                f"Rolled back {len(results) - 1} applied group(s) after "
                f"{request.groups[len(results) - 1].describe()} was rejected"
            )
    else:
        results = [_apply_group(group, store) for group in request.groups]

    if rolled_back:
        results = [
            r if not r.success else GroupResult(
                index=r.index,
                word=r.word,
                success=False,
                message="Rolled back",
            )
            for r in results
        ]
        success_count = 0
    else:
        success_count = sum(1 for r in results if r.success)

    return BatchResult(
        total_count=len(request.groups),
        success_count=success_count,
        failure_count=sum(1 for r in results if not r.success),
        groups=results,
        duration_seconds=time.time() - start_time,
        rolled_back=rolled_back,
        dry_run=dry_run,
    )


def _apply_group(group: GroupSpec, store: SynonymStore) -> GroupResult:
    """Link a single group.

    Returns:
        GroupResult with success/failure status
    """
    try:
        result = store.link(group.word, group.synonyms)
    except Exception as e:
        logger.exception(f"Error applying {group.describe()}")
        return GroupResult(
            index=group.index,
            word=group.word,
            success=False,
            message=f"Error: {e}",
        )
    if not result.is_valid:
        logger.warning(f"Rejected {group.describe()}: {result.message}")
        return GroupResult(
            index=group.index,
            word=group.word,
            success=False,
            message=result.message or "",
            failure=result.failure.value if result.failure else None,
        )
    return GroupResult(
        index=group.index,
        word=group.word,
        success=True,
        message=f"Linked {group.word} with {len(group.synonyms)} synonym(s)",
    )


def _dry_run_group(group: GroupSpec) -> GroupResult:
    """Validate a group without linking it."""
    result = validate_link(group.word, group.synonyms)
    return GroupResult(
        index=group.index,
        word=group.word,
        success=result.is_valid,
        message="Would link" if result.is_valid else result.message or "",
        failure=result.failure.value if result.failure else None,
    )
