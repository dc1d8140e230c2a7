"""
Validation for batch link requests.

Runs the link validator over every group without touching a store.
"""
from __future__ import annotations

import logging
from typing import Dict, FrozenSet, List

from ..validator import validate_link
from ..words import canonical
from .schema import BatchIssue, BatchValidation, GroupSpec, LinkRequest

logger = logging.getLogger(__name__)


def validate_link_request(request: LinkRequest) -> BatchValidation:
    """Validate a link request.

    Args:
        request: The link request to validate

    Returns:
        BatchValidation with errors and warnings
    """
    errors: List[BatchIssue] = []
    warnings: List[BatchIssue] = []
    seen: Dict[FrozenSet[str], int] = {}

    for group in request.groups:
        result = validate_link(group.word, group.synonyms)
        if not result.is_valid:
            errors.append(
                BatchIssue(
                    index=group.index,
                    word=group.word,
                    message=result.message or "",
                    failure=result.failure.value if result.failure else None,
                )
            )
            continue

        key = _group_key(group)
        if key in seen:
            warnings.append(
                BatchIssue(
                    index=group.index,
                    word=group.word,
                    message=f"Repeats group #{seen[key] + 1}; it adds no relations",
                )
            )
        else:
            seen[key] = group.index

    logger.debug(
        f"Validated {len(request.groups)} group(s): "
        f"{len(errors)} error(s), {len(warnings)} warning(s)"
    )
    return BatchValidation(
        is_valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )


def _group_key(group: GroupSpec) -> FrozenSet[str]:
    return frozenset(canonical(w) for w in (group.word, *group.synonyms))
