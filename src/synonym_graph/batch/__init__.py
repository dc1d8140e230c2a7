"""
Batch link request module for synonym-graph.

This module loads synonym groups from YAML files and applies them to a
SynonymStore.

Example usage:
    from synonym_graph import SynonymStore
    from synonym_graph.batch import (
        load_link_request,
        validate_link_request,
        execute_link_request,
    )

    # Load from YAML file
    request = load_link_request("groups.yaml")

    # Validate before execution
    validation = validate_link_request(request)
    if not validation.is_valid:
        for error in validation.errors:
            print(f"[{error.index}] {error.word}: {error.message}")

    # Execute, rolling everything back on the first rejected group
    store = SynonymStore()
    result = execute_link_request(request, store, atomic=True)
    print(f"Applied {result.success_count}/{result.total_count} groups")
"""

from .schema import (
    REQUIRED_GROUP_FIELDS as REQUIRED_GROUP_FIELDS,
    GroupSpec as GroupSpec,
    LinkRequest as LinkRequest,
    BatchIssue as BatchIssue,
    BatchValidation as BatchValidation,
    GroupResult as GroupResult,
    BatchResult as BatchResult,
)

from .parser import (
    load_link_request as load_link_request,
    ParseError as ParseError,
)

from .validator import (
    validate_link_request as validate_link_request,
)

from .executor import (
    execute_link_request as execute_link_request,
)

__all__ = [
    # Constants
    "REQUIRED_GROUP_FIELDS",
    # Data classes
    "GroupSpec",
    "LinkRequest",
    "BatchIssue",
    "BatchValidation",
    "GroupResult",
    "BatchResult",
    # Functions
    "load_link_request",
    "validate_link_request",
    "execute_link_request",
    # Exceptions
    "ParseError",
]
