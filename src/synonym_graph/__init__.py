"""In-memory synonym graph with case-insensitive, bidirectional links."""

__version__ = "0.1.0"

from .exceptions import (
    SynonymGraphError as SynonymGraphError,
    ValidationError as ValidationError,
    WordNotFoundError as WordNotFoundError,
    InvariantViolationError as InvariantViolationError,
    DataImportError as DataImportError,
)

from .models import (
    ValidationFailure as ValidationFailure,
    EditOperation as EditOperation,
    FindingSeverity as FindingSeverity,
    ValidationResult as ValidationResult,
    SynonymGroup as SynonymGroup,
    EditRecord as EditRecord,
    InvariantFinding as InvariantFinding,
)

from .validator import (
    validate_link as validate_link,
)

from .store import (
    SynonymStore as SynonymStore,
)

from .service import (
    SynonymService as SynonymService,
    SynonymsResponse as SynonymsResponse,
    SaveResponse as SaveResponse,
)

from .importer import (
    ImportSummary as ImportSummary,
    import_from_wn as import_from_wn,
)

# Batch module - import as submodule to avoid naming conflicts
from . import batch

__all__ = [
    # Batch module
    "batch",
    # Engine
    "SynonymStore",
    "SynonymService",
    "validate_link",
    "import_from_wn",
    # Models
    "ValidationFailure",
    "EditOperation",
    "FindingSeverity",
    "ValidationResult",
    "SynonymGroup",
    "EditRecord",
    "InvariantFinding",
    "SynonymsResponse",
    "SaveResponse",
    "ImportSummary",
    # Exceptions
    "SynonymGraphError",
    "ValidationError",
    "WordNotFoundError",
    "InvariantViolationError",
    "DataImportError",
]
