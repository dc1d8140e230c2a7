"""
Data classes for the batch link request system.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional


# =============================================================================
# Field Requirements
# =============================================================================

REQUIRED_GROUP_FIELDS: List[str] = ["word", "synonyms"]


# =============================================================================
# Data Classes
# =============================================================================

@dataclass
class GroupSpec:
    """A word and the synonyms to link with it."""
    word: Any
    synonyms: Any
    index: int = 0

    def describe(self) -> str:
        return f"group #{self.index + 1} ({self.word!r})"


@dataclass
class LinkRequest:
    """Parsed link request from YAML."""
    groups: List[GroupSpec]
    session_name: Optional[str] = None
    session_description: Optional[str] = None
    source_file: Optional[Path] = None


@dataclass
class BatchIssue:
    """Validation error or warning for a specific group."""
    index: int
    word: Any
    message: str
    failure: Optional[str] = None


@dataclass
class BatchValidation:
    """Result of validating a link request."""
    is_valid: bool
    errors: List[BatchIssue] = field(default_factory=list)
    warnings: List[BatchIssue] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)


@dataclass
class GroupResult:
    """Result of applying a single group."""
    index: int
    word: Any
    success: bool
    message: str
    failure: Optional[str] = None


@dataclass
class BatchResult:
    """Result of executing a link request."""
    total_count: int
    success_count: int
    failure_count: int
    groups: List[GroupResult]
    duration_seconds: float
    rolled_back: bool = False
    dry_run: bool = False

    @property
    def skipped_count(self) -> int:
        return self.total_count - self.success_count - self.failure_count

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total_count,
            "success": self.success_count,
            "failed": self.failure_count,
            "skipped": self.skipped_count,
            "rolled_back": self.rolled_back,
        }
