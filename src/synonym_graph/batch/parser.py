"""
YAML parser for batch link requests.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from ..exceptions import SynonymGraphError
from .schema import REQUIRED_GROUP_FIELDS, GroupSpec, LinkRequest


class ParseError(SynonymGraphError):
    """Error parsing a link request file."""

    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        super().__init__(message)


def load_link_request(
    source: Union[str, Path, Dict[str, Any]],
) -> LinkRequest:
    """Load a link request from a YAML file, YAML string or dictionary.

    Args:
        source: Path to YAML file, YAML string, or parsed dictionary

    Returns:
        LinkRequest object

    Raises:
        ParseError: If the content cannot be parsed or is invalid
        FileNotFoundError: If the file does not exist
    """
    source_path: Optional[Path] = None

    if isinstance(source, dict):
        data = source
    elif isinstance(source, Path) or (isinstance(source, str) and _is_file_path(source)):
        source_path = Path(source)
        if not source_path.exists():
            raise FileNotFoundError(f"File not found: {source_path}")
        with open(source_path, "r", encoding="utf-8") as f:
            data = _load_yaml(f, "Empty YAML file")
    else:
        data = _load_yaml(source, "Empty YAML content")

    return _parse_link_request(data, source_path)


def _is_file_path(s: str) -> bool:
    """Check if a string looks like a file path."""
    if "\n" in s:
        return False
    if "/" in s or "\\" in s:
        return True
    return s.endswith((".yaml", ".yml"))


def _load_yaml(stream: Any, empty_message: str) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(stream)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        line_num = mark.line + 1 if mark else None
        raise ParseError(f"Invalid YAML: {e}", line=line_num) from e

    if data is None:
        raise ParseError(empty_message)
    if not isinstance(data, dict):
        raise ParseError("YAML root must be a mapping (dictionary)")

    return data


def _parse_link_request(
    data: Dict[str, Any],
    source_path: Optional[Path] = None,
) -> LinkRequest:
    """Parse a dictionary into a LinkRequest object."""
    session = data.get("session") or {}
    if not isinstance(session, dict):
        raise ParseError("Field 'session' must be a mapping")

    groups_data = data.get("groups")
    if groups_data is None:
        raise ParseError("Missing required field: 'groups'")
    if not isinstance(groups_data, list):
        raise ParseError("Field 'groups' must be a list")
    if len(groups_data) == 0:
        raise ParseError("Field 'groups' cannot be empty")

    return LinkRequest(
        groups=_parse_groups(groups_data),
        session_name=session.get("name"),
        session_description=session.get("description"),
        source_file=source_path,
    )


def _parse_groups(groups_data: List[Any]) -> List[GroupSpec]:
    groups = []
    for i, group_data in enumerate(groups_data):
        if not isinstance(group_data, dict):
            raise ParseError(f"Group #{i + 1} must be a mapping (dictionary)")
        for name in REQUIRED_GROUP_FIELDS:
            if name not in group_data:
                raise ParseError(f"Group #{i + 1}: Missing required field '{name}'")
        groups.append(
            GroupSpec(
                word=group_data["word"],
                synonyms=group_data["synonyms"],
                index=i,
            )
        )
    return groups
