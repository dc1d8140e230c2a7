"""
Command-line interface for synonym-graph.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..exceptions import DataImportError, ValidationError, WordNotFoundError
from ..service import SynonymService
from ..store import SynonymStore
from .executor import execute_link_request
from .parser import ParseError, load_link_request
from .schema import BatchResult, BatchValidation, LinkRequest
from .validator import validate_link_request

logger = logging.getLogger(__name__)


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the synonym-graph CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    return args.func(args)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="synonym-graph",
        description="Link words as synonyms and query their synonym sets",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s (synonym-graph)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase log output (-v info, -vv debug)",
    )

    subparsers = parser.add_subparsers(title="commands", dest="command")

    # validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a link request file",
    )
    validate_parser.add_argument(
        "file",
        type=Path,
        help="YAML file containing synonym groups",
    )
    validate_parser.set_defaults(func=cmd_validate)

    # apply command
    apply_parser = subparsers.add_parser(
        "apply",
        help="Apply a link request file to a fresh store",
    )
    apply_parser.add_argument(
        "file",
        type=Path,
        help="YAML file containing synonym groups",
    )
    apply_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate each group without linking",
    )
    apply_parser.add_argument(
        "--atomic",
        action="store_true",
        help="Roll back every group if any group is rejected",
    )
    apply_parser.set_defaults(func=cmd_apply)

    # lookup command
    lookup_parser = subparsers.add_parser(
        "lookup",
        help="Show the synonyms of a word",
    )
    lookup_parser.add_argument(
        "word",
        help="Word to look up",
    )
    lookup_parser.add_argument(
        "--file", "-f",
        type=Path,
        action="append",
        default=[],
        dest="files",
        help="YAML file to seed the store from (repeatable)",
    )
    lookup_parser.add_argument(
        "--wordnet",
        metavar="LEXICON",
        help="Seed the store from an installed wn lexicon (e.g. oewn:2024)",
    )
    lookup_parser.add_argument(
        "--direct",
        action="store_true",
        help="Only show directly linked synonyms",
    )
    lookup_parser.set_defaults(func=cmd_lookup)

    # groups command
    groups_parser = subparsers.add_parser(
        "groups",
        help="Show the connected synonym groups of a link request file",
    )
    groups_parser.add_argument(
        "file",
        type=Path,
        help="YAML file containing synonym groups",
    )
    groups_parser.set_defaults(func=cmd_groups)

    return parser


def cmd_validate(args: argparse.Namespace) -> int:
    """Handle validate command."""
    print(f"\nValidating {args.file}...")

    request = _load_or_report(args.file)
    if request is None:
        return 1

    print(f"  Groups: {len(request.groups)}")
    if request.session_name:
        print(f"  Session: {request.session_name}")

    result = validate_link_request(request)

    print("\nValidation Results:")
    _print_validation_result(result)

    if result.is_valid:
        print("\nValidation passed!")
        return 0
    print(f"\nFound {result.error_count} error(s), {result.warning_count} warning(s)")
    return 1


def cmd_apply(args: argparse.Namespace) -> int:
    """Handle apply command."""
    print(f"\nLoading {args.file}...")

    request = _load_or_report(args.file)
    if request is None:
        return 1

    print(f"  Groups: {len(request.groups)}")
    if request.session_name:
        print(f"  Session: \"{request.session_name}\"")

    if args.dry_run:
        print("\n[DRY RUN] Validating groups...")

    store = SynonymStore()
    result = execute_link_request(
        request, store, dry_run=args.dry_run, atomic=args.atomic,
    )
    _print_batch_result(result)

    if not args.dry_run:
        print(f"  Words:   {len(store)}")

    return 1 if result.failure_count > 0 else 0


def cmd_lookup(args: argparse.Namespace) -> int:
    """Handle lookup command."""
    store = SynonymStore(record_history=False)

    for path in args.files:
        request = _load_or_report(path)
        if request is None:
            return 1
        execute_link_request(request, store)

    if args.wordnet:
        from ..importer import import_from_wn

        try:
            summary = import_from_wn(store, args.wordnet)
        except DataImportError as e:
            print(f"[ERROR] {e}")
            return 1
        logger.info(f"Seeded {summary.groups_linked} group(s) from {summary.lexicon}")

    service = SynonymService(store, transitive=not args.direct)
    try:
        response = service.get_synonyms(args.word)
    except ValidationError as e:
        print(f"[ERROR] {e}")
        return 1
    except WordNotFoundError as e:
        print(str(e))
        return 1

    print(f"{response.word}: {', '.join(response.synonyms)}")
    return 0


def cmd_groups(args: argparse.Namespace) -> int:
    """Handle groups command."""
    request = _load_or_report(args.file)
    if request is None:
        return 1

    store = SynonymStore(record_history=False)
    execute_link_request(request, store)

    components = store.components()
    if not components:
        print("No synonym groups found.")
        return 0

    print(f"\nSynonym groups ({len(components)}):\n")
    for i, members in enumerate(components, start=1):
        print(f"  {i:<4} {', '.join(members)}")
    return 0


def _load_or_report(path: Path) -> Optional[LinkRequest]:
    try:
        return load_link_request(path)
    except ParseError as e:
        print(f"\n  [PARSE ERROR] {e}")
        if e.line:
            print(f"               Line: {e.line}")
    except FileNotFoundError as e:
        print(f"\n  [ERROR] {e}")
    return None


def _configure_logging(verbosity: int) -> None:
    levels: List[int] = [logging.WARNING, logging.INFO, logging.DEBUG]
    logging.basicConfig(
        level=levels[min(verbosity, len(levels) - 1)],
        format="%(levelname)s %(name)s: %(message)s",
    )


def _print_validation_result(result: BatchValidation) -> None:
    """Print validation errors and warnings."""
    for error in result.errors:
        print(f"  [ERROR] Group #{error.index + 1} ({error.word!r}): {error.message}")
        if error.failure:
            print(f"          Reason: {error.failure}")

    for warning in result.warnings:
        print(f"  [WARN]  Group #{warning.index + 1} ({warning.word!r}): {warning.message}")


def _print_batch_result(result: BatchResult) -> None:
    """Print batch execution result."""
    print()
    for group in result.groups:
        status = "OK" if group.success else "FAILED"
        print(f"  [{group.index + 1}/{result.total_count}] {group.word}: {status}")
        if group.message:
            print(f"         {group.message}")

    print("\nResults:")
    print(f"  Total:   {result.total_count}")
    print(f"  Success: {result.success_count}")
    print(f"  Failed:  {result.failure_count}")
    print(f"  Time:    {result.duration_seconds:.2f}s")
    if result.rolled_back:
        print("  Rolled back: yes")


if __name__ == "__main__":
    sys.exit(main())
