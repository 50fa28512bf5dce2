"""CLI entry points for tag-based test selection."""
from __future__ import annotations

import argparse
import logging
import sys

from TagSelection.shared.config import TagFilterConfig
from TagSelection.shared.errors import TagSelectionError
from TagSelection.shared.types import TestUnit
from TagSelection.tags.registry import default_registry
from TagSelection.tags.scanner import TagScanner

logger = logging.getLogger("TagSelection")


def _setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
    )


def _add_tags_argument(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--tags",
        default=TagFilterConfig.from_env().tags,
        help="Comma-separated tag filters (default: $TAGS)",
    )


def _add_check_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "check", help="Check whether tests with the given labels would run",
    )
    _add_tags_argument(p)
    p.add_argument("labels", nargs="*", help="Test tags as 'name' or 'type:name'")
    p.set_defaults(func=_cmd_check)


def _add_explain_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser("explain", help="Show how the tag filters are parsed")
    _add_tags_argument(p)
    p.set_defaults(func=_cmd_explain)


def _cmd_check(args: argparse.Namespace) -> int:
    try:
        scanner = TagScanner(args.tags)
        run = scanner.should_run_for_tags(args.labels)
    except TagSelectionError as exc:
        logger.error("[TAG-SELECT] Invalid tags: %s", exc)
        return 2
    logger.info(
        "[TAG-SELECT] %s [%s]", "RUN" if run else "SKIP", ", ".join(args.labels),
    )
    return 0 if run else 1


def _cmd_explain(args: argparse.Namespace) -> int:
    try:
        scanner = TagScanner(args.tags)
    except TagSelectionError as exc:
        logger.error("[TAG-SELECT] Invalid tags: %s", exc)
        return 2
    if not scanner.is_filtering:
        logger.info("[TAG-SELECT] No tag filters: every test runs")
        return 0
    logger.info(
        "[TAG-SELECT] Include: %s",
        ", ".join(str(t) for t in scanner.positive_tags) or "(any)",
    )
    logger.info(
        "[TAG-SELECT] Exclude: %s",
        ", ".join(str(t) for t in scanner.negative_tags) or "(none)",
    )
    for kind in default_registry.available():
        taggable = scanner.is_taggable(TestUnit(kind, runner=kind))
        logger.info(
            "[TAG-SELECT] Runner %s: %s",
            kind, "filtered per test" if taggable else "self-filtering",
        )
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="tag-select",
        description="Tag-based test selection for pytest and Robot Framework",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    _add_check_parser(subparsers)
    _add_explain_parser(subparsers)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(getattr(args, "verbose", False))

    if not args.command:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
