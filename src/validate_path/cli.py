#!/usr/bin/env python3
"""CLI interface for validate_path."""

import argparse
from pathlib import Path

from common.logger import error, setup_logging

from . import messages
from .api import validate_path
from .classifier import PathClassifier
from .constants import WILDCARD
from .errors import InvalidArgumentError
from .extensions import resolve_extensions
from .parsers import create_parser, get_parser
from .reporters import PathReporter

# Exit code for malformed arguments, matching argparse
EXIT_USAGE = 2


def _build_classifier(platform: str) -> PathClassifier:
    parser = get_parser() if platform == "auto" else create_parser(platform)
    return PathClassifier(parser=parser)


def cmd_check(args):
    """Classify one or more paths.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 if every path is valid, 1 if any is not, 2 for bad arguments)
    """
    valid_extensions = args.ext if args.ext else WILDCARD

    try:
        classifier = _build_classifier(args.platform)
    except ValueError as e:
        error(str(e))
        return EXIT_USAGE

    try:
        results = [
            validate_path(p, args.type, valid_extensions, classifier=classifier)
            for p in args.paths
        ]
    except InvalidArgumentError as e:
        error(str(e))
        return EXIT_USAGE

    reporter = PathReporter(show_info=args.show_info)

    if args.format == "json":
        output = reporter.report_json(results)
        if args.output:
            output_path = Path(args.output)
            output_path.write_text(output, encoding="utf-8")
            print(f"Classification results written to {output_path}")
        else:
            print(output)
        return 0 if all(r.is_valid for r in results) else 1

    return reporter.report_console(results)


def cmd_extensions(args):
    """Show which extensions a specification accepts.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 2 for a malformed specification)
    """
    try:
        spec = resolve_extensions(args.ext if args.ext else WILDCARD)
    except InvalidArgumentError as e:
        error(str(e))
        return EXIT_USAGE

    print(f"{messages.accepted_extensions(spec)}.")
    if spec.has_explicit:
        for ext in sorted(spec.extensions):
            print(f"  {ext or '(none)'}")
    return 0


def main():
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Check path formats without touching the filesystem"
    )
    parser.add_argument("--log-level", type=str, default="INFO", help="Logging level")
    parser.add_argument("--log-file", type=str, help="Also write log records to this file")

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Check command
    check_parser = subparsers.add_parser("check", help="Check one or more paths")
    check_parser.add_argument("paths", nargs="+", help="Paths to check")
    check_parser.add_argument(
        "--type",
        type=str,
        default="any",
        help="Location the paths must denote: any, file, dir or directory",
    )
    check_parser.add_argument(
        "--ext",
        action="append",
        help="Valid file extension; repeatable. '.' for any, '' for none, or a group such as 'image'",
    )
    check_parser.add_argument(
        "--platform",
        choices=["auto", "posix", "windows"],
        default="auto",
        help="Path grammar to check against (default: VALIDATE_PATH_PLATFORM or the host)",
    )
    check_parser.add_argument(
        "--format",
        choices=["console", "json"],
        default="console",
        help="Output format",
    )
    check_parser.add_argument("--output", type=str, help="Write JSON results to file")
    check_parser.add_argument(
        "--no-info",
        dest="show_info",
        action="store_false",
        help="Hide info-level formatting messages",
    )
    check_parser.set_defaults(func=cmd_check)

    # Extensions command
    ext_parser = subparsers.add_parser(
        "extensions", help="Show the extensions a specification accepts"
    )
    ext_parser.add_argument("--ext", action="append", help="Extension entry; repeatable")
    ext_parser.set_defaults(func=cmd_extensions)

    args = parser.parse_args()
    setup_logging(level=args.log_level, log_file=args.log_file)
    return args.func(args)


if __name__ == "__main__":
    exit(main())
