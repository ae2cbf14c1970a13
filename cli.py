#!/usr/bin/env python3
"""
CLI interface for weblink-browse.

Usage:
    weblink browse [folder_id]
    weblink fetch [folder_id] [-o OUTPUT]
    weblink [folder_id]          # same as fetch

Portal settings come from config.py, overridable with WEBLINK_* environment
variables.
"""

import argparse
import sys

import config
from adapters.weblink import ROOT_FOLDER_ID
from logging_config import configure_logging
from models import ErrorKind, WeblinkError
from tools import do_browse, do_fetch
from validation import parse_folder_id

COMMANDS = ("browse", "fetch")

USAGE = """Usage:
  weblink browse [folderId]
  weblink fetch <folderId>
  weblink [folderId]"""


def _folder_id(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        return parse_folder_id(value)
    except ValueError:
        raise WeblinkError(ErrorKind.INVALID_INPUT, "Invalid folder ID")


def cmd_browse(args: argparse.Namespace) -> None:
    """Interactive folder browser."""
    folder_id = _folder_id(args.folder_id, ROOT_FOLDER_ID)
    do_browse(args.config, folder_id, prefix=args.prefix)


def cmd_fetch(args: argparse.Namespace) -> None:
    """Fetch a folder listing to a JSON snapshot."""
    folder_id = _folder_id(args.folder_id, config.default_folder_id())
    do_fetch(args.config, folder_id, output_path=args.output, prefix=args.prefix)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weblink",
        description="Laserfiche WebLink folder browser and fetcher",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    weblink                      # fetch the default folder
    weblink 123456               # fetch folder 123456
    weblink fetch 123456 -o council.json
    weblink browse               # browse from the repository root
    WEBLINK_REPO=OtherRepo weblink browse 42
""",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Log level for stderr diagnostics (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # browse
    browse_p = subparsers.add_parser("browse", help="Interactive folder browser")
    browse_p.add_argument(
        "folder_id",
        nargs="?",
        help=f"Folder to start in (default: root, {ROOT_FOLDER_ID})",
    )
    browse_p.set_defaults(func=cmd_browse)

    # fetch
    fetch_p = subparsers.add_parser("fetch", help="Fetch folder contents to JSON")
    fetch_p.add_argument(
        "folder_id",
        nargs="?",
        help="Folder to fetch (default: WEBLINK_FOLDER_ID or the built-in default)",
    )
    fetch_p.add_argument(
        "-o", "--output",
        help="Snapshot path (default: <prefix>-entries.json)",
    )
    fetch_p.set_defaults(func=cmd_fetch)

    return parser


def normalize_argv(argv: list[str]) -> list[str]:
    """
    Rewrite the legacy forms to explicit subcommands.

    `weblink` becomes `weblink fetch`; `weblink 123` becomes `weblink fetch 123`.

    Raises:
        ValueError: If the first positional is neither a command nor a folder ID
    """
    positional = [
        i for i, a in enumerate(argv)
        if not a.startswith("-") and (i == 0 or argv[i - 1] != "--log-level")
    ]

    if not positional:
        if any(a in ("-h", "--help") for a in argv):
            return argv
        return [*argv, "fetch"]

    first = positional[0]
    command = argv[first].lower()
    if command in COMMANDS:
        return [*argv[:first], command, *argv[first + 1:]]

    # Raises ValueError for anything that isn't a folder ID either
    parse_folder_id(argv[first])
    return [*argv[:first], "fetch", *argv[first:]]


def main(argv: list[str] | None = None) -> None:
    argv = list(sys.argv[1:] if argv is None else argv)
    try:
        argv = normalize_argv(argv)
    except ValueError:
        print("Error: Invalid command or folder ID", file=sys.stderr)
        print(f"\n{USAGE}", file=sys.stderr)
        sys.exit(1)

    args = build_parser().parse_args(argv)
    configure_logging(args.log_level or config.default_log_level())

    try:
        args.config = config.load_config()
        args.prefix = config.output_prefix()
        args.func(args)
    except WeblinkError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nGoodbye!")
        sys.exit(130)


if __name__ == "__main__":
    main()
