"""Argument parsing for the xcdocs CLI."""

import argparse
from pathlib import Path


def add_common_args(parser: argparse.ArgumentParser, subcommand: bool = False) -> None:
    """Add the options every subcommand accepts.

    Subcommands leave unset options off the namespace, so `xcdocs -v serve`
    and `xcdocs serve -v` both work.
    """
    def default(value: object) -> object:
        return argparse.SUPPRESS if subcommand else value

    parser.add_argument(
        "--config",
        type=Path,
        default=default(None),
        help="Config file (default: $XCDOCS_CONFIG, then ~/.xcdocs/config.json)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        default=default(False),
        help="Log debug output to stderr",
    )
    parser.add_argument(
        "--log-file",
        dest="log_file",
        type=Path,
        default=default(None),
        help="Also write logs to this file (rotated at 5MB)",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="xcdocs",
        description="MCP server for Xcode and Apple SDK documentation",
    )
    add_common_args(parser)

    subparsers = parser.add_subparsers(dest="command")

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the MCP server on stdin/stdout (default)",
    )
    add_common_args(serve_parser, subcommand=True)

    check_parser = subparsers.add_parser(
        "check",
        help="Report the SDK, documentation roots, and external tools in use",
    )
    add_common_args(check_parser, subcommand=True)

    tools_parser = subparsers.add_parser(
        "tools",
        help="List the tools the server exposes",
    )
    add_common_args(tools_parser, subcommand=True)

    args = parser.parse_args(argv)
    if args.command is None:
        args.command = "serve"
    return args
