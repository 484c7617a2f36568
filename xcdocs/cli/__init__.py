"""Command-line interface."""

import asyncio

from xcdocs.cli.arg_parser import parse_args
from xcdocs.cli.output import print_error
from xcdocs.core.errors import XcdocsError


def main(argv: list[str] | None = None) -> None:
    """Entry point for the xcdocs CLI."""
    args = parse_args(argv)
    try:
        if args.command == "tools":
            from xcdocs.cli.check import cmd_tools

            raise SystemExit(cmd_tools())

        if args.command == "check":
            from xcdocs.cli.check import cmd_check
            from xcdocs.config.loader import load_config

            raise SystemExit(asyncio.run(cmd_check(load_config(args.config))))

        from xcdocs.cli.serve import run_serve

        asyncio.run(run_serve(args.config, verbose=args.verbose, log_file=args.log_file))
    except XcdocsError as e:
        print_error(e.message)
        raise SystemExit(1) from None
    except KeyboardInterrupt:
        pass


__all__ = ["main"]
