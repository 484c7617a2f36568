"""Report commands: `xcdocs check` and `xcdocs tools`."""

import os
import shutil
from dataclasses import dataclass

from rich.markup import escape
from rich.table import Table

from xcdocs.cli.output import console
from xcdocs.config.schema import Config
from xcdocs.core.constants import frameworks_dir
from xcdocs.mcp.definitions import TOOLS
from xcdocs.providers.base import SdkResolver
from xcdocs.providers.sdk import XcrunSdkResolver


@dataclass(frozen=True)
class CheckRow:
    """One line of the environment report.

    Attributes:
        item: What was checked.
        value: The path or binary checked.
        ok: Whether it exists (or is executable, for binaries).
        required: Whether the server cannot work without it.
    """

    item: str
    value: str
    ok: bool
    required: bool = False


async def collect_checks(config: Config, sdk: SdkResolver | None = None) -> list[CheckRow]:
    if sdk is None:
        sdk = XcrunSdkResolver(
            config.sdk.xcrun, config.sdk.fallback_path, timeout=config.process.timeout_seconds
        )
    sdk_root = await sdk.resolve()
    header_root = config.search.header_search_root or str(frameworks_dir(sdk_root))

    rows = [
        CheckRow("xcrun", config.sdk.xcrun, shutil.which(config.sdk.xcrun) is not None, True),
        CheckRow("mdfind", config.search.mdfind, shutil.which(config.search.mdfind) is not None, True),
        CheckRow("grep", config.search.grep, shutil.which(config.search.grep) is not None, True),
        CheckRow("SDK root", sdk_root, os.path.isdir(sdk_root)),
        CheckRow("Header search root", header_root, os.path.isdir(header_root)),
    ]
    for root in config.search.documentation_roots:
        rows.append(CheckRow("Documentation root", root, os.path.isdir(root)))
    return rows


def render_checks(rows: list[CheckRow]) -> Table:
    table = Table(title="xcdocs environment")
    table.add_column("Item")
    table.add_column("Path")
    table.add_column("Status")
    for row in rows:
        if row.ok:
            status = "[green]ok[/green]"
        elif row.required:
            status = "[bold red]missing[/bold red]"
        else:
            status = "[yellow]missing[/yellow]"
        table.add_row(row.item, escape(row.value), status)
    return table


async def cmd_check(config: Config) -> int:
    """Print the environment report.

    Returns:
        1 if a required binary is missing, else 0.
    """
    rows = await collect_checks(config)
    console.print(render_checks(rows))
    return 1 if any(row.required and not row.ok for row in rows) else 0


def cmd_tools() -> int:
    table = Table(title="xcdocs tools")
    table.add_column("Tool")
    table.add_column("Required")
    table.add_column("Description")
    for tool in TOOLS:
        schema = tool["inputSchema"]
        required = ", ".join(schema.get("required", []))
        table.add_row(tool["name"], required or "-", escape(tool["description"]))
    console.print(table)
    return 0
