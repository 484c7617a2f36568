"""Rich-based output utilities for the xcdocs CLI.

Report commands print to stdout. Errors go to stderr so they never mix
with protocol output while serving.
"""

from rich.console import Console
from rich.markup import escape

# Shared console instances
console = Console(highlight=False)
error_console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    """Print an error message in red on stderr."""
    error_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
