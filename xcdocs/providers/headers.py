"""SDK header search with grep."""

import logging

from xcdocs.core.errors import ProviderError
from xcdocs.core.process import CommandResult, run_command

logger = logging.getLogger(__name__)

# Lines of context around each match in symbol lookups
CONTEXT_AFTER = 5
CONTEXT_BEFORE = 2


class GrepHeaderSearch:
    """HeaderSearchProvider backed by grep over `*.h` files.

    Queries are matched as fixed strings, not regular expressions, and are
    passed with -e so a leading dash is never read as an option.
    """

    def __init__(self, grep: str = "/usr/bin/grep", timeout: float | None = None) -> None:
        self._grep = grep
        self._timeout = timeout

    async def find_files(self, query: str, root: str, max_results: int) -> list[str]:
        """List header files under root that mention query, case-insensitively.

        Raises:
            ProviderError: If grep cannot be run, times out, or fails without output.
        """
        cmd = [self._grep, "-r", "-l", "-i", "-F", "--include=*.h", "-e", query, root]
        result = self._check(await run_command(cmd, timeout=self._timeout))
        return result.lines()[:max_results]

    async def search_context(self, symbol: str, root: str) -> str:
        """Return matching header lines with surrounding context, or "" if none.

        Raises:
            ProviderError: If grep cannot be run, times out, or fails without output.
        """
        cmd = [
            self._grep, "-r", "-n",
            "-A", str(CONTEXT_AFTER), "-B", str(CONTEXT_BEFORE),
            "-F", "--include=*.h", "-e", symbol, root,
        ]
        result = self._check(await run_command(cmd, timeout=self._timeout))
        return result.stdout

    def _check(self, result: CommandResult) -> CommandResult:
        # grep exits 1 for "no match" and 2 for errors; unreadable files under
        # root give 2 even when other files matched, so only fail without output
        if result.returncode > 1 and not result.stdout:
            raise ProviderError(f"grep failed with exit status {result.returncode}")
        return result
