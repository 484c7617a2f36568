"""Spotlight (mdfind) content search."""

import logging
import os

from xcdocs.core.process import run_command

logger = logging.getLogger(__name__)

# Content types Spotlight results are restricted to
DOCUMENTATION_CONTENT_TYPES = ("public.source-code", "public.header", "public.documentation")


def build_query_expression(query: str) -> str:
    """Build the Spotlight query for a documentation search.

    Matches exact display name, display name substring, `*query*.h` and
    `*query*.swift` file names, or text content, restricted to source,
    header, and documentation content types. Single quotes are escaped so
    the query cannot terminate a string literal in the expression.
    """
    q = query.replace("'", "\\'")
    name_clauses = " || ".join([
        f"kMDItemDisplayName == '{q}'wc",
        f"kMDItemDisplayName == '*{q}*'wcd",
        f"kMDItemFSName == '*{q}*.h'",
        f"kMDItemFSName == '*{q}*.swift'",
        f"kMDItemTextContent == '*{q}*'wcd",
    ])
    type_clauses = " || ".join(
        f"kMDItemContentType == '{t}'" for t in DOCUMENTATION_CONTENT_TYPES
    )
    return f"({name_clauses}) && ({type_clauses})"


def existing_roots(roots: list[str]) -> list[str]:
    """Keep only the roots that exist on disk, in order."""
    return [root for root in roots if os.path.exists(root)]


class SpotlightSearch:
    """ContentSearchProvider backed by /usr/bin/mdfind."""

    def __init__(self, mdfind: str = "/usr/bin/mdfind", timeout: float | None = None) -> None:
        self._mdfind = mdfind
        self._timeout = timeout

    async def discover_paths(self, expression: str, roots: list[str]) -> list[str]:
        """Run mdfind scoped to roots and return the matching paths.

        Raises:
            ProviderError: If mdfind cannot be run or times out.
        """
        cmd = [self._mdfind]
        for root in roots:
            cmd.extend(["-onlyin", root])
        cmd.append(expression)

        result = await run_command(cmd, timeout=self._timeout)
        paths = result.lines()
        logger.debug("mdfind returned %d paths", len(paths))
        return paths
