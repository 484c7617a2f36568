"""list_frameworks: frameworks available in the active SDK."""

import logging

from xcdocs.core.constants import FRAMEWORK_SUFFIX, frameworks_dir
from xcdocs.core.errors import ProviderError
from xcdocs.providers import Providers

logger = logging.getLogger(__name__)


def select_frameworks(entries: list[str], name_filter: str | None = None) -> list[str]:
    """Keep `.framework` entries, strip the suffix, sort, and apply the filter."""
    names = sorted(
        entry[: -len(FRAMEWORK_SUFFIX)] for entry in entries if entry.endswith(FRAMEWORK_SUFFIX)
    )
    if name_filter:
        wanted = name_filter.lower()
        names = [name for name in names if wanted in name.lower()]
    return names


async def list_frameworks(providers: Providers, name_filter: str | None = None) -> str:
    sdk_root = await providers.sdk.resolve()
    try:
        entries = await providers.directories.list_entries(str(frameworks_dir(sdk_root)))
    except ProviderError as e:
        logger.warning("Cannot list frameworks: %s", e)
        return f"Error listing frameworks: {e}"

    names = select_frameworks(entries, name_filter)
    if not names:
        return f"No frameworks found matching '{name_filter or ''}'."

    listing = "\n".join(f"  - {name}" for name in names)
    return f"Available frameworks ({len(names)}):\n\n{listing}"
