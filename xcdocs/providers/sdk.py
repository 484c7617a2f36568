"""SDK location and directory listing."""

import asyncio
import logging
import os

from xcdocs.config.schema import DEFAULT_SDK_PATH
from xcdocs.core.errors import ProviderError
from xcdocs.core.process import run_command

logger = logging.getLogger(__name__)


class XcrunSdkResolver:
    """SdkResolver backed by `xcrun --show-sdk-path`, with a fixed fallback."""

    def __init__(
        self,
        xcrun: str = "/usr/bin/xcrun",
        fallback_path: str = DEFAULT_SDK_PATH,
        timeout: float | None = None,
    ) -> None:
        self._xcrun = xcrun
        self._fallback_path = fallback_path
        self._timeout = timeout

    async def resolve(self) -> str:
        try:
            result = await run_command([self._xcrun, "--show-sdk-path"], timeout=self._timeout)
        except ProviderError as e:
            logger.debug("xcrun --show-sdk-path failed: %s", e)
            return self._fallback_path

        path = result.stdout.strip()
        if result.ok and path:
            return path
        logger.debug("xcrun printed no SDK path, using fallback %s", self._fallback_path)
        return self._fallback_path


class LocalDirectoryLister:
    """DirectoryLister for the local filesystem."""

    async def list_entries(self, path: str) -> list[str]:
        try:
            return await asyncio.to_thread(os.listdir, path)
        except OSError as e:
            raise ProviderError(f"Cannot list {path}: {e.strerror or e}") from e
