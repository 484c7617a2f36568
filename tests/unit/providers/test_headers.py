"""Tests for xcdocs.providers.headers."""

from unittest.mock import AsyncMock, patch

import pytest

from xcdocs.core.errors import ProviderError
from xcdocs.core.process import CommandResult
from xcdocs.providers.headers import GrepHeaderSearch


def patch_run(result: CommandResult):
    return patch(
        "xcdocs.providers.headers.run_command", new_callable=AsyncMock, return_value=result
    )


class TestFindFiles:
    @pytest.mark.asyncio
    async def test_command_and_cap(self) -> None:
        with patch_run(CommandResult(0, "/f/a.h\n/f/b.h\n/f/c.h\n")) as mock_run:
            files = await GrepHeaderSearch("/usr/bin/grep").find_files("-url", "/f", 2)

        assert files == ["/f/a.h", "/f/b.h"]
        mock_run.assert_awaited_once_with(
            ["/usr/bin/grep", "-r", "-l", "-i", "-F", "--include=*.h", "-e", "-url", "/f"],
            timeout=None,
        )

    @pytest.mark.asyncio
    async def test_no_match_exit_status(self) -> None:
        with patch_run(CommandResult(1, "")):
            assert await GrepHeaderSearch().find_files("zzz", "/f", 5) == []

    @pytest.mark.asyncio
    async def test_error_without_output_raises(self) -> None:
        with patch_run(CommandResult(2, "")):
            with pytest.raises(ProviderError, match="exit status 2"):
                await GrepHeaderSearch().find_files("x", "/missing", 5)

    @pytest.mark.asyncio
    async def test_error_with_output_keeps_matches(self) -> None:
        with patch_run(CommandResult(2, "/f/a.h\n")):
            assert await GrepHeaderSearch().find_files("x", "/f", 5) == ["/f/a.h"]


class TestSearchContext:
    @pytest.mark.asyncio
    async def test_command(self) -> None:
        output = "/f/NSView.h-1-\n/f/NSView.h:3:@interface NSView\n"
        with patch_run(CommandResult(0, output)) as mock_run:
            text = await GrepHeaderSearch(timeout=3.0).search_context("NSView", "/f")

        assert text == output
        mock_run.assert_awaited_once_with(
            [
                "/usr/bin/grep", "-r", "-n", "-A", "5", "-B", "2",
                "-F", "--include=*.h", "-e", "NSView", "/f",
            ],
            timeout=3.0,
        )

    @pytest.mark.asyncio
    async def test_no_match(self) -> None:
        with patch_run(CommandResult(1, "")):
            assert await GrepHeaderSearch().search_context("NSView", "/f") == ""
