"""Tests for xcdocs.tools.symbols: get_symbol_info resolution."""

import asyncio

import pytest

from xcdocs.config.schema import Config
from xcdocs.core.errors import ProviderError
from xcdocs.providers import Providers
from xcdocs.providers.base import SymbolRecord
from xcdocs.tools.symbols import (
    SymbolResolver,
    find_symbol,
    format_header_hit,
    format_symbol,
    similar_titles,
)

URL = SymbolRecord(
    title="URL",
    kind_identifier="swift.struct",
    kind_display_name="Structure",
    declaration="struct URL",
    documentation="A value that identifies a resource.",
)
URL_COMPONENTS = SymbolRecord("URLComponents", "swift.struct", "Structure")
URL_SESSION = SymbolRecord("URLSession", "swift.class", "Class")


class TestFindSymbol:
    def test_exact_match_preferred_over_earlier_partial(self) -> None:
        record, exact = find_symbol([URL_COMPONENTS, URL], "URL")
        assert record is URL
        assert exact

    def test_case_insensitive_exact(self) -> None:
        record, exact = find_symbol([URL_COMPONENTS, URL], "url")
        assert record is URL
        assert exact

    def test_first_partial_match(self) -> None:
        record, exact = find_symbol([URL_COMPONENTS, URL_SESSION], "url")
        assert record is URL_COMPONENTS
        assert not exact

    def test_no_match(self) -> None:
        assert find_symbol([URL_SESSION], "Date") == (None, False)


class TestFormatting:
    def test_full_symbol(self) -> None:
        assert format_symbol(URL) == (
            "# URL\n"
            "**Kind:** Structure\n"
            "\n**Declaration:**\n```swift\nstruct URL\n```\n"
            "\n**Documentation:**\nA value that identifies a resource."
        )

    def test_minimal_symbol(self) -> None:
        assert format_symbol(SymbolRecord("x")) == "# x"

    def test_similar_titles_uses_first_three_characters(self) -> None:
        records = [SymbolRecord(f"URLThing{i}") for i in range(12)] + [SymbolRecord("Date")]
        titles = similar_titles(records, "urlxyz")
        assert titles == [f"URLThing{i}" for i in range(10)]

    def test_header_hit_truncated(self) -> None:
        text = format_header_hit("NSView", "AppKit", "a" * 10, limit=4)
        assert text == "Found 'NSView' in AppKit headers:\n\n```objc\naaaa\n... (truncated)\n```"

    def test_header_hit_not_truncated_at_limit(self) -> None:
        text = format_header_hit("NSView", "AppKit", "abcd", limit=4)
        assert "truncated" not in text


class TestSymbolResolver:
    """Resolution order against a fake SDK."""

    @pytest.mark.asyncio
    async def test_exact_swift_match_skips_headers(
        self, providers: Providers, config: Config, add_framework
    ) -> None:
        add_framework("Foundation", swift=True, headers=True)
        providers.symbol_graphs.graphs = {"Foundation": [URL_COMPONENTS, URL]}
        providers.header_search.context = "NSURL.h:10: @interface NSURL"

        text = await SymbolResolver(providers, config.search).get_symbol_info("Foundation", "url")

        assert text.startswith("# URL\n**Kind:** Structure")
        assert providers.header_search.context_calls == []

    @pytest.mark.asyncio
    async def test_header_hit_overrides_partial_swift_match(
        self, providers: Providers, config: Config, add_framework
    ) -> None:
        add_framework("Foundation", swift=True, headers=True)
        providers.symbol_graphs.graphs = {"Foundation": [URL_COMPONENTS]}
        providers.header_search.context = "NSURL.h-10-@interface NSURL"

        text = await SymbolResolver(providers, config.search).get_symbol_info("Foundation", "URL")

        assert text.startswith("Found 'URL' in Foundation headers:\n\n```objc\n")

    @pytest.mark.asyncio
    async def test_partial_swift_match_when_headers_have_nothing(
        self, providers: Providers, config: Config, add_framework
    ) -> None:
        add_framework("Foundation", swift=True, headers=True)
        providers.symbol_graphs.graphs = {"Foundation": [URL_COMPONENTS]}

        text = await SymbolResolver(providers, config.search).get_symbol_info("Foundation", "URL")

        assert text.startswith("# URLComponents")

    @pytest.mark.asyncio
    async def test_did_you_mean(
        self, providers: Providers, config: Config, add_framework
    ) -> None:
        add_framework("Foundation", swift=True)
        providers.symbol_graphs.graphs = {"Foundation": [URL_COMPONENTS, URL_SESSION]}

        text = await SymbolResolver(providers, config.search).get_symbol_info(
            "Foundation", "URLX"
        )

        assert text == (
            "Symbol 'URLX' not found in Foundation. Did you mean one of these?\n"
            "  - URLComponents\n"
            "  - URLSession"
        )

    @pytest.mark.asyncio
    async def test_not_found_in_module(
        self, providers: Providers, config: Config, add_framework
    ) -> None:
        add_framework("Foundation", swift=True)
        providers.symbol_graphs.graphs = {"Foundation": [URL_SESSION]}

        text = await SymbolResolver(providers, config.search).get_symbol_info(
            "Foundation", "Zebra"
        )

        assert text == "Symbol 'Zebra' not found in module 'Foundation'."

    @pytest.mark.asyncio
    async def test_extraction_failure_falls_back_to_headers(
        self, providers: Providers, config: Config, add_framework
    ) -> None:
        add_framework("AppKit", swift=True, headers=True)
        providers.header_search.context = "NSView.h:5: @interface NSView"

        text = await SymbolResolver(providers, config.search).get_symbol_info("AppKit", "NSView")

        assert text.startswith("Found 'NSView' in AppKit headers:")
        assert len(providers.header_search.context_calls) == 1

    @pytest.mark.asyncio
    async def test_extraction_failure_without_header_hit(
        self, providers: Providers, config: Config, add_framework
    ) -> None:
        add_framework("AppKit", swift=True)

        text = await SymbolResolver(providers, config.search).get_symbol_info("AppKit", "NSView")

        assert text == "Symbol 'NSView' not found in AppKit headers."

    @pytest.mark.asyncio
    async def test_objc_only_framework(
        self, providers: Providers, config: Config, add_framework
    ) -> None:
        headers = add_framework("IOKit", headers=True) / "Headers"
        providers.header_search.context = "x" * 5000

        text = await SymbolResolver(providers, config.search).get_symbol_info("IOKit", "IOService")

        assert providers.symbol_graphs.calls == []
        assert providers.header_search.context_calls == [("IOService", str(headers))]
        assert text.endswith("x\n... (truncated)\n```")
        assert text.count("x") == 3000

    @pytest.mark.asyncio
    async def test_header_search_error_is_not_a_hit(
        self, providers: Providers, config: Config, add_framework
    ) -> None:
        add_framework("IOKit", headers=True)
        providers.header_search.error = ProviderError("grep failed")

        text = await SymbolResolver(providers, config.search).get_symbol_info("IOKit", "IOService")

        assert text == "Module 'IOKit' not found in SDK. Use list_frameworks to see available modules."

    @pytest.mark.asyncio
    async def test_module_not_found(self, providers: Providers, config: Config) -> None:
        text = await SymbolResolver(providers, config.search).get_symbol_info("Nope", "X")

        assert text == "Module 'Nope' not found in SDK. Use list_frameworks to see available modules."

    @pytest.mark.asyncio
    async def test_sdk_layout_checked_in_worker_thread(
        self, providers: Providers, config: Config, add_framework, monkeypatch
    ) -> None:
        add_framework("Foundation", swift=True, headers=True)
        providers.symbol_graphs.graphs = {"Foundation": [URL_COMPONENTS]}
        checked = []
        real_to_thread = asyncio.to_thread

        async def recording_to_thread(func, *args, **kwargs):
            checked.append(func.__self__.name)
            return await real_to_thread(func, *args, **kwargs)

        monkeypatch.setattr(asyncio, "to_thread", recording_to_thread)

        await SymbolResolver(providers, config.search).get_symbol_info("Foundation", "URL")

        assert checked == ["Foundation.swiftmodule", "Headers"]
