"""Tests for xcdocs.providers.symbolgraph."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from xcdocs.core.errors import SymbolGraphError
from xcdocs.core.process import CommandResult
from xcdocs.providers.base import SymbolRecord
from xcdocs.providers.symbolgraph import SymbolGraphExtractor, parse_symbol_graph

GRAPH = {
    "metadata": {"formatVersion": {"major": 0}},
    "module": {"name": "Foundation"},
    "symbols": [
        {
            "kind": {"identifier": "swift.struct", "displayName": "Structure"},
            "names": {"title": "URL", "subHeading": []},
            "declarationFragments": [
                {"kind": "keyword", "spelling": "struct"},
                {"kind": "text", "spelling": " "},
                {"kind": "identifier", "spelling": "URL"},
            ],
            "docComment": {"lines": [{"text": "A URL."}, {"text": ""}, {"text": "More."}]},
        },
        {"kind": {"identifier": "swift.func", "displayName": "Function"}, "names": {}},
        {"kind": {"identifier": "swift.var"}, "names": {"title": "bare"}},
        "not a symbol",
    ],
    "relationships": [],
}


class TestParseSymbolGraph:
    def test_records(self) -> None:
        records = parse_symbol_graph(GRAPH)

        assert records == [
            SymbolRecord(
                title="URL",
                kind_identifier="swift.struct",
                kind_display_name="Structure",
                declaration="struct URL",
                documentation="A URL.\n\nMore.",
            ),
            SymbolRecord(title="bare", kind_identifier="swift.var"),
        ]

    def test_missing_symbols_array(self) -> None:
        with pytest.raises(ValueError):
            parse_symbol_graph({"module": {}})

    def test_empty_declaration_fragments(self) -> None:
        records = parse_symbol_graph(
            {"symbols": [{"names": {"title": "x"}, "declarationFragments": []}]}
        )
        assert records[0].declaration == ""
        assert records[0].documentation is None


def fake_extractor(graph: object | None, returncode: int = 0):
    """A run_command stand-in that writes graph into -output-dir."""
    calls: list[list[str]] = []

    async def run(cmd, timeout=None, capture_output=True):
        calls.append(list(cmd))
        assert capture_output is False
        if graph is not None:
            module = cmd[cmd.index("-module-name") + 1]
            out = Path(cmd[cmd.index("-output-dir") + 1]) / f"{module}.symbols.json"
            out.write_text(graph if isinstance(graph, str) else json.dumps(graph))
        return CommandResult(returncode, "")

    return run, calls


class TestSymbolGraphExtractor:
    @pytest.mark.asyncio
    async def test_extract(self) -> None:
        run, calls = fake_extractor(GRAPH)
        extractor = SymbolGraphExtractor("/usr/bin/xcrun", "arm64-apple-macos15.0", "public")

        with patch("xcdocs.providers.symbolgraph.run_command", side_effect=run):
            records = await extractor.extract("Foundation", "/SDK")

        assert [r.title for r in records] == ["URL", "bare"]
        cmd = calls[0]
        output_dir = cmd[cmd.index("-output-dir") + 1]
        assert cmd == [
            "/usr/bin/xcrun", "swift-symbolgraph-extract",
            "-module-name", "Foundation",
            "-target", "arm64-apple-macos15.0",
            "-sdk", "/SDK",
            "-output-dir", output_dir,
            "-minimum-access-level", "public",
        ]
        # Temporary directory removed afterwards
        assert not Path(output_dir).exists()

    @pytest.mark.asyncio
    async def test_no_graph_written(self) -> None:
        run, calls = fake_extractor(None, returncode=1)

        with patch("xcdocs.providers.symbolgraph.run_command", side_effect=run):
            with pytest.raises(SymbolGraphError) as exc_info:
                await SymbolGraphExtractor().extract("IOKit", "/SDK")

        assert exc_info.value.module == "IOKit"
        assert exc_info.value.returncode == 1
        output_dir = calls[0][calls[0].index("-output-dir") + 1]
        assert not Path(output_dir).exists()

    @pytest.mark.asyncio
    async def test_unparseable_graph(self) -> None:
        run, _ = fake_extractor("{truncated")

        with patch("xcdocs.providers.symbolgraph.run_command", side_effect=run):
            with pytest.raises(SymbolGraphError, match="Failed to parse"):
                await SymbolGraphExtractor().extract("Foundation", "/SDK")

    @pytest.mark.asyncio
    async def test_graph_used_despite_nonzero_exit(self) -> None:
        run, _ = fake_extractor(GRAPH, returncode=1)

        with patch("xcdocs.providers.symbolgraph.run_command", side_effect=run):
            records = await SymbolGraphExtractor().extract("Foundation", "/SDK")

        assert len(records) == 2
