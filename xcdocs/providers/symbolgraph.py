"""Symbol graph extraction with swift-symbolgraph-extract.

The extractor writes `<Module>.symbols.json` into an output directory; this
provider runs it in a temporary directory, parses the graph, and returns
SymbolRecords. The temporary directory is removed on every exit path.
"""

import asyncio
import json
import logging
import tempfile
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from xcdocs.core.errors import SymbolGraphError
from xcdocs.core.process import run_command
from xcdocs.providers.base import SymbolRecord

logger = logging.getLogger(__name__)


class _Names(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str


class _Kind(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    identifier: str = ""
    display_name: str = Field(default="", alias="displayName")


class _Fragment(BaseModel):
    model_config = ConfigDict(extra="ignore")

    spelling: str | None = None


class _DocLine(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: str | None = None


class _DocComment(BaseModel):
    model_config = ConfigDict(extra="ignore")

    lines: list[_DocLine] | None = None


class GraphSymbol(BaseModel):
    """One entry of the graph's `symbols` array (only the fields we use)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    names: _Names
    kind: _Kind = _Kind()
    declaration_fragments: list[_Fragment] | None = Field(
        default=None, alias="declarationFragments"
    )
    doc_comment: _DocComment | None = Field(default=None, alias="docComment")

    def to_record(self) -> SymbolRecord:
        declaration = None
        if self.declaration_fragments is not None:
            declaration = "".join(f.spelling for f in self.declaration_fragments if f.spelling)

        documentation = None
        if self.doc_comment is not None and self.doc_comment.lines is not None:
            documentation = "\n".join(
                line.text for line in self.doc_comment.lines if line.text is not None
            )

        return SymbolRecord(
            title=self.names.title,
            kind_identifier=self.kind.identifier,
            kind_display_name=self.kind.display_name,
            declaration=declaration,
            documentation=documentation,
        )


def parse_symbol_graph(data: Any) -> list[SymbolRecord]:
    """Convert a decoded symbol graph document into SymbolRecords.

    Symbols that lack a `names.title` (or are otherwise malformed) are skipped.

    Raises:
        ValueError: If the document has no `symbols` array.
    """
    if not isinstance(data, dict) or not isinstance(data.get("symbols"), list):
        raise ValueError("symbol graph has no 'symbols' array")

    records: list[SymbolRecord] = []
    for raw in data["symbols"]:
        try:
            records.append(GraphSymbol.model_validate(raw).to_record())
        except ValidationError:
            continue
    return records


def _read_graph(path: Path) -> list[SymbolRecord]:
    with open(path, encoding="utf-8") as f:
        return parse_symbol_graph(json.load(f))


class SymbolGraphExtractor:
    """SymbolGraphProvider backed by `xcrun swift-symbolgraph-extract`."""

    def __init__(
        self,
        xcrun: str = "/usr/bin/xcrun",
        target: str = "arm64-apple-macos15.0",
        minimum_access_level: str = "public",
        timeout: float | None = None,
    ) -> None:
        self._xcrun = xcrun
        self._target = target
        self._minimum_access_level = minimum_access_level
        self._timeout = timeout

    def build_command(self, module: str, sdk_root: str, output_dir: str) -> list[str]:
        return [
            self._xcrun,
            "swift-symbolgraph-extract",
            "-module-name", module,
            "-target", self._target,
            "-sdk", sdk_root,
            "-output-dir", output_dir,
            "-minimum-access-level", self._minimum_access_level,
        ]

    async def extract(self, module: str, sdk_root: str) -> list[SymbolRecord]:
        """Extract and parse the symbol graph of module.

        A graph file written by an extractor that then exits non-zero is
        still used.

        Raises:
            SymbolGraphError: If no graph file is produced or it cannot be parsed.
            ProviderError: If xcrun cannot be run or times out.
        """
        with tempfile.TemporaryDirectory(prefix="xcdocs-") as tmp:
            cmd = self.build_command(module, sdk_root, tmp)
            result = await run_command(cmd, timeout=self._timeout, capture_output=False)

            graph_path = Path(tmp) / f"{module}.symbols.json"
            if not graph_path.is_file():
                raise SymbolGraphError(
                    module,
                    f"swift-symbolgraph-extract produced no graph for '{module}' "
                    f"(exit status {result.returncode})",
                    returncode=result.returncode,
                )
            if not result.ok:
                logger.warning(
                    "swift-symbolgraph-extract exited %d for %s but wrote a graph",
                    result.returncode,
                    module,
                )

            try:
                records = await asyncio.to_thread(_read_graph, graph_path)
            except (OSError, ValueError) as e:
                raise SymbolGraphError(
                    module, f"Failed to parse symbol graph for '{module}': {e}",
                    returncode=result.returncode,
                ) from e

        logger.debug("Extracted %d symbols from %s", len(records), module)
        return records
