"""Shared pytest fixtures and configuration for pytest.

Provider stubs stand in for mdfind, grep, and xcrun so that no test needs
Xcode. Each stub records its calls and returns whatever the test assigns
to its attributes.
"""

import sys
from pathlib import Path

import pytest

from xcdocs.config.schema import Config
from xcdocs.core.errors import ProviderError, SymbolGraphError
from xcdocs.providers import Providers
from xcdocs.providers.base import SymbolRecord


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for platform-specific tests."""
    config.addinivalue_line("markers", "unix_only: mark test to run only on Unix")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Auto-skip tests based on platform markers."""
    skip_unix = pytest.mark.skip(reason="Unix-only test")

    for item in items:
        if "unix_only" in item.keywords and sys.platform == "win32":
            item.add_marker(skip_unix)


# =============================================================================
# Provider stubs
# =============================================================================


class StubContentSearch:
    def __init__(self) -> None:
        self.paths: list[str] = []
        self.error: Exception | None = None
        self.calls: list[tuple[str, list[str]]] = []

    async def discover_paths(self, expression: str, roots: list[str]) -> list[str]:
        self.calls.append((expression, roots))
        if self.error is not None:
            raise self.error
        return list(self.paths)


class StubHeaderSearch:
    def __init__(self) -> None:
        self.files: list[str] = []
        self.context = ""
        self.error: Exception | None = None
        self.find_calls: list[tuple[str, str, int]] = []
        self.context_calls: list[tuple[str, str]] = []

    async def find_files(self, query: str, root: str, max_results: int) -> list[str]:
        self.find_calls.append((query, root, max_results))
        if self.error is not None:
            raise self.error
        return self.files[:max_results]

    async def search_context(self, symbol: str, root: str) -> str:
        self.context_calls.append((symbol, root))
        if self.error is not None:
            raise self.error
        return self.context


class StubSymbolGraphs:
    """Returns graphs[module], or raises SymbolGraphError for unknown modules."""

    def __init__(self) -> None:
        self.graphs: dict[str, list[SymbolRecord]] = {}
        self.calls: list[str] = []

    async def extract(self, module: str, sdk_root: str) -> list[SymbolRecord]:
        self.calls.append(module)
        if module not in self.graphs:
            raise SymbolGraphError(module, f"no graph for {module}", returncode=1)
        return list(self.graphs[module])


class StubSdk:
    def __init__(self, root: str) -> None:
        self.root = root

    async def resolve(self) -> str:
        return self.root


class StubDirectories:
    def __init__(self) -> None:
        self.entries: list[str] = []
        self.error: ProviderError | None = None
        self.calls: list[str] = []

    async def list_entries(self, path: str) -> list[str]:
        self.calls.append(path)
        if self.error is not None:
            raise self.error
        return list(self.entries)


def make_framework(
    sdk_root: Path, name: str, swift: bool = False, headers: bool = False
) -> Path:
    """Create `<sdk>/System/Library/Frameworks/<name>.framework` with optional parts."""
    framework = sdk_root / "System" / "Library" / "Frameworks" / f"{name}.framework"
    framework.mkdir(parents=True, exist_ok=True)
    if swift:
        (framework / "Modules" / f"{name}.swiftmodule").mkdir(parents=True, exist_ok=True)
    if headers:
        (framework / "Headers").mkdir(parents=True, exist_ok=True)
    return framework


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def sdk_root(tmp_path: Path) -> Path:
    """An empty fake SDK root with a frameworks directory."""
    root = tmp_path / "MacOSX.sdk"
    (root / "System" / "Library" / "Frameworks").mkdir(parents=True)
    return root


@pytest.fixture
def providers(sdk_root: Path) -> Providers:
    return Providers(
        content_search=StubContentSearch(),
        header_search=StubHeaderSearch(),
        symbol_graphs=StubSymbolGraphs(),
        sdk=StubSdk(str(sdk_root)),
        directories=StubDirectories(),
    )


@pytest.fixture
def config(tmp_path: Path) -> Config:
    """Defaults, with documentation roots pointed at a directory that exists."""
    docs = tmp_path / "docs"
    docs.mkdir()
    return Config.model_validate({"search": {"documentation_roots": [str(docs)]}})


@pytest.fixture
def add_framework(sdk_root: Path):
    """Factory creating frameworks inside the fake SDK."""

    def _add(name: str, swift: bool = False, headers: bool = False) -> Path:
        return make_framework(sdk_root, name, swift=swift, headers=headers)

    return _add
