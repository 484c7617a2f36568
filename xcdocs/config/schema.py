"""Pydantic models for xcdocs configuration validation."""

import os
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_SDK_PATH = (
    "/Applications/Xcode.app/Contents/Developer/Platforms/"
    "MacOSX.platform/Developer/SDKs/MacOSX.sdk"
)

DEFAULT_DOCUMENTATION_ROOTS = [
    "~/Library/Developer/Xcode/DocumentationCache",
    "/Applications/Xcode.app/Contents/Developer/Documentation",
    "/Library/Developer/CommandLineTools/SDKs",
]

DEFAULT_COMMON_FRAMEWORKS = [
    "Foundation",
    "SwiftUI",
    "AppKit",
    "UIKit",
    "Combine",
    "CoreGraphics",
    "CoreFoundation",
]


def _expand_paths(paths: list[str]) -> list[str]:
    """Expand ~ in each path. Paths that don't exist are kept; callers filter them."""
    return [os.path.expanduser(p) for p in paths]


class ServerConfig(BaseModel):
    """Identity and protocol negotiation for the MCP server.

    Example in config.json:
        "server": {
            "name": "xcode-docs-mcp",
            "protocol_version": "2025-06-18"
        }
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = "xcode-docs-mcp"
    """Server name reported in serverInfo."""

    version: str = "1.0.0"
    """Server version reported in serverInfo."""

    protocol_version: str = "2025-06-18"
    """Protocol version returned when the client asks for one we don't recognize."""

    supported_protocol_versions: list[str] = ["2024-11-05", "2025-03-26", "2025-06-18"]
    """Protocol versions echoed back when a client requests them."""

    @model_validator(mode="after")
    def validate_default_version(self) -> "ServerConfig":
        if self.protocol_version not in self.supported_protocol_versions:
            raise ValueError(
                f"protocol_version '{self.protocol_version}' is not in "
                f"supported_protocol_versions"
            )
        return self


class SdkConfig(BaseModel):
    """How the active SDK is located and how symbol graphs are extracted."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    xcrun: str = "/usr/bin/xcrun"
    """Path to xcrun (used for --show-sdk-path and swift-symbolgraph-extract)."""

    fallback_path: str = DEFAULT_SDK_PATH
    """SDK root used when `xcrun --show-sdk-path` fails or prints nothing."""

    target: str = "arm64-apple-macos15.0"
    """Target triple passed to swift-symbolgraph-extract."""

    minimum_access_level: Literal["public", "open", "internal"] = "public"
    """Minimum access level of extracted symbols."""


class SearchConfig(BaseModel):
    """Discovery strategies used by search_documentation and get_symbol_info."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    mdfind: str = "/usr/bin/mdfind"
    """Path to the Spotlight command-line client."""

    grep: str = "/usr/bin/grep"
    """Path to grep, used for SDK header search."""

    documentation_roots: list[str] = Field(
        default=DEFAULT_DOCUMENTATION_ROOTS, validate_default=True
    )
    """Directories Spotlight search is scoped to. Missing ones are skipped."""

    header_search_root: str | None = None
    """Directory searched for headers. None means `<sdk>/System/Library/Frameworks`."""

    common_frameworks: list[str] = DEFAULT_COMMON_FRAMEWORKS
    """Frameworks scanned for symbol-name matches when other results are scarce."""

    default_limit: int = Field(default=20, gt=0)
    """Result limit when search_documentation is called without one."""

    symbol_match_cap: int = Field(default=10, gt=0)
    """Maximum symbol matches collected across common frameworks."""

    header_output_limit: int = Field(default=3000, gt=0)
    """Characters of grep context kept before the output is truncated."""

    @field_validator("documentation_roots", mode="before")
    @classmethod
    def expand_documentation_roots(cls, v: list[str]) -> list[str]:
        return _expand_paths(v)


class ProcessConfig(BaseModel):
    """External process policy."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    timeout_seconds: float | None = Field(default=None, gt=0)
    """Kill external commands after this many seconds. None waits forever."""


class Config(BaseModel):
    """Root configuration model.

    Example config.json:
        {
            "sdk": {"target": "x86_64-apple-macos14.0"},
            "search": {"default_limit": 30},
            "process": {"timeout_seconds": 60}
        }
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    server: ServerConfig = ServerConfig()
    sdk: SdkConfig = SdkConfig()
    search: SearchConfig = SearchConfig()
    process: ProcessConfig = ProcessConfig()
