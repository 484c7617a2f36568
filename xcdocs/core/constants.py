"""Core constants and paths for xcdocs.

Single source of truth for global paths and SDK layout. Modules import from
here instead of hardcoding paths like `Path.home() / ".xcdocs"`.
"""

from pathlib import Path

XCDOCS_DIR_NAME = ".xcdocs"
CONFIG_ENV_VAR = "XCDOCS_CONFIG"

# Layout inside an SDK root
FRAMEWORKS_SUBPATH = "System/Library/Frameworks"
FRAMEWORK_SUFFIX = ".framework"


def get_xcdocs_dir() -> Path:
    """Get ~/.xcdocs (global config directory)."""
    return Path.home() / XCDOCS_DIR_NAME


def get_default_config_path() -> Path:
    """Get default config file path."""
    return get_xcdocs_dir() / "config.json"


def frameworks_dir(sdk_root: str) -> Path:
    """Get the frameworks directory of an SDK."""
    return Path(sdk_root) / FRAMEWORKS_SUBPATH


def framework_dir(sdk_root: str, module: str) -> Path:
    """Get `<sdk>/System/Library/Frameworks/<module>.framework`."""
    return frameworks_dir(sdk_root) / f"{module}{FRAMEWORK_SUFFIX}"


def swift_module_dir(sdk_root: str, module: str) -> Path:
    """Get the `.swiftmodule` directory that marks a framework as a Swift module."""
    return framework_dir(sdk_root, module) / "Modules" / f"{module}.swiftmodule"


def headers_dir(sdk_root: str, module: str) -> Path:
    """Get the Objective-C headers directory of a framework."""
    return framework_dir(sdk_root, module) / "Headers"
