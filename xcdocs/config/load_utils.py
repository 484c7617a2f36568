"""Reading JSON object files (config.json and the file named by $XCDOCS_CONFIG)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from xcdocs.core.errors import LoadError

logger = logging.getLogger(__name__)


def _fail(context: str, message: str) -> LoadError:
    return LoadError(f"{context}: {message}" if context else message)


def _read_text(path: Path, context: str) -> str:
    try:
        # utf-8-sig: editors on macOS sometimes save with a BOM
        return path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as e:
        raise _fail(context, f"File not found: {path}") from e
    except OSError as e:
        raise _fail(context, f"Failed to read file {path}: {e}") from e


def read_json_object(path: Path, context: str = "") -> dict[str, Any]:
    """Read a file that must hold a JSON object.

    A blank file counts as an empty object.

    Raises:
        LoadError: If the file is missing or unreadable, is not valid JSON,
            or holds something other than an object.
    """
    source = path.expanduser()
    text = _read_text(source, context).strip()
    if not text:
        logger.debug("%s is empty", source)
        return {}

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise _fail(context, f"Invalid JSON in {path}: {e}") from e

    if isinstance(data, dict):
        return data
    raise _fail(context, f"Expected object in {path}, got {type(data).__name__}")


def read_json_object_if_exists(path: Path, context: str = "") -> dict[str, Any] | None:
    """Like read_json_object, but None when there is no such file."""
    source = path.expanduser()
    if not source.is_file():
        logger.debug("No file at %s", source)
        return None
    return read_json_object(source, context)
