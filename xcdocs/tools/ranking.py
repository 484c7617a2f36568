"""Relevance scoring and result formatting for documentation search.

All functions here are pure: they take paths and queries and return scores
or text, so they can be tested without Spotlight or an SDK.
"""

import os
from collections.abc import Iterable

# Marker used to pull the framework name out of a path (case-sensitive)
FRAMEWORKS_MARKER = "/Frameworks/"

HEADER_SUFFIXES = (".h",)
SWIFT_SUFFIXES = (".swift", ".swiftinterface")
SOURCE_SUFFIXES = HEADER_SUFFIXES + SWIFT_SUFFIXES


def relevance_score(path: str, query: str) -> int:
    """Score how relevant a discovered path is to a query.

    Additive and case-insensitive:

    - +100 filename equals the query, or contains `query.`
    - +50  header or Swift interface (`.h`, `.swift`, `.swiftinterface`)
    - +30  inside a framework's headers (`/frameworks/` and `/headers/`)
    - +25  filename starts with the query
    - +20  documentation path (`/documentation/` or `.docarchive`)
    - +15  filename contains the query
    - +40  the segment after the first `/frameworks/` starts with the query
    """
    lower_path = path.lower()
    q = query.lower()
    filename = os.path.basename(path).lower()

    score = 0
    if filename == q or f"{q}." in filename:
        score += 100
    if path.endswith(SOURCE_SUFFIXES):
        score += 50
    if "/frameworks/" in lower_path and "/headers/" in lower_path:
        score += 30
    if filename.startswith(q):
        score += 25
    if "/documentation/" in lower_path or ".docarchive" in lower_path:
        score += 20
    if q in filename:
        score += 15

    _, found, after = lower_path.partition("/frameworks/")
    if found and after.startswith(q):
        score += 40

    return score


def extract_framework(path: str) -> str | None:
    """Return the framework a path belongs to, or None.

    The name is the segment right after `/Frameworks/` with `.framework`
    removed; a path ending right after the marker has no framework.
    """
    _, found, after = path.partition(FRAMEWORKS_MARKER)
    if not found or "/" not in after:
        return None
    return after.split("/", 1)[0].replace(".framework", "")


def file_type_label(path: str) -> str | None:
    if path.endswith(HEADER_SUFFIXES):
        return "Objective-C Header"
    if path.endswith(SWIFT_SUFFIXES):
        return "Swift Interface"
    if ".docarchive" in path:
        return "Documentation"
    return None


def format_primary_results(paths: Iterable[str], query: str) -> str:
    """Format ranked Spotlight paths as a numbered listing."""
    lines = [f"Documentation search results for '{query}':", ""]
    for index, path in enumerate(paths, start=1):
        components = []
        framework = extract_framework(path)
        if framework is not None:
            components.append(f"[{framework}]")
        label = file_type_label(path)
        if label is not None:
            components.append(label)
        components.append(os.path.basename(path))

        lines.append(f"{index}. {' - '.join(components)}")
        lines.append(f"   Path: {path}")
        lines.append("")
    return "\n".join(lines)


def format_header_files(paths: Iterable[str], query: str) -> str:
    """Format header search hits, shortened to the part after `/Frameworks/`."""
    lines = [f"SDK header files containing '{query}':"]
    for path in paths:
        _, found, after = path.partition(FRAMEWORKS_MARKER)
        lines.append(f"  - {after if found else path}")
    return "\n".join(lines)
