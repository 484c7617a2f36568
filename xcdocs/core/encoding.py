"""UTF-8 encoding constants and helpers for xcdocs."""

import sys

# Encoding constants
ENCODING = "utf-8"
ENCODING_ERRORS = "replace"  # Preserve data, mark corruption


def configure_stdio() -> None:
    """Reconfigure stdin/stdout/stderr to use UTF-8 with replace error handling.

    Called before the stdio loop starts so that tool output containing
    non-ASCII header text can always be written.
    """
    for stream in (sys.stdin, sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(encoding=ENCODING, errors=ENCODING_ERRORS)


def decode_output(data: bytes) -> str:
    """Decode captured process output, replacing undecodable bytes."""
    return data.decode(ENCODING, errors=ENCODING_ERRORS)
