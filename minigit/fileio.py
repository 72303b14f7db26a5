"""Small file and time helpers."""

from __future__ import annotations

import os
from datetime import datetime

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def read_file(path: str | os.PathLike[str]) -> bytes:
    """Return the whole content of ``path``, or empty bytes if it cannot be read."""
    try:
        with open(path, "rb") as handle:
            return handle.read()
    except OSError:
        return b""


def current_timestamp() -> str:
    """Return the current local time as ``YYYY-MM-DD HH:MM:SS``."""
    return datetime.now().strftime(TIMESTAMP_FORMAT)