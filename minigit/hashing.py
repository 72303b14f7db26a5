"""SHA-1 helpers used for blob and commit identifiers."""

from __future__ import annotations

import hashlib


def _as_bytes(data: str | bytes) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def sha1(data: str | bytes) -> str:
    """Return the lowercase hexadecimal SHA-1 digest of ``data``."""
    return hashlib.sha1(_as_bytes(data)).hexdigest()


def generate_hash(content: str | bytes) -> str:
    """Return the identifier for serialized commit ``content``."""
    return sha1(content)