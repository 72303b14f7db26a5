"""Content-addressed storage of file snapshots."""

from __future__ import annotations

import os
from pathlib import Path

from .fileio import read_file
from .hashing import sha1


def create_blob(filepath: str | os.PathLike[str], blobs_dir: str | os.PathLike[str]) -> str:
    """Store the content of ``filepath`` under ``blobs_dir`` and return its hash.

    An existing blob with the same hash is left untouched.
    """
    content = read_file(filepath)
    digest = sha1(content)
    blob_path = Path(blobs_dir) / digest
    if not blob_path.exists():
        blob_path.write_bytes(content)
    return digest