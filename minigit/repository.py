"""The on-disk repository: staging, commits and history."""

from __future__ import annotations

import json
import os
from collections.abc import Iterator
from pathlib import Path

from .blob import create_blob
from .commit import Commit
from .fileio import current_timestamp
from .hashing import generate_hash

REPO_DIR_NAME = ".minigit"


class RepositoryError(Exception):
    """Raised when a repository operation cannot be carried out."""


class Repository:
    """A repository rooted at ``root``, stored in its ``.minigit`` directory."""

    def __init__(self, root: str | os.PathLike[str] = ".") -> None:
        self.root = Path(root)
        self.mgit_dir = self.root / REPO_DIR_NAME
        self.commits_dir = self.mgit_dir / "commits"
        self.blobs_dir = self.mgit_dir / "blobs"
        self.branches_dir = self.mgit_dir / "branches"
        self.head_file = self.mgit_dir / "HEAD"
        self.staging_file = self.mgit_dir / "staging_area.json"

    def is_initialized(self) -> bool:
        """Whether the repository directory, commits directory and HEAD exist."""
        return self.mgit_dir.exists() and self.commits_dir.exists() and self.head_file.exists()

    def head_commit(self) -> Commit | None:
        """Return the commit HEAD points at, or None if there is none."""
        try:
            head_id = self.head_file.read_text(encoding="utf-8").strip()
        except OSError:
            return None
        return self.commit_by_id(head_id)

    def commit_by_id(self, commit_hash: str) -> Commit | None:
        """Return the stored commit with ``commit_hash``, or None if absent."""
        path = self.commits_dir / f"{commit_hash}.json"
        try:
            content = path.read_text(encoding="utf-8")
        except OSError:
            return None
        return Commit.deserialize(content)

    def history(self) -> Iterator[Commit]:
        """Yield commits from HEAD back through their parents."""
        current = self.head_commit()
        while current is not None and current.hash:
            yield current
            if not current.parent:
                break
            current = self.commit_by_id(current.parent)

    def init(self) -> bool:
        """Create the repository layout; return False if it already exists."""
        if self.mgit_dir.exists():
            return False
        try:
            self.branches_dir.mkdir(parents=True, exist_ok=True)
            self.commits_dir.mkdir(parents=True, exist_ok=True)
            self.blobs_dir.mkdir(parents=True, exist_ok=True)
            self.head_file.write_text("main", encoding="utf-8")
            (self.branches_dir / "main").write_text("", encoding="utf-8")
            self.staging_file.write_text("{}", encoding="utf-8")
        except OSError as exc:
            raise RepositoryError(str(exc)) from exc
        return True

    def add(self, file: str) -> str:
        """Snapshot ``file`` into a blob, stage it, and return the blob hash."""
        self._require_repository()
        path = Path(file)
        if not path.is_absolute():
            path = self.root / path
        if not path.exists():
            raise FileNotFoundError(f"File not found: {file}")

        blob_hash = create_blob(path, self.blobs_dir)
        staging = self._read_staging(missing_ok=True)
        staging[file] = blob_hash
        self._write_staging(staging)
        return blob_hash

    def commit(self, message: str) -> Commit:
        """Record the staged files as a new commit on top of HEAD."""
        self._require_repository()
        head = self.head_commit()
        staged = self._read_staging(missing_ok=False)

        commit = Commit(
            parent=head.hash if head is not None else "",
            message=message,
            timestamp=current_timestamp(),
            files=dict(sorted(staged.items())),
        )
        commit.hash = generate_hash(commit.serialize())

        self.head_file.write_text(commit.hash, encoding="utf-8")
        (self.commits_dir / f"{commit.hash}.json").write_text(commit.serialize(), encoding="utf-8")
        self.staging_file.write_text("{}", encoding="utf-8")
        return commit

    def _require_repository(self) -> None:
        if not self.mgit_dir.is_dir():
            raise RepositoryError("Repository not initialized.")

    def _read_staging(self, *, missing_ok: bool) -> dict[str, str]:
        try:
            content = self.staging_file.read_text(encoding="utf-8")
        except OSError as exc:
            if missing_ok:
                return {}
            raise RepositoryError(f"cannot read staging area: {exc}") from exc
        try:
            staging = json.loads(content)
        except json.JSONDecodeError as exc:
            raise RepositoryError(f"invalid staging area: {exc}") from exc
        if staging is None:
            return {}
        if not isinstance(staging, dict) or not all(
            isinstance(value, str) for value in staging.values()
        ):
            raise RepositoryError("invalid staging area: expected an object of strings")
        return staging

    def _write_staging(self, staging: dict[str, str]) -> None:
        text = json.dumps(staging, indent=4, sort_keys=True, ensure_ascii=False)
        self.staging_file.write_text(text, encoding="utf-8")