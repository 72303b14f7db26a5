"""Commit records and their JSON form."""

from __future__ import annotations

import json
from dataclasses import dataclass, field

_STRING_FIELDS = ("hash", "parent", "message", "timestamp")


@dataclass
class Commit:
    """A snapshot of staged files with its metadata."""

    hash: str = ""
    parent: str = ""
    message: str = ""
    timestamp: str = ""
    files: dict[str, str] = field(default_factory=dict)

    def serialize(self) -> str:
        """Return the commit as JSON with sorted keys and four-space indent."""
        data = {
            "hash": self.hash,
            "parent": self.parent,
            "message": self.message,
            "timestamp": self.timestamp,
            "files": dict(self.files),
        }
        return json.dumps(data, indent=4, sort_keys=True, ensure_ascii=False)

    @classmethod
    def deserialize(cls, content: str) -> "Commit":
        """Build a commit from its JSON form; raise ValueError if malformed."""
        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            raise ValueError(f"invalid commit data: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError("commit data must be a JSON object")

        values = {}
        for name in _STRING_FIELDS:
            value = data.get(name)
            if not isinstance(value, str):
                raise ValueError(f"commit field {name!r} must be a string")
            values[name] = value

        files = data.get("files")
        if not isinstance(files, dict) or not all(
            isinstance(key, str) and isinstance(value, str) for key, value in files.items()
        ):
            raise ValueError("commit field 'files' must map names to strings")

        return cls(files=dict(files), **values)