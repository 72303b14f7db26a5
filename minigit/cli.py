"""Command-line entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .repository import Repository, RepositoryError


def _init(repo: Repository) -> int:
    try:
        created = repo.init()
    except RepositoryError as exc:
        print(f"Error initializing repository: {exc}", file=sys.stderr)
        return 0
    if created:
        print("Initialized empty miniGit repository.")
    else:
        print("Repository already initialized.")
    return 0


def _add(repo: Repository, file: str) -> int:
    try:
        repo.add(file)
    except FileNotFoundError:
        print(f"File not found: {file}", file=sys.stderr)
        return 0
    except RepositoryError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"Added {file} to staging area.")
    return 0


def _commit(repo: Repository, message: str) -> int:
    try:
        commit = repo.commit(message)
    except (RepositoryError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"Committed as {commit.hash}")
    return 0


def _log(repo: Repository) -> int:
    if not repo.is_initialized():
        print("Repository not initialized.", file=sys.stderr)
        return 1
    for commit in repo.history():
        print(f"commit: {commit.hash}")
        print(f"Date: {commit.timestamp}")
        print(f"Message: {commit.message}")
        print("Files:")
        for filename in commit.files:
            print(f"  {filename}")
        print()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command and return the process exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: minigit <command>")
        return 1

    command = args[0]
    repo = Repository()
    if command == "init":
        return _init(repo)
    if command == "add":
        if len(args) < 2:
            print("Usage: minigit add <file>", file=sys.stderr)
            return 1
        return _add(repo, args[1])
    if command == "commit":
        if len(args) < 3 or args[1] != "-m":
            print('Usage: minigit commit -m "message"', file=sys.stderr)
            return 1
        return _commit(repo, args[2])
    if command == "log":
        return _log(repo)

    print(f"Unknown command: {command}")
    return 1


if __name__ == "__main__":
    sys.exit(main())