# minigit

A minimal version control tool. It keeps its data in a `.minigit` directory
in the current working directory. File contents are stored as blobs named
by the SHA-1 hash of their bytes. Commits are stored as JSON documents that
are linked to their parent commits.

## Installation

```
pip install .
```

## Usage

Create a repository in the current directory:

```
minigit init
```

This creates `.minigit/` with `commits/`, `blobs/`, `branches/` (holding an
empty `main`), a `HEAD` file and an empty staging area
(`staging_area.json`). If `.minigit` already exists, it reports
`Repository already initialized.` and changes nothing.

Stage a file:

```
minigit add notes.txt
```

The file's contents are stored as a blob (an existing blob with the same
hash is left as it is), and the staging area records the blob's hash under
the file name as given. A missing file is reported as `File not found:`.

Commit the staged files:

```
minigit commit -m "first commit"
```

The commit records its parent (the commit `HEAD` points at, if any), the
message, a local timestamp (`YYYY-MM-DD HH:MM:SS`) and the staged files.
Its hash is the SHA-1 of the commit serialized as JSON with an empty hash
field. `HEAD` then holds the new commit's hash, the commit is written to
`.minigit/commits/<hash>.json`, and the staging area is emptied.

Show the history, starting with the newest commit:

```
minigit log
```

Each entry shows the commit hash, the date, the message and the names of
the files in that commit.

Any other command prints `Unknown command:` and exits with status 1. The
same commands can be run with `python -m minigit.cli`.

## Library use

```python
from minigit.repository import Repository

repo = Repository(".")
repo.init()                      # False if .minigit already exists
blob_hash = repo.add("notes.txt")
commit = repo.commit("first commit")
for entry in repo.history():
    print(entry.hash, entry.message, sorted(entry.files))
```

- `Repository.head_commit()` and `Repository.commit_by_id(hash)` return a
  `minigit.commit.Commit`, or `None` when there is no such commit.
- `Repository.is_initialized()` tells whether `.minigit`, its `commits`
  directory and `HEAD` exist.
- `Repository.add()` raises `FileNotFoundError` for a missing file;
  `add()` and `commit()` raise `minigit.repository.RepositoryError` when
  the repository has not been initialized or the staging area cannot be
  read.
- `Commit.serialize()` gives JSON with sorted keys and four-space indent;
  `Commit.deserialize()` raises `ValueError` on malformed data.
- `minigit.blob.create_blob(path, blobs_dir)` stores a file as a blob, and
  `minigit.hashing.sha1()` returns a hexadecimal SHA-1 digest.

## Limitations

There is no checkout, status, diff or branch switching. The `branches/main`
file is created but never updated, and `HEAD` holds a commit hash directly
once the first commit is made.

## Running the tests

```
pip install .[test]
pytest
```