from minigit.blob import create_blob
from minigit.hashing import sha1


def test_blob_is_stored_under_its_hash(tmp_path):
    blobs = tmp_path / "blobs"
    blobs.mkdir()
    source = tmp_path / "file.txt"
    source.write_bytes(b"Hello MiniGit!\n")

    digest = create_blob(source, blobs)

    assert digest == sha1(b"Hello MiniGit!\n")
    assert (blobs / digest).read_bytes() == b"Hello MiniGit!\n"


def test_same_content_gives_same_blob(tmp_path):
    blobs = tmp_path / "blobs"
    blobs.mkdir()
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    first.write_bytes(b"shared")
    second.write_bytes(b"shared")

    assert create_blob(first, blobs) == create_blob(second, blobs)
    assert len(list(blobs.iterdir())) == 1


def test_existing_blob_is_not_overwritten(tmp_path):
    blobs = tmp_path / "blobs"
    blobs.mkdir()
    source = tmp_path / "file.txt"
    source.write_bytes(b"content")
    digest = sha1(b"content")
    (blobs / digest).write_bytes(b"already here")

    assert create_blob(source, blobs) == digest
    assert (blobs / digest).read_bytes() == b"already here"