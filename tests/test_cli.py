import pytest

from minigit.cli import main


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_no_arguments_prints_usage(workdir, capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Usage: minigit <command>\n"


def test_unknown_command(workdir, capsys):
    assert main(["frobnicate"]) == 1
    assert capsys.readouterr().out == "Unknown command: frobnicate\n"


def test_init_then_init_again(workdir, capsys):
    assert main(["init"]) == 0
    assert capsys.readouterr().out == "Initialized empty miniGit repository.\n"
    assert main(["init"]) == 0
    assert capsys.readouterr().out == "Repository already initialized.\n"
    assert (workdir / ".minigit" / "HEAD").read_text() == "main"


def test_add_requires_file_argument(workdir, capsys):
    assert main(["add"]) == 1
    assert capsys.readouterr().err == "Usage: minigit add <file>\n"


def test_add_missing_file(workdir, capsys):
    main(["init"])
    capsys.readouterr()
    assert main(["add", "ghost.txt"]) == 0
    assert capsys.readouterr().err == "File not found: ghost.txt\n"


def test_commit_requires_message_flag(workdir, capsys):
    assert main(["commit", "message"]) == 1
    assert capsys.readouterr().err == 'Usage: minigit commit -m "message"\n'


def test_log_without_repository(workdir, capsys):
    assert main(["log"]) == 1
    assert capsys.readouterr().err == "Repository not initialized.\n"


def test_add_commit_log(workdir, capsys):
    main(["init"])
    (workdir / "testfile.txt").write_text("Hello MiniGit!\n")
    assert main(["add", "testfile.txt"]) == 0
    assert capsys.readouterr().out.endswith("Added testfile.txt to staging area.\n")

    assert main(["commit", "-m", "first"]) == 0
    head = (workdir / ".minigit" / "HEAD").read_text()
    assert capsys.readouterr().out == f"Committed as {head}\n"

    assert main(["log"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == f"commit: {head}"
    assert lines[1].startswith("Date: ")
    assert lines[2:] == ["Message: first", "Files:", "  testfile.txt", ""]