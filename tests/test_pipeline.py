import os

import pytest

from pipechain.pipeline import PipexError, main, run_pipeline

ENV = {"PATH": os.environ.get("PATH", "/usr/bin:/bin")}


@pytest.fixture
def infile(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("banana\napple\ncherry\n")
    return path


def test_cat_chain_copies_input(infile, tmp_path):
    out = tmp_path / "out.txt"
    statuses = run_pipeline(str(infile), ["cat", "cat"], str(out), ENV)
    assert out.read_text() == infile.read_text()
    assert statuses == [0, 0]


def test_sort_stage_orders_lines(infile, tmp_path):
    out = tmp_path / "out.txt"
    run_pipeline(str(infile), ["cat", "sort"], str(out), ENV)
    lines = infile.read_text().splitlines(keepends=True)
    assert out.read_text() == "".join(sorted(lines))


def test_arguments_are_passed(infile, tmp_path):
    out = tmp_path / "out.txt"
    run_pipeline(str(infile), ["grep an", "cat"], str(out), ENV)
    assert out.read_text() == "banana\n"


def test_existing_outfile_is_truncated(infile, tmp_path):
    out = tmp_path / "out.txt"
    out.write_text("old content that is much longer than the input text\n" * 5)
    run_pipeline(str(infile), ["cat", "cat"], str(out), ENV)
    assert out.read_text() == infile.read_text()


def test_outfile_mode(infile, tmp_path):
    out = tmp_path / "new.txt"
    old_mask = os.umask(0)
    try:
        run_pipeline(str(infile), ["cat", "cat"], str(out), ENV)
    finally:
        os.umask(old_mask)
    assert out.stat().st_mode & 0o777 == 0o644


def test_unknown_command_reported(infile, tmp_path, capsys):
    out = tmp_path / "out.txt"
    statuses = run_pipeline(str(infile), ["cat", "no-such-command-xyz"], str(out), ENV)
    assert "command not found : no-such-command-xyz" in capsys.readouterr().err
    assert statuses[1] == 1
    assert out.read_text() == ""


def test_unknown_first_command_gives_empty_input(infile, tmp_path, capsys):
    out = tmp_path / "out.txt"
    statuses = run_pipeline(str(infile), ["no-such-command-xyz", "cat"], str(out), ENV)
    assert out.read_text() == ""
    assert statuses == [1, 0]
    assert "no-such-command-xyz" in capsys.readouterr().err


def test_empty_command_reported(infile, tmp_path, capsys):
    out = tmp_path / "out.txt"
    run_pipeline(str(infile), ["", "cat"], str(out), ENV)
    assert 'command not found : ""' in capsys.readouterr().err


def test_missing_path_raises(infile, tmp_path):
    out = tmp_path / "out.txt"
    with pytest.raises(PipexError, match="Error: No path found"):
        run_pipeline(str(infile), ["cat", "cat"], str(out), {"HOME": "/"})
    assert not out.exists()


def test_missing_infile_raises(tmp_path):
    out = tmp_path / "out.txt"
    with pytest.raises(PipexError, match="Error: infile isn't open"):
        run_pipeline(str(tmp_path / "missing"), ["cat", "cat"], str(out), ENV)
    assert not out.exists()


def test_unwritable_outfile_raises(infile, tmp_path):
    out = tmp_path / "no-dir" / "out.txt"
    with pytest.raises(PipexError, match="Error: outfile isn't open"):
        run_pipeline(str(infile), ["cat", "cat"], str(out), ENV)


def test_no_commands_raises(infile, tmp_path):
    with pytest.raises(PipexError):
        run_pipeline(str(infile), [], str(tmp_path / "out.txt"), ENV)


def test_main_runs_pipeline(infile, tmp_path):
    out = tmp_path / "out.txt"
    assert main([str(infile), "cat", "cat", str(out)]) == 0
    assert out.read_text() == infile.read_text()


def test_main_too_few_arguments(infile, tmp_path, capsys):
    assert main([str(infile), "cat", str(tmp_path / "out.txt")]) == 1
    assert "Error: You don't have enough arguments" in capsys.readouterr().err


def test_main_missing_infile(tmp_path, capsys):
    out = tmp_path / "out.txt"
    assert main([str(tmp_path / "missing"), "cat", "cat", str(out)]) == 1
    assert "Error: infile isn't open" in capsys.readouterr().err
    assert not out.exists()