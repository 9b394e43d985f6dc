import io

import pytest

from obadh.cli import main


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr().out


def test_banner_and_exit_on_eof(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "")
    lines = out.splitlines()
    assert code == 0
    assert lines[0] == "Obadh Bengali Input Method - Test Console"
    assert lines[1] == "Type English characters for Bengali output (press Ctrl+C to exit)"


def test_transliterates_each_line(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "kh\nk\n")
    assert code == 0
    assert "> খ\n" in out
    assert "> ক\n" in out


def test_blank_lines_are_skipped(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "\n   \nk\n")
    body = out.split("\n", 2)[2]
    assert body.count(">") == 4
    assert body.count("ক") == 1


def test_line_is_trimmed(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "  k  \n")
    assert "> ক\n" in out


def test_help_exits(monkeypatch, capsys):
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0
    assert "Obadh" in capsys.readouterr().out