import io

import pytest
from pydantic import ValidationError

from scripts.calc import main


def test_one_shot(capsys):
    assert main(["2+3*4", "(2)(3)"]) == 0
    assert capsys.readouterr().out.splitlines() == ["14.0", "6.0"]

def test_one_shot_failure_sets_status(capsys):
    assert main(["1+1", "(2+3"]) == 1
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "2.0"
    assert out[1] == "Error in evaluating Expected RightParen, got EndOfInput"

def test_file(tmp_path, capsys):
    path = tmp_path / "exprs.txt"
    path.write_text("1+1\n\n2^3^2\n", encoding="utf-8")
    assert main(["--file", str(path)]) == 0
    out = capsys.readouterr().out
    assert "512.0" in out
    assert "2^3^2" in out

def test_file_with_error(tmp_path):
    path = tmp_path / "exprs.txt"
    path.write_text("1+\n", encoding="utf-8")
    assert main(["--file", str(path)]) == 1

def test_repl(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2+2\n\n2 3\n-2^2\nquit\n9\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "The computed number is 4.0" in out
    assert "Error in evaluating Unexpected token Number(3.0)" in out
    assert out.count("The computed number is") == 2

def test_repl_eof(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    assert main([]) == 0
    assert "The computed number is 1.0" in capsys.readouterr().out

def test_max_depth_flag(capsys):
    assert main(["--max-depth", "2", "((1))"]) == 1
    assert "nested too deeply" in capsys.readouterr().out

def test_bad_log_level():
    with pytest.raises(ValidationError):
        main(["--log-level", "LOUD", "1"])
