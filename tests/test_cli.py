import io
import sys

import pytest

from tinylisp import cli


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda level: None)
    for var in ("TINYLISP_PROMPT", "TINYLISP_LOG_LEVEL", "TINYLISP_RECURSION_LIMIT", "TINYLISP_PRELUDE"):
        monkeypatch.delenv(var, raising=False)


def test_file_mode(tmp_path, capsys):
    src = tmp_path / "prog.lisp"
    src.write_text("(define x 10) (define f (lambda (y) (+ x y))) (f 5)\n")
    assert cli.main([str(src)]) == 0
    assert capsys.readouterr().out == "15\n"


def test_file_mode_failure(tmp_path, capsys):
    src = tmp_path / "prog.lisp"
    src.write_text("(+ 1 \"x\")\n")
    assert cli.main([str(src)]) == 1
    assert capsys.readouterr().err.startswith("Error: ")


def test_interactive_mode(monkeypatch, capsys):
    monkeypatch.setenv("TINYLISP_PROMPT", "? ")
    monkeypatch.setattr(sys, "stdin", io.StringIO("(* 6 7)\nexit\n"))
    assert cli.main([]) == 0
    out = capsys.readouterr().out
    assert "? 42\n" in out


def test_prelude_from_environment(tmp_path, monkeypatch, capsys):
    prelude = tmp_path / "prelude.lisp"
    prelude.write_text("(define twice (lambda (x) (* 2 x)))\n")
    src = tmp_path / "prog.lisp"
    src.write_text("(twice 21)\n")
    monkeypatch.setenv("TINYLISP_PRELUDE", str(prelude))
    assert cli.main([str(src)]) == 0
    assert capsys.readouterr().out == "42\n"


def test_bad_configuration_is_fatal(monkeypatch, capsys):
    monkeypatch.setenv("TINYLISP_RECURSION_LIMIT", "many")
    assert cli.main([]) == 1
    assert "Fatal error" in capsys.readouterr().err


def test_recursion_limit_applied(monkeypatch, tmp_path):
    original = sys.getrecursionlimit()
    monkeypatch.setenv("TINYLISP_RECURSION_LIMIT", str(original + 100))
    src = tmp_path / "prog.lisp"
    src.write_text("1\n")
    try:
        assert cli.main([str(src)]) == 0
        assert sys.getrecursionlimit() == original + 100
    finally:
        sys.setrecursionlimit(original)


def test_help(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--help"])
    assert exc.value.code == 0
    assert "usage: tinylisp" in capsys.readouterr().out


def test_file_mode_not_utf8(tmp_path, capsys):
    src = tmp_path / "bytes.lisp"
    src.write_bytes(b'(print "\xff\xfe")\n')
    assert cli.main([str(src)]) == 1
    assert capsys.readouterr().err.startswith("Error: Could not read file")
