from pathlib import Path

import pytest

from tinylisp import config


def test_defaults(monkeypatch):
    for var in ("TINYLISP_PROMPT", "TINYLISP_LOG_LEVEL", "TINYLISP_RECURSION_LIMIT", "TINYLISP_PRELUDE"):
        monkeypatch.delenv(var, raising=False)
    assert config.get_prompt() == "lisp> "
    assert config.get_log_level() == "WARNING"
    assert config.get_recursion_limit() is None
    assert config.get_prelude_path() is None


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("TINYLISP_PROMPT", ">> ")
    monkeypatch.setenv("TINYLISP_LOG_LEVEL", " debug ")
    monkeypatch.setenv("TINYLISP_RECURSION_LIMIT", "5000")
    monkeypatch.setenv("TINYLISP_PRELUDE", "/tmp/prelude.lisp")
    assert config.get_prompt() == ">> "
    assert config.get_log_level() == "DEBUG"
    assert config.get_recursion_limit() == 5000
    assert config.get_prelude_path() == Path("/tmp/prelude.lisp")


def test_invalid_recursion_limit(monkeypatch):
    monkeypatch.setenv("TINYLISP_RECURSION_LIMIT", "lots")
    with pytest.raises(ValueError, match="TINYLISP_RECURSION_LIMIT"):
        config.get_recursion_limit()
