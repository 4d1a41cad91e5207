from __future__ import annotations
import os
from pathlib import Path
from typing import Optional

# Defaults
_DEFAULT_PROMPT = "lisp> "
_DEFAULT_LOG_LEVEL = "WARNING"


def str_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    return default if raw is None else raw


def int_from_env(var: str) -> Optional[int]:
    raw = os.environ.get(var, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_prompt() -> str:
    return str_from_env('TINYLISP_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> str:
    return str_from_env('TINYLISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()


def get_recursion_limit() -> Optional[int]:
    # Unset means keep the interpreter's own default
    return int_from_env('TINYLISP_RECURSION_LIMIT')


def get_prelude_path() -> Optional[Path]:
    raw = os.environ.get('TINYLISP_PRELUDE', '').strip()
    return Path(raw) if raw else None
