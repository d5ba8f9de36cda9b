from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List

from ember.reader.bridge import ParseErrorPolicy


# Resolve installation dir (ember package directory)
_EMBER_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_FILES = [_EMBER_DIR / 'prelude' / 'core.lisp']
_DEFAULT_PROMPT = '> '
_DEFAULT_PARSE_ERRORS = 'drop'
_DEFAULT_LOG_LEVEL = 'WARNING'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    """Split an os.pathsep list from the environment; unset means `defaults`,
    set-but-empty means no paths at all."""
    raw = os.environ.get(var)
    if raw is None:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_prelude_paths() -> List[Path]:
    return paths_from_env('EMBER_PRELUDE_PATH', _DEFAULT_PRELUDE_FILES)


def get_parse_error_policy() -> ParseErrorPolicy:
    return ParseErrorPolicy.from_name(os.environ.get('EMBER_PARSE_ERRORS', _DEFAULT_PARSE_ERRORS))


def get_prompt() -> str:
    return os.environ.get('EMBER_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> int:
    name = os.environ.get('EMBER_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {name!r}")
    return level
