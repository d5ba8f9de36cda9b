from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, Optional

from ember import LispValue
from ember.config import get_prelude_paths
from ember.evaluation.block import eval_block
from ember.reader.parser import parse_all
from ember.types.environment import Environment

logger = logging.getLogger(__name__)


def load_source(env: Environment, code: str) -> LispValue:
    """Evaluate every form of `code` into `env`; any syntax error raises."""
    return eval_block(env, parse_all(code))


def load_file(env: Environment, path: Path) -> LispValue:
    result = load_source(env, Path(path).read_text(encoding='utf-8'))
    logger.info("loaded %s", path)
    return result


def load_prelude(env: Environment, paths: Optional[Iterable[Path]] = None) -> None:
    """Load each prelude file in order, skipping the ones that do not exist."""
    for p in (get_prelude_paths() if paths is None else paths):
        if not p.is_file():
            logger.warning("prelude file %s not found, skipping", p)
            continue
        load_file(env, p)
