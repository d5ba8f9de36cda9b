import io

import pytest

from ember.builtin.env_builtin import register
from ember.default_environment import default_env
from ember.evaluation.block import eval_block
from ember.line_reader import StreamLineReader
from ember.reader.bridge import ParseErrorPolicy
from ember.reader.parser import parse_all
from ember.session import Session
from ember.types.environment import Environment


@pytest.fixture
def env():
    """Fresh environment with builtins loaded and no prelude."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def prelude_env(monkeypatch):
    """Default environment with the bundled prelude."""
    monkeypatch.delenv("EMBER_PRELUDE_PATH", raising=False)
    return default_env()


@pytest.fixture
def run(env):
    """Evaluate a source string in the `env` fixture and return the last value."""
    def _run(source):
        return eval_block(env, parse_all(source))
    return _run


@pytest.fixture
def repl(env):
    """Run a whole REPL session over the given input text; returns the output."""
    def _repl(text, parse_errors=ParseErrorPolicy.DROP, prompt="> "):
        out = io.StringIO()
        reader = StreamLineReader(io.StringIO(text), out)
        session = Session(env, reader=reader, output=out, parse_errors=parse_errors, prompt=prompt)
        session.run()
        return out.getvalue()
    return _repl
