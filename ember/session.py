"""The interactive session: prompt, read one line, evaluate, print, repeat.

A Session owns exactly one root Environment for its whole life. Each line is
parsed, filtered by the parse error policy and evaluated as one block against
that environment, so definitions accumulate from line to line. Errors are
printed in place of a value and never end the session; only running out of
input does.
"""

from __future__ import annotations

import enum
import logging
import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from ember import LispValue
from ember.config import get_parse_error_policy, get_prompt
from ember.default_environment import default_env
from ember.errors import EmberError
from ember.evaluation.block import eval_block
from ember.line_reader import LineReader, make_line_reader
from ember.printer import to_lisp_string
from ember.runtime_context import output_to
from ember.reader.bridge import ParseErrorPolicy, read_forms
from ember.types.environment import Environment
from ember.types.handle import EnvironmentHandle
from ember.types.nil import Nil

logger = logging.getLogger(__name__)


class SessionState(enum.Enum):
    AWAITING_INPUT = "awaiting-input"
    EVALUATING = "evaluating"
    REPORTING = "reporting"
    CLOSED = "closed"


@dataclass(frozen=True)
class Outcome:
    """Result of evaluating one line: a value, or the error that stopped it."""

    value: LispValue = Nil
    error: Optional[EmberError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def describe(self) -> str:
        if self.error is not None:
            return str(self.error)
        return to_lisp_string(self.value)


class Session:
    def __init__(
        self,
        env: Environment | None = None,
        *,
        reader: LineReader | None = None,
        output: TextIO | None = None,
        parse_errors: ParseErrorPolicy | None = None,
        prompt: str | None = None,
    ):
        self.handle = EnvironmentHandle(env if env is not None else default_env())
        self.output = output if output is not None else sys.stdout
        self.reader = reader if reader is not None else make_line_reader(output=output)
        self.parse_errors = parse_errors if parse_errors is not None else get_parse_error_policy()
        self.prompt = prompt if prompt is not None else get_prompt()
        self.state = SessionState.AWAITING_INPUT

    @property
    def env(self) -> Environment:
        return self.handle.peek()

    def eval_line(self, line: str) -> Outcome:
        """Parse and evaluate one line against the session environment."""
        try:
            with output_to(self.output):
                value = eval_block(self.handle, read_forms(line, self.parse_errors))
        except EmberError as e:
            logger.debug("line failed: %s", e)
            return Outcome(error=e)
        return Outcome(value=value)

    def render(self, outcome: Outcome) -> str:
        """The text printed for `outcome`; a value that cannot be printed
        is reported as the error that stopped it."""
        try:
            return outcome.describe()
        except EmberError as e:
            logger.debug("could not print result: %s", e)
            return str(e)

    def step(self) -> bool:
        """Run one read-evaluate-print iteration; False once the session is closed."""
        if self.state is SessionState.CLOSED:
            return False

        line = self.reader.read_line(self.prompt)
        if line is None:
            self.state = SessionState.CLOSED
            # Properly go to the next line after quitting
            self.output.write("\n")
            self.output.flush()
            logger.info("session closed")
            return False

        self.state = SessionState.EVALUATING
        outcome = self.eval_line(line)

        self.state = SessionState.REPORTING
        self.output.write(self.render(outcome) + "\n")
        self.output.flush()

        self.state = SessionState.AWAITING_INPUT
        return True

    def run(self) -> None:
        """Loop until input is exhausted. Blocks the calling thread."""
        logger.info("session started (parse errors: %s)", self.parse_errors.value)
        while self.step():
            pass


def start_repl(env: Environment | None = None, **kwargs) -> None:
    """Starts a REPL on stdin/stdout. **This will block the current thread.**"""
    Session(env, **kwargs).run()
