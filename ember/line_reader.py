"""Blocking, one-line-at-a-time input sources for the REPL.

A line reader shows a prompt and blocks until a full line is available. It
returns None once input is exhausted.
"""

from __future__ import annotations

import sys
from typing import Optional, Protocol, TextIO

from prompt_toolkit import PromptSession
from prompt_toolkit.history import History, InMemoryHistory


class LineReader(Protocol):
    def read_line(self, prompt: str) -> Optional[str]: ...


class StreamLineReader:
    """Reads lines from a text stream, writing the prompt to another."""

    def __init__(self, input: TextIO | None = None, output: TextIO | None = None):
        self.input = input if input is not None else sys.stdin
        self.output = output if output is not None else sys.stdout

    def read_line(self, prompt: str) -> Optional[str]:
        self.output.write(prompt)
        self.output.flush()
        line = self.input.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")


class PromptToolkitLineReader:
    """Interactive terminal input with line editing and in-session history."""

    def __init__(self, history: History | None = None):
        self.session: PromptSession[str] = PromptSession(
            history=history if history is not None else InMemoryHistory()
        )

    def read_line(self, prompt: str) -> Optional[str]:
        while True:
            try:
                return self.session.prompt(prompt)
            except EOFError:
                return None
            except KeyboardInterrupt:
                # Ctrl-C discards the line being edited
                continue


def make_line_reader(input: TextIO | None = None, output: TextIO | None = None) -> LineReader:
    """Use prompt_toolkit on a real terminal, plain streams otherwise."""
    stdin = input if input is not None else sys.stdin
    stdout = output if output is not None else sys.stdout
    if input is None and output is None and stdin.isatty() and stdout.isatty():
        return PromptToolkitLineReader()
    return StreamLineReader(stdin, stdout)
