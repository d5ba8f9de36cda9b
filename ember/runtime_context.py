from __future__ import annotations
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

# Process-global, like the session itself. `print` writes here.
_current_output: Optional[TextIO] = None


def set_current_output(stream: Optional[TextIO]) -> None:
    global _current_output
    _current_output = stream


def get_current_output() -> TextIO:
    """The stream Lisp-level output goes to; stdout when nothing is installed."""
    return _current_output if _current_output is not None else sys.stdout


@contextmanager
def output_to(stream: TextIO) -> Iterator[TextIO]:
    """Send Lisp-level output to `stream` for the duration of the block."""
    previous = _current_output
    set_current_output(stream)
    try:
        yield stream
    finally:
        set_current_output(previous)
