"""Adapter from one line of raw text to the forms handed to the block evaluator.

The reader reports every top-level unit, good or bad. What happens to the bad
ones is a policy decision: DROP discards them without a trace (the historical
behavior of the REPL), REPORT keeps them in position so that evaluation stops
there and the syntax error is shown like any other error.
"""

from __future__ import annotations

import enum
import logging
from typing import Iterator

from ember import SExpression
from ember.reader.parser import ParseFailure, parse

logger = logging.getLogger(__name__)


class ParseErrorPolicy(enum.Enum):
    DROP = "drop"
    REPORT = "report"

    @classmethod
    def from_name(cls, name: str) -> ParseErrorPolicy:
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown parse error policy {name!r} (expected one of: {choices})") from None


def read_forms(
    line: str, policy: ParseErrorPolicy = ParseErrorPolicy.DROP
) -> Iterator[SExpression | ParseFailure]:
    """Yield the forms of `line` left to right, filtered by `policy`.

    Under DROP only successfully parsed forms are yielded; under REPORT
    ParseFailure items are passed through where they occurred.
    """
    for item in parse(line):
        if isinstance(item, ParseFailure):
            if policy is ParseErrorPolicy.DROP:
                logger.debug("dropping parse failure at %d: %s", item.offset, item.error)
                continue
        yield item
