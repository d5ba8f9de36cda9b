"""Evaluation of an ordered block of forms against one environment."""

from __future__ import annotations

import logging
from contextlib import nullcontext
from typing import Iterable

from ember import SExpression, LispValue
from ember.evaluation.evaluator import evaluate
from ember.reader.parser import ParseFailure
from ember.types.environment import Environment
from ember.types.handle import EnvironmentHandle
from ember.types.nil import Nil

logger = logging.getLogger(__name__)


def eval_block(
    env: Environment | EnvironmentHandle,
    forms: Iterable[SExpression | ParseFailure],
) -> LispValue:
    """Evaluate `forms` in order against `env` and return the last value.

    Every form sees the bindings made by the forms before it. The first
    failure propagates immediately and the remaining forms are never looked
    at; mutations already made stay in place. A ParseFailure in the sequence
    raises its syntax error at that position. An empty block evaluates to Nil.

    When given an EnvironmentHandle the environment is borrowed for the whole
    block.
    """
    borrowed = env.borrow() if isinstance(env, EnvironmentHandle) else nullcontext(env)
    with borrowed as target:
        result: LispValue = Nil
        count = 0
        for form in forms:
            if isinstance(form, ParseFailure):
                raise form.error
            result = evaluate(form, target)
            count += 1
        logger.debug("evaluated block of %d form(s)", count)
        return result
