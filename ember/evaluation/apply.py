"""Application engine for Ember.

Centralizes function application for the interpreter:
- Tail-call awareness via TailCall objects (consumed by the trampoline).
- Lambda application with strict arity and &rest collection.
- Application of Python callables registered in the environment.
"""

from __future__ import annotations

from typing import Callable

from ember import LispValue, EvaluatorFn
from ember.errors import EmberTypeError
from ember.printer import to_lisp_string
from ember.types.environment import Environment
from ember.types.lambda_fn import Lambda
from ember.types.tail_call import TailCall


def apply_lambda(
    fn: Lambda,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool,
) -> LispValue | TailCall:
    """Apply a Lisp Lambda value to already-evaluated arguments.

    In tail position the body is not evaluated here; a TailCall is returned
    for the trampoline to run, so tail recursion does not grow the Python stack.
    """
    new_env = fn.extend_env(args)
    if is_tail_call:
        return TailCall(fn, new_env)
    # Not tail position: step evaluation immediately
    result = evaluate_fn(fn.body, new_env, True)
    while isinstance(result, TailCall):
        result = evaluate_fn(result.fn.body, result.env, True)
    return result


def apply(
    head: Lambda | Callable[[Environment, list[LispValue]], LispValue] | object,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    tail: bool = False,
) -> LispValue | TailCall:
    """Apply either a Lambda or a Python callable.

    - For Lambda, defer to apply_lambda.
    - For Python callables (builtins), invoke with the runtime env and list of args.
    - Otherwise, raise a type error.
    """
    if isinstance(head, Lambda):
        return apply_lambda(head, args, evaluate_fn, tail)
    elif callable(head):
        return head(env, args)
    else:
        raise EmberTypeError(f"Cannot apply non-function {to_lisp_string(head)}")
