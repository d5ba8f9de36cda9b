"""Core evaluator and trampoline for the Ember interpreter.

Implements special-form dispatch, macro application and tail-call aware
application via a simple trampoline using TailCall objects.
"""

from __future__ import annotations

from ember import SExpression, LispValue
from ember.errors import EmberRecursionError
from ember.types.environment import Environment
from ember.types.macro import Macro
from ember.types.symbol import Symbol
from ember.types.tail_call import TailCall
from ember.evaluation.apply import apply
from ember.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """
    Trampoline evaluator: tail-call aware evaluation of a single form.
    """
    try:
        result = evaluate0(expr, env, True)  # Start in 'tail' mode.
        while isinstance(result, TailCall):
            result = evaluate0(result.fn.body, result.env, True)
    except RecursionError:
        raise EmberRecursionError("Maximum evaluation depth exceeded") from None
    return result


def force(value: LispValue) -> LispValue:
    """Resolve a TailCall (if any) into a concrete value."""
    while isinstance(value, TailCall):
        value = evaluate0(value.fn.body, value.env, True)
    return value


def evaluate0(
    expr: SExpression,
    env: Environment,
    is_tail_call: bool = False,
) -> LispValue:
    """
    Core evaluator: single-step evaluation with tail-call awareness.
    Returns either a value or a TailCall (only when is_tail_call is set).
    """
    match expr:
        case []:
            return []

        case [head, *tail_args]:
            if isinstance(head, Symbol):
                # --- Special forms handling ---
                special = SPECIAL_FORMS.get(head)
                if special is not None:
                    return special(tail_args, env, evaluate0, is_tail_call)
                head = env.lookup(head)
            else:
                head = force(evaluate0(head, env))

            # Macros receive their arguments unevaluated; the expansion runs in the caller's scope.
            if isinstance(head, Macro):
                expansion = force(evaluate0(head.body, head.extend_env(tail_args), True))
                return evaluate0(expansion, env, is_tail_call)

            args = [force(evaluate0(arg, env)) for arg in tail_args]
            return apply(head, args, env, evaluate0, is_tail_call)

        case Symbol():
            # Keywords (:name) are self-evaluating.
            if expr.is_keyword:
                return expr
            return env.lookup(expr)

    # --- Atoms return as-is ---
    return expr
