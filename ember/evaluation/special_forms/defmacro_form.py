"""Special form: defmacro.

Binds a Macro in the current environment. When a macro is applied its
arguments are bound unevaluated, the body produces an expansion and the
expansion is evaluated where the macro was called.
"""

from __future__ import annotations

from ember import EvaluatorFn, SExpression, LispValue
from ember.errors import EmberInvalidSymbol, EmberArityError
from ember.evaluation.special_forms.lambda_form import body_of, check_formals
from ember.types.environment import Environment
from ember.types.macro import Macro
from ember.types.nil import Nil
from ember.types.symbol import Symbol


def defmacro_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool,
) -> LispValue:
    if len(tail) < 3:
        raise EmberArityError("defmacro requires a name, a parameter list and a body")

    macro_name, params, *body = tail
    if not isinstance(macro_name, Symbol):
        raise EmberInvalidSymbol(f"Macro name must be a Symbol, got {macro_name}")

    env.define(macro_name, Macro(macro_name, check_formals(params), body_of(body), env))
    return Nil
