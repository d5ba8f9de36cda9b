from ember import EvaluatorFn
from ember import SExpression, LispValue
from ember.errors import EmberArityError, EmberInvalidSymbol
from ember.evaluation.special_forms.lambda_form import make_lambda
from ember.types.nil import Nil
from ember.types.symbol import Symbol
from ember.types.environment import Environment


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool,
) -> LispValue:
    """
    (define name value) or (define (name params...) body...)
    Binds in the current frame and evaluates to Nil.
    """
    if tail and isinstance(tail[0], list):
        signature, *body = tail
        if not signature:
            raise EmberArityError("define requires a name in its signature")
        name, *params = signature
        return defun_form([name, params, *body], env, evaluate_fn, _)

    if len(tail) != 2:
        raise EmberArityError("define requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise EmberInvalidSymbol(f"Cannot define {name} as a symbol")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return Nil


def defun_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool,
) -> LispValue:
    """(defun name (params...) body...)"""
    if len(tail) < 2:
        raise EmberArityError("defun requires a name and a parameter list")
    name, params, *body = tail
    if not isinstance(name, Symbol):
        raise EmberInvalidSymbol(f"Function name must be a Symbol, got {name}")
    env.define(name, make_lambda(params, body, env, name.id))
    return Nil
