from ember import EvaluatorFn
from ember import SExpression, LispValue
from ember.errors import EmberInvalidSymbol, EmberArityError
from ember.types.symbol import Symbol
from ember.types.environment import Environment


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool = False,
) -> LispValue:
    if len(tail) != 2:
        raise EmberArityError("set requires exactly 2 arguments: (set var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise EmberInvalidSymbol(f"set first argument must be a Symbol, got {var_sym}")
    value = evaluate_fn(val_expr, env)
    env.set(var_sym, value)
    return value
