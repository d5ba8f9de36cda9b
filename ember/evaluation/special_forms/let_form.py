from ember import EvaluatorFn
from ember import SExpression, LispValue
from ember.errors import EmberTypeError, EmberInvalidSymbol
from ember.evaluation.special_forms.progn_form import progn_form
from ember.types.environment import Environment
from ember.types.symbol import Symbol


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    """
    (let ((name expr) ...) body...)
    Initializers are evaluated in the enclosing scope, then the body runs in a
    new child scope holding the bindings.
    """
    if not tail or not isinstance(tail[0], list):
        raise EmberTypeError("let requires a list of bindings")
    bindings, *body = tail

    scope = Environment(outer=env)
    for binding in bindings:
        if not isinstance(binding, list) or len(binding) != 2:
            raise EmberTypeError(f"let binding must be (name value), got {binding}")
        name, expr = binding
        if not isinstance(name, Symbol):
            raise EmberInvalidSymbol(f"let binding name must be a Symbol, got {name}")
        scope.define(name, evaluate_fn(expr, env))
    return progn_form(body, scope, evaluate_fn, is_tail_call)
