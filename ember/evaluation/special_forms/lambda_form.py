from ember import EvaluatorFn
from ember import SExpression, LispValue
from ember.errors import EmberArityError, EmberInvalidSymbol, EmberTypeError
from ember.types.environment import Environment
from ember.types.lambda_fn import Lambda
from ember.types.nil import Nil
from ember.types.symbol import Symbol


def body_of(body_forms: list[SExpression]) -> SExpression:
    """Zero forms -> Nil, one form -> itself, several -> an implicit begin."""
    if not body_forms:
        return Nil
    if len(body_forms) == 1:
        return body_forms[0]
    return [Symbol("begin"), *body_forms]


def check_formals(params: SExpression) -> list[Symbol]:
    if params is Nil:
        return []
    if not isinstance(params, list):
        raise EmberTypeError(f"Parameter list must be a list, got {params}")
    for p in params:
        if not isinstance(p, Symbol):
            raise EmberInvalidSymbol(f"Parameter must be a Symbol, got {p}")
    return list(params)


def make_lambda(
    params: SExpression, body_forms: list[SExpression], env: Environment, name: str | None = None
) -> Lambda:
    return Lambda(check_formals(params), body_of(body_forms), env, name)


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool,
) -> LispValue:
    # (lambda (params) body...) allows zero or more body forms; several forms
    # are an implicit begin, none at all returns nil when invoked.
    if not tail:
        raise EmberArityError("lambda requires at least a parameter list")
    return make_lambda(tail[0], tail[1:], env)
