from ember import EvaluatorFn
from ember import SExpression, LispValue
from ember.errors import EmberTypeError
from ember.types.nil import Nil, is_truthy
from ember.types.symbol import Symbol
from ember.types.environment import Environment

ELSE = Symbol("else")


def cond_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    """
    (cond (test body...) ... (else body...))

    The first clause whose test is truthy has its body evaluated; the last body
    form is in tail position. A clause without a body yields its test value.
    """
    for clause in tail:
        if not isinstance(clause, list) or not clause:
            raise EmberTypeError(f"cond clause must be a non-empty list, got {clause}")
        test, *body = clause
        value = Nil if test == ELSE else evaluate_fn(test, env)
        if test == ELSE or is_truthy(value):
            if not body:
                return value
            for e in body[:-1]:
                evaluate_fn(e, env)
            return evaluate_fn(body[-1], env, is_tail_call)
    return Nil
