from ember import EvaluatorFn
from ember import SExpression, LispValue
from ember.errors import EmberArityError
from ember.types.nil import is_truthy
from ember.types.symbol import FALSE
from ember.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise EmberArityError("if requires a condition, a then-expression and an optional else")

    cond = evaluate_fn(tail[0], env)

    if is_truthy(cond):
        return evaluate_fn(tail[1], env, is_tail_call)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env, is_tail_call)
    else:
        return FALSE  # default "false" if no else
