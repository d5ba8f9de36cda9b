from ember import SExpression
from ember.types.environment import Environment
from ember.types.nil import is_truthy
from ember.types.symbol import TRUE, FALSE


def and_form(tail: list[SExpression], env: Environment, evaluate_fn, is_tail_call: bool = False) -> SExpression:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until a falsey value
    (Nil or #f) is found, in which case #f is returned. If all operands are
    truthy, returns the value of the last operand. With zero operands, returns #t.
    """
    result: SExpression = TRUE
    for expr in tail:
        val = evaluate_fn(expr, env)
        if not is_truthy(val):
            return FALSE
        result = val
    return result


def or_form(tail: list[SExpression], env: Environment, evaluate_fn, is_tail_call: bool = False) -> SExpression:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns the first
    truthy value. If none are truthy (or there are no operands), returns #f.
    """
    for expr in tail:
        val = evaluate_fn(expr, env)
        if is_truthy(val):
            return val
    return FALSE
