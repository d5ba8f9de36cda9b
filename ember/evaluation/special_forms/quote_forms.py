from ember import SExpression, LispValue, EvaluatorFn
from ember.errors import EmberArityError, EmberTypeError, EmberSyntaxError
from ember.types.environment import Environment
from ember.types.nil import Nil
from ember.types.symbol import Symbol

QUASIQUOTE = Symbol("quasiquote")
UNQUOTE = Symbol("unquote")
UNQUOTE_SPLICING = Symbol("unquote-splicing")


def eval_quasiquote(
    evaluate_fn: EvaluatorFn,
    expr: SExpression,
    env: Environment,
    depth: int = 1,
) -> SExpression:
    """Rebuild `expr`, evaluating unquoted parts at nesting depth 1."""
    if not isinstance(expr, list) or not expr:
        return expr

    head = expr[0]
    if head == UNQUOTE:
        if len(expr) != 2:
            raise EmberArityError("unquote requires exactly 1 argument")
        if depth == 1:
            return evaluate_fn(expr[1], env)
        return [UNQUOTE, eval_quasiquote(evaluate_fn, expr[1], env, depth - 1)]
    if head == QUASIQUOTE:
        if len(expr) != 2:
            raise EmberArityError("quasiquote requires exactly 1 argument")
        return [QUASIQUOTE, eval_quasiquote(evaluate_fn, expr[1], env, depth + 1)]

    result_list = []
    for item in expr:
        if isinstance(item, list) and item and item[0] == UNQUOTE_SPLICING and depth == 1:
            if len(item) != 2:
                raise EmberArityError("unquote-splicing requires exactly 1 argument")
            spliced_val = evaluate_fn(item[1], env)
            if spliced_val is Nil:
                continue
            if not isinstance(spliced_val, list):
                raise EmberTypeError("Unquote-splicing must produce a list")
            result_list.extend(spliced_val)
            continue
        result_list.append(eval_quasiquote(evaluate_fn, item, env, depth))
    return result_list


def quote_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool,
) -> LispValue:
    """(quote expr) returns expr unevaluated."""
    if len(tail) != 1:
        raise EmberArityError("quote requires exactly 1 argument")
    return tail[0]


def quasiquote_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool,
) -> LispValue:
    """(quasiquote expr) quotes expr, except for unquote / unquote-splicing parts."""
    if len(tail) != 1:
        raise EmberArityError("quasiquote requires exactly 1 argument")
    return eval_quasiquote(evaluate_fn, tail[0], env)


def unquote_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool,
) -> LispValue:
    raise EmberSyntaxError("unquote outside of quasiquote")
