"""Built-in functions for the Ember runtime environment.

This module defines core arithmetic, comparison, list processing, predicates,
application helpers, and the registration used by the default environment.
Every builtin is called as ``fn(env, args)`` with already-evaluated arguments.
"""
from __future__ import annotations

import math
from numbers import Number
from typing import Any

from ember import LispValue
from ember.errors import EmberTypeError, EmberArityError, EmberArithmeticError
from ember.evaluation.apply import apply as apply_engine
from ember.evaluation.evaluator import evaluate, evaluate0
from ember.printer import display_string
from ember.runtime_context import get_current_output
from ember.types.environment import Environment
from ember.types.lambda_fn import Lambda
from ember.types.macro import Macro
from ember.types.nil import Nil, is_truthy
from ember.types.symbol import Symbol, TRUE, FALSE


def _bool(flag: bool) -> Symbol:
    return TRUE if flag else FALSE


def _is_number(x: Any) -> bool:
    return isinstance(x, Number) and not isinstance(x, bool)


def _numbers(name: str, expr: list[LispValue]) -> list[LispValue]:
    for x in expr:
        if not _is_number(x):
            raise EmberTypeError(f"All arguments to {name} must be numbers")
    return expr


def _as_list(name: str, xs: LispValue) -> list[LispValue]:
    """Nil reads as the empty list; anything else that is not a list is an error."""
    if xs is Nil:
        return []
    if not isinstance(xs, list):
        raise EmberTypeError(f"{name} expects a list, got {display_string(xs)}")
    return xs


def _arity(name: str, expr: list[LispValue], n: int) -> None:
    if len(expr) != n:
        plural = "argument" if n == 1 else "arguments"
        raise EmberArityError(f"{name} requires exactly {n} {plural}")


def is_equal(a, b):
    """Deep equality for Lisp values, with element-wise comparison for lists."""
    if a is b:
        return True
    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if _is_number(a) and _is_number(b):
        return a == b
    if type(a) != type(b):
        return False
    return a == b


def equals(env: Environment, expr: list[LispValue]) -> Symbol:
    """Return #t if all arguments are equal (or zero/one arg), else #f."""
    if len(expr) <= 1:
        return TRUE
    return _bool(all(is_equal(expr[0], other) for other in expr[1:]))


def not_equals(env: Environment, expr: list[LispValue]) -> Symbol:
    """Logical negation of equals."""
    return FALSE if equals(env, expr) == TRUE else TRUE


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the numeric sum of all arguments."""
    return sum(_numbers("+", expr))


def sub(env: Environment, expr: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not expr:
        raise EmberArityError("- requires at least 1 argument")
    _numbers("-", expr)
    if len(expr) == 1:
        return -expr[0]
    result = expr[0]
    for x in expr[1:]:
        result -= x
    return result


def mul(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the product of all arguments."""
    result = 1
    for x in _numbers("*", expr):
        result *= x
    return result


def _divide(a: LispValue, b: LispValue) -> LispValue:
    if b == 0:
        raise EmberArithmeticError("Division by zero")
    # integers stay exact when they divide evenly
    if isinstance(a, int) and isinstance(b, int) and a % b == 0:
        return a // b
    return a / b


def div(env: Environment, expr: list[LispValue]) -> LispValue:
    """Divide left-to-right; with one arg returns the reciprocal."""
    if not expr:
        raise EmberArityError("/ requires at least 1 argument")
    _numbers("/", expr)
    if len(expr) == 1:
        return _divide(1, expr[0])
    result = expr[0]
    for x in expr[1:]:
        result = _divide(result, x)
    return result


def mod(env: Environment, expr: list[LispValue]) -> LispValue:
    """(mod n d) => n % d. Exactly 2 integer arguments."""
    _arity("mod", expr, 2)
    n, d = expr
    if not isinstance(n, int) or not isinstance(d, int):
        raise EmberTypeError("All arguments to mod must be integers")
    if d == 0:
        raise EmberArithmeticError("Modulo by zero")
    return n % d


def truncate(env: Environment, expr: list[LispValue]) -> LispValue:
    """(truncate x) rounds toward zero; (truncate a b) is truncating division."""
    if len(expr) not in (1, 2):
        raise EmberArityError("truncate requires 1 or 2 arguments")
    _numbers("truncate", expr)
    if len(expr) == 2 and expr[1] == 0:
        raise EmberArithmeticError("Division by zero")
    x = expr[0] / expr[1] if len(expr) == 2 else expr[0]
    try:
        return math.trunc(x)
    except (OverflowError, ValueError):
        raise EmberArithmeticError(f"Cannot truncate {x}") from None


def _chain(name: str, op, expr: list[LispValue]) -> Symbol:
    try:
        return _bool(all(op(a, b) for a, b in zip(expr, expr[1:])))
    except TypeError:
        raise EmberTypeError(f"Cannot compare arguments to {name}") from None


def lt(env: Environment, expr: list[LispValue]) -> Symbol:
    """Chainable less-than: returns #t if a0 < a1 < a2 ... holds for all pairs."""
    return _chain("<", lambda a, b: a < b, expr)


def lte(env: Environment, expr: list[LispValue]) -> Symbol:
    """Chainable less-or-equal."""
    return _chain("<=", lambda a, b: a <= b, expr)


def gt(env: Environment, expr: list[LispValue]) -> Symbol:
    """Chainable greater-than."""
    return _chain(">", lambda a, b: a > b, expr)


def gte(env: Environment, expr: list[LispValue]) -> Symbol:
    """Chainable greater-or-equal."""
    return _chain(">=", lambda a, b: a >= b, expr)


def logical_not(env: Environment, expr: list[LispValue]) -> Symbol:
    """Logical NOT for a single value; only Nil and #f are considered falsey."""
    _arity("not", expr, 1)
    return _bool(not is_truthy(expr[0]))


# -------------------------------
# Lists
# -------------------------------
def cons(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """Prepend head to a list tail (Nil counts as the empty list)."""
    _arity("cons", expr, 2)
    head, tail = expr
    return [head] + _as_list("cons", tail)


def car(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the first element of a list; Nil for empty or Nil."""
    _arity("car", expr, 1)
    xs = _as_list("car", expr[0])
    return xs[0] if xs else Nil


def cdr(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return all but the first element; Nil for empty lists and singletons."""
    _arity("cdr", expr, 1)
    xs = _as_list("cdr", expr[0])
    return xs[1:] if len(xs) > 1 else Nil


def list_builtin(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """Construct a list from the provided arguments (identity)."""
    return list(expr)


def length(env: Environment, expr: list[LispValue]) -> int:
    _arity("length", expr, 1)
    if isinstance(expr[0], str):
        return len(expr[0])
    return len(_as_list("length", expr[0]))


def nth(env: Environment, expr: list[LispValue]) -> LispValue:
    """(nth index list) -> element at index, or Nil when out of range."""
    _arity("nth", expr, 2)
    index, xs = expr
    if not isinstance(index, int) or isinstance(index, bool):
        raise EmberTypeError("nth index must be an integer")
    xs = _as_list("nth", xs)
    return xs[index] if 0 <= index < len(xs) else Nil


def reverse(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    _arity("reverse", expr, 1)
    return list(reversed(_as_list("reverse", expr[0])))


def append(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """Concatenate multiple lists. Nil is treated as the empty list."""
    result = []
    for item in expr:
        result.extend(_as_list("append", item))
    return result


def _call(env: Environment, fn: LispValue, args: list[LispValue]) -> LispValue:
    """Call a Lisp or builtin function from Python and return a concrete value."""
    return apply_engine(fn, list(args), env, evaluate0, False)


def map_builtin(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """(map f list) -> list of (f x) for each x."""
    _arity("map", expr, 2)
    fn, xs = expr
    return [_call(env, fn, [x]) for x in _as_list("map", xs)]


def filter_builtin(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """(filter pred list) -> elements for which (pred x) is truthy."""
    _arity("filter", expr, 2)
    fn, xs = expr
    return [x for x in _as_list("filter", xs) if is_truthy(_call(env, fn, [x]))]


def range_builtin(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """(range end), (range start end) or (range start end step)."""
    if not 1 <= len(expr) <= 3:
        raise EmberArityError("range requires 1 to 3 arguments")
    if not all(isinstance(x, int) and not isinstance(x, bool) for x in expr):
        raise EmberTypeError("All arguments to range must be integers")
    if len(expr) == 3 and expr[2] == 0:
        raise EmberArithmeticError("range step cannot be zero")
    return list(range(*expr))


def sort_builtin(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    _arity("sort", expr, 1)
    try:
        return sorted(_as_list("sort", expr[0]))
    except TypeError:
        raise EmberTypeError("sort requires mutually comparable elements") from None


# -------------------------------
# Predicates
# -------------------------------
def is_nil(env: Environment, expr: list[LispValue]) -> Symbol:
    """Predicate: #t if the single argument is Nil."""
    _arity("nil?", expr, 1)
    return _bool(expr[0] is Nil)


def null(env: Environment, args: list[LispValue]) -> Symbol:
    """Predicate: #t if the single argument is Nil or the empty list."""
    _arity("null?", args, 1)
    return _bool(args[0] is Nil or args[0] == [])


def is_number(env: Environment, expr: list[LispValue]) -> Symbol:
    _arity("number?", expr, 1)
    return _bool(_is_number(expr[0]))


def is_symbol(env: Environment, expr: list[Any]) -> Symbol:
    """Predicate: #t if the single argument is a Symbol."""
    _arity("symbol?", expr, 1)
    return _bool(isinstance(expr[0], Symbol))


def is_string(env: Environment, expr: list[LispValue]) -> Symbol:
    _arity("string?", expr, 1)
    return _bool(isinstance(expr[0], str))


def is_list(env: Environment, expr: list[LispValue]) -> Symbol:
    _arity("list?", expr, 1)
    return _bool(isinstance(expr[0], list))


def is_procedure(env: Environment, expr: list[LispValue]) -> Symbol:
    _arity("procedure?", expr, 1)
    x = expr[0]
    return _bool(isinstance(x, Lambda) or (callable(x) and not isinstance(x, Macro)))


# -------------------------------
# Strings and output
# -------------------------------
def str_builtin(env: Environment, args: list[LispValue]) -> str:
    """Concatenate the display forms of all arguments."""
    return "".join(display_string(a) for a in args)


def symbol_to_string(env: Environment, args: list[LispValue]) -> LispValue:
    """(symbol->string x) -> string name of symbol x"""
    _arity("symbol->string", args, 1)
    if not isinstance(args[0], Symbol):
        raise EmberTypeError("symbol->string expects a symbol")
    return args[0].id


def string_to_symbol(env: Environment, args: list[LispValue]) -> LispValue:
    """(string->symbol x) -> Symbol named by string x"""
    _arity("string->symbol", args, 1)
    if not isinstance(args[0], str):
        raise EmberTypeError("string->symbol expects a string")
    return Symbol(args[0])


def print_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Print space-separated display forms of args to the current output; returns Nil."""
    print(" ".join(display_string(a) for a in args), file=get_current_output())
    return Nil


# -------------------------------
# Evaluation
# -------------------------------
def eval_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(eval form) evaluates a quoted form in the calling environment."""
    _arity("eval", args, 1)
    return evaluate(args[0], env)


def apply(env: Environment, expr: list[LispValue]) -> LispValue:
    """(apply f args) calls f with the elements of args."""
    _arity("apply", expr, 2)
    func, args = expr
    return _call(env, func, _as_list("apply", args))


BUILTINS = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "mod": mod,
    "truncate": truncate,
    "=": equals,
    "==": equals,
    "eq": equals,
    "/=": not_equals,
    "!=": not_equals,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "not": logical_not,
    "cons": cons,
    "car": car,
    "cdr": cdr,
    "head": car,
    "tail": cdr,
    "list": list_builtin,
    "length": length,
    "nth": nth,
    "reverse": reverse,
    "append": append,
    "map": map_builtin,
    "filter": filter_builtin,
    "range": range_builtin,
    "sort": sort_builtin,
    "nil?": is_nil,
    "null?": null,
    "number?": is_number,
    "symbol?": is_symbol,
    "string?": is_string,
    "list?": is_list,
    "procedure?": is_procedure,
    "str": str_builtin,
    "symbol->string": symbol_to_string,
    "string->symbol": string_to_symbol,
    "print": print_builtin,
    "eval": eval_builtin,
    "apply": apply,
}


for _name, _fn in BUILTINS.items():
    # first registered name is the one shown when the builtin is printed
    if not hasattr(_fn, "lisp_name"):
        _fn.lisp_name = _name


def register(env: Environment) -> None:
    """Register all builtin functions and constants into the given environment."""
    env.update({Symbol(name): fn for name, fn in BUILTINS.items()})
    env.define(TRUE, TRUE)
    env.define(FALSE, FALSE)
