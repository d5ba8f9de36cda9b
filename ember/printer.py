"""Rendering of runtime values as Lisp text, as shown by the REPL."""

from __future__ import annotations

from ember import LispValue
from ember.errors import EmberArithmeticError, EmberRecursionError
from ember.types.lambda_fn import Lambda
from ember.types.macro import Macro
from ember.types.nil import NilType
from ember.types.symbol import Symbol

STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}


def quote_string(s: str) -> str:
    return '"' + "".join(STRING_ESCAPES.get(ch, ch) for ch in s) + '"'


def to_lisp_string(value: LispValue) -> str:
    """Return the printed form of `value`.

    Strings are quoted so that what is printed reads back as the same value;
    lists print as (a b c) and builtins as <builtin name>. Values that cannot
    be rendered raise an EmberError, never a bare Python exception.
    """
    try:
        return _render(value)
    except RecursionError:
        raise EmberRecursionError("Value is nested too deeply to print") from None


def _render(value: LispValue) -> str:
    match value:
        case NilType():
            return "nil"
        case Symbol():
            return value.id
        case bool():
            return "#t" if value else "#f"
        case str():
            return quote_string(value)
        case int() | float():
            try:
                return repr(value)
            except ValueError:
                raise EmberArithmeticError(
                    f"Integer too large to print ({value.bit_length()} bits)"
                ) from None
        case list() | tuple():
            return "(" + " ".join(_render(v) for v in value) + ")"
        case Lambda() | Macro():
            return str(value)
    if callable(value):
        name = getattr(value, "lisp_name", None) or getattr(value, "__name__", "?")
        return f"<builtin {name}>"
    return str(value)


def display_string(value: LispValue) -> str:
    """Like to_lisp_string, but strings are shown raw (used by print and str)."""
    if isinstance(value, str):
        return value
    return to_lisp_string(value)
