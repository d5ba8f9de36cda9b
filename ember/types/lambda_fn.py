"""Lambda function representation and argument binding for Ember."""

from __future__ import annotations

from io import StringIO

from ember import SExpression, LispValue
from ember.errors import EmberArityError, EmberInvalidSymbol
from ember.types.environment import Environment
from ember.types.symbol import Symbol

REST = Symbol("&rest")


def bind_arguments(
    formals: list[Symbol], args: list[LispValue], outer: Environment, who: str = "lambda"
) -> Environment:
    """Bind `args` to `formals` in a new child of `outer`.

    Positional formals must be matched exactly; `&rest name` collects whatever
    is left over into a list.
    """
    env = Environment(outer=outer)
    if REST in formals:
        idx = formals.index(REST)
        positional = formals[:idx]
        rest = formals[idx + 1:]
        if len(rest) != 1:
            raise EmberInvalidSymbol(f"{who}: &rest must be followed by exactly one name")
        if len(args) < len(positional):
            raise EmberArityError(
                f"{who} expects at least {len(positional)} arguments, got {len(args)}"
            )
        for name, value in zip(positional, args):
            env.define(name, value)
        env.define(rest[0], list(args[len(positional):]))
        return env

    if len(args) != len(formals):
        raise EmberArityError(f"{who} expects {len(formals)} arguments, got {len(args)}")
    for name, value in zip(formals, args):
        env.define(name, value)
    return env


class Lambda:
    """A first-class lambda with formal parameters, body, and closure env."""

    __slots__ = ("formals", "body", "env", "name")

    def __init__(
        self,
        formals: list[Symbol],
        body: SExpression,
        env: Environment | None = None,
        name: str | None = None,
    ):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        # Avoid shared default Environment across instances
        self.env: Environment = env if env is not None else Environment()
        self.name = name

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Return a new Environment binding `args` for evaluating the body."""
        return bind_arguments(self.formals, list(args), self.env, self.name or "lambda")

    def __str__(self) -> str:
        from ember.printer import to_lisp_string

        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(") ")
            buffer.write(to_lisp_string(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)
