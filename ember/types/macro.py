"""Macro values: transformers that receive their arguments unevaluated."""

from __future__ import annotations

from ember import SExpression, LispValue
from ember.types.environment import Environment
from ember.types.lambda_fn import bind_arguments
from ember.types.symbol import Symbol


class Macro:
    __slots__ = ("name", "formals", "body", "env")

    def __init__(self, name: Symbol, formals: list[Symbol], body: SExpression, env: Environment):
        self.name = name
        self.formals = formals
        self.body = body
        self.env = env

    def extend_env(self, args: list[LispValue]) -> Environment:
        return bind_arguments(self.formals, list(args), self.env, f"macro {self.name}")

    def __repr__(self) -> str:
        return f"<macro {self.name}>"
