"""Exclusive ownership of a session's Environment.

A session keeps its single root Environment inside an EnvironmentHandle and
borrows it for each block evaluation. At most one borrow may be active at a
time; a nested or concurrent borrow raises EnvironmentBorrowError instead of
silently sharing the mutable view.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from ember.errors import EnvironmentBorrowError
from ember.types.environment import Environment


class EnvironmentHandle:
    __slots__ = ("_env", "_borrowed")

    def __init__(self, env: Environment):
        self._env = env
        self._borrowed = False

    @property
    def is_borrowed(self) -> bool:
        return self._borrowed

    @contextmanager
    def borrow(self) -> Iterator[Environment]:
        """Yield the environment for exclusive mutable use."""
        if self._borrowed:
            raise EnvironmentBorrowError("Session environment is already borrowed")
        self._borrowed = True
        try:
            yield self._env
        finally:
            self._borrowed = False

    def peek(self) -> Environment:
        """The environment itself, for read access between evaluations."""
        return self._env

    def __repr__(self) -> str:
        state = "borrowed" if self._borrowed else "free"
        return f"<EnvironmentHandle {state} {self._env}>"
