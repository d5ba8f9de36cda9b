from __future__ import annotations

from ember.builtin.env_builtin import register
from ember.modules.prelude_loader import load_prelude
from ember.types.environment import Environment


def default_env(prelude: bool = True) -> Environment:
    """A fresh root environment with builtins and, unless disabled, the prelude."""
    env = Environment()
    register(env)
    if prelude:
        load_prelude(env)
    return env
