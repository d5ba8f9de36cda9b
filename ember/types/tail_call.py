from ember.types.environment import Environment
from ember.types.lambda_fn import Lambda


class TailCall:
    """A pending lambda body evaluation, resolved by the trampoline."""

    __slots__ = ("fn", "env")

    def __init__(self, fn: Lambda, env: Environment):
        self.fn = fn
        self.env = env
