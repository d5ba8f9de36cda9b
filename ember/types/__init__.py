from ember.types.symbol import Symbol, TRUE, FALSE
from ember.types.nil import Nil, NilType, is_truthy
from ember.types.environment import Environment
from ember.types.handle import EnvironmentHandle
from ember.types.lambda_fn import Lambda
from ember.types.macro import Macro

__all__ = [
    "Symbol", "TRUE", "FALSE", "Nil", "NilType", "is_truthy",
    "Environment", "EnvironmentHandle", "Lambda", "Macro",
]
