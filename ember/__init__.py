# Core type aliases for Ember's data model.
# Plain Python types (int, float, str, list) represent both code (forms) and
# runtime values. There is no explicit Cons type.
#
# - SExpression: use in reader code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms and values are interchangeable
SExpression = LispValue

# Evaluator function type used inside special forms
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.3.0"

from ember.reader.parser import parse, parse_all, ParseFailure  # noqa: E402
from ember.reader.bridge import read_forms, ParseErrorPolicy  # noqa: E402
from ember.evaluation.evaluator import evaluate  # noqa: E402
from ember.evaluation.block import eval_block  # noqa: E402
from ember.default_environment import default_env  # noqa: E402
from ember.session import Session, SessionState, Outcome, start_repl  # noqa: E402
