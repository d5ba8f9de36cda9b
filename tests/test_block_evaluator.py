import pytest

from ember import errors
from ember.evaluation.block import eval_block
from ember.reader.bridge import ParseErrorPolicy, read_forms
from ember.reader.parser import parse, parse_all
from ember.types import EnvironmentHandle, Nil, Symbol


@pytest.fixture
def seen(env):
    """Record the arguments of every (note x) call, in order."""
    calls = []

    def note(_, args):
        calls.extend(args)
        return args[0] if args else Nil

    env.define(Symbol("note"), note)
    return calls


def test_forms_are_evaluated_in_source_order(env, seen):
    eval_block(env, parse_all("(note 1) (note 2) (note 3)"))
    assert seen == [1, 2, 3]


def test_result_is_value_of_last_form(env):
    assert eval_block(env, parse_all("1 2 (+ 1 2)")) == 3


def test_definitions_flow_to_later_forms(env):
    assert eval_block(env, parse_all("(define x 5) (define y (+ x 1)) (* x y)")) == 30


def test_empty_block_is_nil(env):
    assert eval_block(env, []) is Nil
    assert eval_block(env, read_forms("   ")) is Nil


def test_failure_short_circuits_the_block(env, seen):
    with pytest.raises(errors.EmberUnboundSymbol):
        eval_block(env, parse_all("(note 1) (note undefined) (note 3)"))
    assert seen == [1]


def test_failure_does_not_roll_back_earlier_mutations(env):
    with pytest.raises(errors.EmberArithmeticError):
        eval_block(env, parse_all("(define kept 1) (/ 1 0) (define lost 2)"))
    assert env.lookup(Symbol("kept")) == 1
    assert Symbol("lost") not in env


def test_forms_after_a_failure_are_not_even_read(env):
    pulled = []

    def forms():
        for form in parse_all("(/ 1 0) 2 3"):
            pulled.append(form)
            yield form

    with pytest.raises(errors.EmberArithmeticError):
        eval_block(env, forms())
    assert len(pulled) == 1


def test_parse_failure_in_block_raises_at_its_position(env, seen):
    with pytest.raises(errors.EmberSyntaxError):
        eval_block(env, read_forms("(note 1) ) (note 2)", ParseErrorPolicy.REPORT))
    assert seen == [1]


def test_dropped_parse_failures_never_reach_the_evaluator(env, seen):
    assert eval_block(env, read_forms("(note 1) ) (note 2) (note", ParseErrorPolicy.DROP)) == 2
    assert seen == [1, 2]


def test_raw_parse_output_can_be_evaluated(env):
    assert eval_block(env, parse("(+ 1 1)")) == 2


def test_definition_free_blocks_are_idempotent(env):
    eval_block(env, parse_all("(define base 10)"))
    first = eval_block(env, parse_all("(+ base 1) (* base 2)"))
    second = eval_block(env, parse_all("(+ base 1) (* base 2)"))
    assert first == second == 20


# -------------------------------
# Evaluating through a handle
# -------------------------------
def test_handle_is_borrowed_for_the_block_and_released(env):
    handle = EnvironmentHandle(env)
    states = []
    env.define(Symbol("borrowed?"), lambda _, args: states.append(handle.is_borrowed) or Nil)
    eval_block(handle, parse_all("(borrowed?)"))
    assert states == [True]
    assert not handle.is_borrowed


def test_handle_released_after_failure(env):
    handle = EnvironmentHandle(env)
    with pytest.raises(errors.EmberUnboundSymbol):
        eval_block(handle, parse_all("nope"))
    assert not handle.is_borrowed


def test_reentrant_block_evaluation_is_rejected(env):
    handle = EnvironmentHandle(env)
    env.define(Symbol("reenter"), lambda _, args: eval_block(handle, [1]))
    with pytest.raises(errors.EnvironmentBorrowError):
        eval_block(handle, parse_all("(reenter)"))
    assert not handle.is_borrowed
