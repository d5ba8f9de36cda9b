import logging

import pytest

from ember import errors
from ember.default_environment import default_env
from ember.evaluation.block import eval_block
from ember.modules.prelude_loader import load_file, load_prelude, load_source
from ember.reader.parser import parse_all
from ember.types import Nil, Symbol


def run_in(env, source):
    return eval_block(env, parse_all(source))


@pytest.mark.parametrize("source,expected", [
    ("(inc 41)", 42),
    ("(dec 1)", 0),
    ("(identity 'x)", Symbol("x")),
    ("(zero? 0)", Symbol("#t")),
    ("(even? 10)", Symbol("#t")),
    ("(odd? 10)", Symbol("#f")),
    ("(fold + 0 (list 1 2 3 4))", 10),
    ("(fold (lambda (acc x) (cons x acc)) nil '(1 2 3))", [3, 2, 1]),
    ("(when (> 2 1) 'a 'b)", Symbol("b")),
    ("(when (< 2 1) 'a)", Nil),
    ("(unless (< 2 1) 'yes)", Symbol("yes")),
    ("(unless #t 'no)", Nil),
])
def test_prelude_definitions(prelude_env, source, expected):
    assert run_in(prelude_env, source) == expected


def test_fold_over_long_lists_is_tail_recursive(prelude_env):
    assert run_in(prelude_env, "(fold + 0 (range 3000))") == sum(range(3000))


def test_default_env_without_prelude(monkeypatch):
    monkeypatch.delenv("EMBER_PRELUDE_PATH", raising=False)
    env = default_env(prelude=False)
    assert Symbol("car") in env
    assert Symbol("inc") not in env


def test_custom_prelude_path(monkeypatch, tmp_path):
    lib = tmp_path / "mine.lisp"
    lib.write_text("(define answer 42)\n(defun twice (x) (* 2 x))\n", encoding="utf-8")
    monkeypatch.setenv("EMBER_PRELUDE_PATH", str(lib))
    env = default_env()
    assert run_in(env, "(twice answer)") == 84
    assert Symbol("inc") not in env


def test_missing_prelude_file_is_skipped(monkeypatch, tmp_path, caplog):
    monkeypatch.setenv("EMBER_PRELUDE_PATH", str(tmp_path / "absent.lisp"))
    with caplog.at_level(logging.WARNING, logger="ember.modules.prelude_loader"):
        env = default_env()
    assert Symbol("car") in env
    assert "absent.lisp" in caplog.text


def test_broken_prelude_raises(env, tmp_path):
    bad = tmp_path / "bad.lisp"
    bad.write_text("(define ok 1)\n(define broken", encoding="utf-8")
    with pytest.raises(errors.EmberSyntaxError):
        load_prelude(env, [bad])


def test_load_source_and_file(env, tmp_path):
    assert load_source(env, "(define a 2) (* a 3)") == 6
    src = tmp_path / "f.lisp"
    src.write_text("; comment only\n(+ a 1)", encoding="utf-8")
    assert load_file(env, src) == 3
