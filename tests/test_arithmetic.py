import pytest

from ember import errors


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(- 10 3 2)", 5),
        ("(* 2 3 4)", 24),
        ("(/ 12 3)", 4),
        ("(/ 7 2)", 3.5),
        ("(/ 4)", 0.25),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (+ 20 10) (* 2 5))", 3),
        ("(+ 1 2.5 3)", 6.5),
        ("(+ -1 5 -3)", 1),
        ("(- 5)", -5),
        ("(* -2 3)", -6),
        ("(+)", 0),
        ("(*)", 1),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),
        ("(mod 17 5)", 2),
        ("(truncate 7.9)", 7),
        ("(truncate -7.9)", -7),
        ("(truncate 7 2)", 3),
    ]
)
def test_arithmetic(run, source, expected):
    result = run(source)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize(
    "source,error",
    [
        ("(/ 1 0)", errors.EmberArithmeticError),
        ("(mod 1 0)", errors.EmberArithmeticError),
        ("(truncate 1 0)", errors.EmberArithmeticError),
        ("(/)", errors.EmberArityError),
        ("(-)", errors.EmberArityError),
        ('(+ 1 "a")', errors.EmberTypeError),
        ("(* 'x 2)", errors.EmberTypeError),
        ("(mod 1.5 2)", errors.EmberTypeError),
        ("(mod 1)", errors.EmberArityError),
    ]
)
def test_arithmetic_errors(run, source, error):
    with pytest.raises(error):
        run(source)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 1 1 1)", "#t"),
        ("(= 1 1.0)", "#t"),
        ("(= 1 2)", "#f"),
        ("(= '(1 2) (list 1 2))", "#t"),
        ('(= "a" (quote a))', "#f"),
        ("(/= 1 2)", "#t"),
        ("(< 1 2 3)", "#t"),
        ("(< 1 3 2)", "#f"),
        ("(<= 1 1 2)", "#t"),
        ("(> 3 2 1)", "#t"),
        ("(>= 3 3 4)", "#f"),
        ("(not #f)", "#t"),
        ("(not nil)", "#t"),
        ("(not 0)", "#f"),
    ]
)
def test_comparisons(run, source, expected):
    assert str(run(source)) == expected


def test_comparing_incompatible_values(run):
    with pytest.raises(errors.EmberTypeError):
        run('(< 1 "two")')
