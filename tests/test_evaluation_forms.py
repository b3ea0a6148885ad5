import pytest

from formula.errors import (
    FormulaArityError,
    FormulaDivisionByZero,
    FormulaNotCallable,
    FormulaTypeError,
    FormulaUnboundSymbol,
)
from formula.evaluation.evaluator import evaluate
from formula.types.primitive import Primitive
from formula.types.symbol import Symbol


@pytest.fixture
def probe(env):
    """A primitive that counts its calls and returns its first argument."""
    calls = []

    def _probe(args):
        calls.append(args)
        return args[0] if args else 0.0

    env.define(Symbol("probe"), Primitive("probe", _probe, numeric=False))
    return calls


# ------------------ if ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if 1 10 20)", 10),
        ("(if 0 1 2)", 2),
        ("(if -0.0 1 2)", 2),
        ("(if -3 1 2)", 1),
        ("(if 0.5 1 2)", 1),
        ("(if true 1 2)", 1),
        ("(if false 1 2)", 2),
        ("(if + 1 2)", 1),
        ("(if (< 1 2) (+ 1 1) (+ 2 2))", 2),
        ("(if (> 1 2) (+ 1 1) (+ 2 2))", 4),
        ("(if (= 1 1) (if 0 5 6) 7)", 6),
    ]
)
def test_if(run, source, expected):
    assert run(source) == expected


def test_if_evaluates_only_the_then_branch(run, probe):
    assert run("(if 1 (probe 10) (probe 20))") == 10
    assert probe == [[10.0]]


def test_if_evaluates_only_the_else_branch(run, probe):
    assert run("(if 0 (probe 10) (probe 20))") == 20
    assert probe == [[20.0]]


def test_untaken_branch_errors_are_never_raised(run):
    assert run("(if 1 2 (/ 1 0))") == 2
    assert run("(if 0 undefined-symbol 3)") == 3


@pytest.mark.parametrize("source", ["(if)", "(if 1)", "(if 1 2)", "(if 1 2 3 4)"])
def test_if_arity(run, source):
    with pytest.raises(FormulaArityError):
        run(source)


# ------------------ define ------------------

def test_define_returns_bound_value(run, env):
    assert run("(define x 5)") == 5
    assert env.lookup(Symbol("x")) == 5


def test_define_evaluates_value(run):
    run("(define x (* 6 7))")
    assert run("x") == 42


def test_define_twice_with_same_value(run):
    run("(define x 5)")
    run("(define x 5)")
    assert run("x") == 5


def test_redefinition_overwrites(run):
    run("(define x 5)")
    run("(define x (+ x 1))")
    assert run("x") == 6


def test_define_can_rebind_primitives(run):
    run("(define plus +)")
    assert run("(plus 2 3)") == 5
    run("(define + -)")
    assert run("(+ 10 4)") == 6


def test_failed_define_leaves_environment_unmutated(run, env):
    with pytest.raises(FormulaDivisionByZero):
        run("(define y (+ 1 (/ 1 0)))")
    assert Symbol("y") not in env
    with pytest.raises(FormulaUnboundSymbol):
        run("y")


def test_failed_redefine_keeps_old_value(run):
    run("(define y 1)")
    with pytest.raises(FormulaUnboundSymbol):
        run("(define y nope)")
    assert run("y") == 1


@pytest.mark.parametrize("source", ["(define 1 2)", "(define (x) 2)", "(define if 1)", "(define begin 1)"])
def test_define_name_must_be_symbol(run, source):
    with pytest.raises(FormulaTypeError):
        run(source)


@pytest.mark.parametrize("source", ["(define)", "(define x)", "(define x 1 2)"])
def test_define_arity(run, source):
    with pytest.raises(FormulaArityError):
        run(source)


# ------------------ begin ------------------

def test_begin_returns_last(run):
    assert run("(begin 1 2 3)") == 3


def test_begin_sequences_definitions(run):
    assert run("(begin (define foo 1007) (define bar 330) (+ foo bar))") == 1337


def test_begin_evaluates_in_order(run, probe):
    run("(begin (probe 1) (probe 2) (probe 3))")
    assert probe == [[1.0], [2.0], [3.0]]


def test_begin_stops_at_first_error(run, env):
    with pytest.raises(FormulaDivisionByZero):
        run("(begin (define a 1) (/ 1 0) (define b 2))")
    assert Symbol("a") in env
    assert Symbol("b") not in env


def test_empty_begin(run):
    with pytest.raises(FormulaArityError):
        run("(begin)")


# ------------------ scenarios ------------------

@pytest.mark.parametrize(
    "source,error",
    [
        ("(undefined-symbol)", FormulaUnboundSymbol),
        ("((+ 1 2) 3)", FormulaNotCallable),
        ("(/ 1 0)", FormulaDivisionByZero),
    ]
)
def test_error_scenarios(run, source, error):
    with pytest.raises(error):
        run(source)


def test_special_form_names_are_not_values(run):
    with pytest.raises(FormulaUnboundSymbol):
        run("if")


def test_evaluate_parsed_tree_directly(env):
    expr = [Symbol("begin"), [Symbol("define"), Symbol("z"), 2.0], [Symbol("*"), Symbol("z"), Symbol("z")]]
    assert evaluate(expr, env) == 4.0
