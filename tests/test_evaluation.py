import math

import pytest

from minischeme import errors
from minischeme.evaluation.evaluator import evaluate
from minischeme.reader.parser import parse
from minischeme.types.environment import Environment
from minischeme.types.procedure import Procedure
from minischeme.types.symbol import Symbol


def run(source, env, policy="propagate"):
    return evaluate(parse(source).result, env, policy)


# -----------------------------------------------------
# Tests
# -----------------------------------------------------

def test_self_evaluating_literals(env):
    assert evaluate(1, env) == 1
    assert evaluate(3.14, env) == 3.14
    assert type(evaluate(1, env)) is int
    assert type(evaluate(1.0, env)) is float


def test_symbol_lookup(env):
    assert evaluate(Symbol("pi"), env) == math.pi
    assert isinstance(evaluate(Symbol("+"), env), Procedure)


def test_undefined_symbol(env):
    with pytest.raises(errors.SchemeNameError, match="symbol is not defined"):
        evaluate(Symbol("nope"), env)


def test_simple_call(env):
    assert evaluate((Symbol("+"), 1, 2), env) == 3


def test_nested_call(env):
    assert run("(+ 1 (* 2 (+ 3 4)))", env) == 15


def test_circle_area(env):
    assert run("(define r 10)", env) is None
    result = run("(* pi (* r r))", env)
    assert isinstance(result, float)
    assert result == pytest.approx(314.159265358979)


def test_define_number_literals(env):
    run("(define a 5)", env)
    run("(define b 2.5)", env)
    assert run("a", env) == 5
    assert run("b", env) == 2.5
    assert run("(+ a b)", env) == 7.5


def test_define_overwrites(env):
    run("(define a 1)", env)
    run("(define a 2)", env)
    assert run("a", env) == 2


def test_define_stores_symbols_unevaluated(env):
    run("(define a 5)", env)
    run("(define b a)", env)
    run("(define c undefined-thing)", env)
    assert run("b", env) == Symbol("a")
    assert run("c", env) == Symbol("undefined-thing")


def test_define_binds_in_current_frame_only(env):
    inner = Environment(env)
    run("(define local 3)", inner)
    assert run("local", inner) == 3
    assert env.get(Symbol("local")) is None


def test_define_can_shadow_builtins(env):
    run("(define car 1)", env)
    assert run("car", env) == 1
    with pytest.raises(errors.SchemeNameError):
        run("(car (list 1))", env)


@pytest.mark.parametrize(
    "source",
    [
        "(define)",
        "(define x)",
        "(define x 1 2)",
    ]
)
def test_define_wrong_arity(env, source):
    with pytest.raises(errors.SchemeDefineArityError, match="wrong syntax for define expression"):
        run(source, env)


def test_define_arity_error_is_a_syntax_and_arity_error(env):
    with pytest.raises(errors.SchemeArityError):
        run("(define x)", env)
    with pytest.raises(errors.SchemeSyntaxError):
        run("(define x)", env)


@pytest.mark.parametrize(
    "source",
    [
        "(define 1 2)",
        "(define (x) 2)",
        "(define x (+ 1 2))",
        "(define x ())",
    ]
)
def test_define_wrong_shape(env, source):
    with pytest.raises(errors.SchemeSyntaxError, match="wrong syntax for define expression"):
        run(source, env)
    assert env.get(Symbol("x")) is None


def test_empty_list_is_a_syntax_error(env):
    with pytest.raises(errors.SchemeSyntaxError):
        run("()", env)


@pytest.mark.parametrize("source", ["(1 2)", "((list 1) 2)", "(2.5)"])
def test_non_symbol_head(env, source):
    with pytest.raises(errors.SchemeSyntaxError):
        run(source, env)


def test_unknown_procedure(env):
    with pytest.raises(errors.SchemeNameError):
        run("(frobnicate 1 2)", env)


def test_head_must_be_a_procedure(env):
    with pytest.raises(errors.SchemeNameError):
        run("(pi 1)", env)


def test_arguments_evaluated_left_to_right(env, capsys):
    run("(begin (print 1) (print 2) (print 3))", env)
    assert capsys.readouterr().out == "1\n2\n3\n"


def test_valueless_arguments_are_omitted(env, policy, capsys):
    assert run("(list 1 (print 7) 2)", env, policy) == [1, 2]
    assert run("(list (define z 1) z)", env, policy) == [1]
    assert capsys.readouterr().out == "7\n"


def test_procedure_receives_evaluated_values(env):
    seen = []

    def spy(args):
        seen.append(args)
        return len(args)

    env.define(Symbol("spy"), Procedure("spy", spy))
    assert run("(spy 1 (+ 1 1) pi)", env) == 3
    assert seen == [[1, 2, math.pi]]


def test_procedure_without_value(env):
    env.define(Symbol("noop"), Procedure("noop", lambda args: None))
    assert run("(noop 1 2)", env) is None
