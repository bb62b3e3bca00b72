import pytest

from lispy.errors import ErrorKind
from lispy.types import Error, Lambda, Number, QExpr, SExpr, Symbol
from lispy.types.bind import INVALID_VARIADIC, bind_arguments, check_formals
from lispy.types.environment import Environment


def syms(*names):
    return [Symbol(n) for n in names]


def test_lambda_builtin_builds_function(interp):
    fn = interp.eval("\\ {x y} {+ x y}")
    assert isinstance(fn, Lambda)
    assert fn.formals == QExpr(syms("x", "y"))
    assert fn.body == QExpr([Symbol("+"), Symbol("x"), Symbol("y")])
    assert str(fn) == "(\\ {x y} {+ x y})"


def test_lambda_call(interp):
    assert interp.eval("(\\ {x y} {+ x y}) 10 20") == Number(30)
    interp.eval("def {add-mul} (\\ {x y} {+ x (* x y)})")
    assert interp.eval("add-mul 10 20") == Number(210)


def test_body_evaluates_as_sexpr(interp):
    assert interp.eval("(\\ {x} {x}) 5") == Number(5)
    assert interp.eval("(\\ {x} {{x}}) 5") == QExpr([Symbol("x")])
    assert interp.eval("(\\ {x} {}) 5") == SExpr()


@pytest.mark.parametrize(
    "source, message",
    [
        ("\\ {x}", "Function '\\' passed incorrect number of arguments. Got 1, Expected 2."),
        ("\\ 1 {x}", "Function '\\' passed incorrect type for argument 0. Got Number, Expected Q-Expression."),
        ("\\ {x} 1", "Function '\\' passed incorrect type for argument 1. Got Number, Expected Q-Expression."),
        ("\\ {x 1} {x}", "Function '\\' cannot define non-symbol. Got Number, Expected Symbol."),
        ("\\ {x &} {x}", INVALID_VARIADIC),
        ("\\ {& a b} {a}", INVALID_VARIADIC),
        ("\\ {& & a} {a}", INVALID_VARIADIC),
    ],
)
def test_lambda_construction_errors(interp, source, message):
    assert interp.eval(source) == Error(message)


class TestCurrying:
    @pytest.fixture(autouse=True)
    def add3(self, interp):
        interp.eval("def {add3} (\\ {a b c} {+ a b c})")
        return interp

    def test_partial_application_returns_lambda(self, interp):
        partial = interp.eval("add3 1")
        assert isinstance(partial, Lambda)
        assert partial.formals == QExpr(syms("b", "c"))
        assert str(partial) == "(\\ {b c} {+ a b c})"

    @pytest.mark.parametrize("source", ["add3 1 2 3", "(add3 1) 2 3", "(add3 1 2) 3", "((add3 1) 2) 3"])
    def test_every_split_agrees(self, interp, source):
        assert interp.eval(source) == Number(6)

    def test_partials_are_independent(self, interp):
        interp.eval("def {inc} (add3 0 1)")
        interp.eval("def {dec} (add3 0 -1)")
        assert interp.eval("inc 10") == Number(11)
        assert interp.eval("dec 10") == Number(9)
        assert interp.eval("inc 20") == Number(21)

    def test_too_many_arguments(self, interp):
        result = interp.eval("add3 1 2 3 4")
        assert result == Error("Too many arguments: expected 3, got 4")
        assert result.kind is ErrorKind.ARITY_MISMATCH
        assert interp.eval("(add3 1) 2 3 4") == Error("Too many arguments: expected 2, got 3")


class TestVariadic:
    def test_rest_collects_remaining(self, interp):
        assert interp.eval("(\\ {x & xs} {xs}) 1 2 3") == QExpr([Number(2), Number(3)])
        assert interp.eval("(\\ {x & xs} {x}) 1 2 3") == Number(1)

    def test_rest_only(self, interp):
        assert interp.eval("(\\ {& xs} {xs}) 1 2") == QExpr([Number(1), Number(2)])

    def test_rest_empty_when_nothing_left(self, interp):
        assert interp.eval("(\\ {x & xs} {xs}) 1") == QExpr()

    def test_variadic_partial(self, interp):
        interp.eval("def {tagged} (\\ {t u & rest} {list t u rest})")
        partial = interp.eval("tagged 1")
        assert isinstance(partial, Lambda)
        assert partial.formals == QExpr(syms("u", "&", "rest"))
        assert interp.eval("(tagged 1) 2 3 4") == QExpr(
            [Number(1), Number(2), QExpr([Number(3), Number(4)])]
        )

    def test_pack_style_variadic(self, interp):
        interp.eval("def {count-args} (\\ {& xs} {len xs})")
        assert interp.eval("count-args 7 8 9") == Number(3)


class TestDefinition:
    def test_def_binds_many(self, interp):
        assert interp.eval("def {a b c} 1 2 3") == SExpr()
        assert interp.eval("list a b c") == QExpr([Number(1), Number(2), Number(3)])

    def test_def_accepts_no_symbols(self, interp):
        assert interp.eval("def {}") == SExpr()

    def test_def_inside_function_is_global(self, interp):
        interp.eval("def {set-g} (\\ {x} {def {g} x})")
        interp.eval("set-g 5")
        assert interp.eval("g") == Number(5)

    def test_put_inside_function_is_local(self, interp):
        interp.eval("def {set-l} (\\ {x} {= {l} x})")
        assert interp.eval("set-l 5") == SExpr()
        assert interp.eval("l") == Error("Unbound symbol 'l'")

    def test_put_inside_function_leaves_outer_binding(self, interp):
        interp.eval("def {x} 1")
        assert interp.eval("(\\ {y} {= {x} y}) 5") == SExpr()
        assert interp.eval("x") == Number(1)

    def test_put_is_not_seen_by_sibling_call(self, interp):
        interp.eval("def {x} 1")
        interp.eval("def {assign} (\\ {y} {= {x} y})")
        interp.eval("def {read-x} (\\ {_} {x})")
        interp.eval("assign 5")
        assert interp.eval("read-x 0") == Number(1)

    def test_put_at_top_level_binds_root(self, interp):
        interp.eval("= {top} 3")
        assert interp.eval("top") == Number(3)

    @pytest.mark.parametrize(
        "source, message",
        [
            ("def", None),
            ("def 1 2", "Function 'def' passed incorrect type for argument 0. Got Number, Expected Q-Expression."),
            ("def {1} 2", "Function 'def' cannot define non-symbol. Got Number, Expected Symbol."),
            ("def {x y} 1", "Function 'def' passed incorrect number of values to symbols. Got 1, Expected 2."),
            ("= {x} 1 2", "Function '=' passed incorrect number of values to symbols. Got 2, Expected 1."),
        ],
    )
    def test_definition_errors(self, interp, source, message):
        result = interp.eval(source)
        if message is None:
            # A lone `def` is the builtin itself.
            assert not isinstance(result, Error)
        else:
            assert result == Error(message)

    def test_definition_stores_copy(self, interp):
        interp.eval("def {xs} {1 2}")
        interp.eval("def {ys} xs")
        interp.eval("def {xs} {3}")
        assert interp.eval("ys") == QExpr([Number(1), Number(2)])


class TestFun:
    def test_defines_named_function_in_root(self, interp):
        assert interp.eval("fun {add2 x y} {+ x y}") == SExpr()
        assert interp.eval("add2 2 3") == Number(5)
        assert Symbol("add2") in interp.env

    def test_sees_globals_named_like_its_own_arguments(self, interp):
        interp.eval("def {body} 5")
        interp.eval("fun {getbody} {body}")
        assert interp.eval("getbody") == Number(5)
        interp.eval("def {sig} 9")
        interp.eval("fun {getsig x} {+ x sig}")
        assert interp.eval("getsig 1") == Number(10)

    def test_closes_over_calling_scope(self, interp):
        interp.eval("def {make} (\\ {n} {fun {get-n} {n}})")
        interp.eval("make 7")
        interp.eval("def {n} 100")
        assert interp.eval("get-n") == Number(7)

    def test_supports_currying_and_rest(self, interp):
        interp.eval("fun {collect a & more} {cons a more}")
        assert interp.eval("fun {pair a b} {list a b}") == SExpr()
        assert isinstance(interp.eval("pair 1"), Lambda)
        assert interp.eval("collect 1 2 3") == QExpr([Number(1), Number(2), Number(3)])

    @pytest.mark.parametrize(
        "source, message",
        [
            ("fun {f x}", "Function 'fun' passed incorrect number of arguments. Got 1, Expected 2."),
            ("fun 1 {x}", "Function 'fun' passed incorrect type for argument 0. Got Number, Expected Q-Expression."),
            ("fun {f} 1", "Function 'fun' passed incorrect type for argument 1. Got Number, Expected Q-Expression."),
            ("fun {} {1}", "Function 'fun' passed {}!"),
            ("fun {f 1} {1}", "Function 'fun' cannot define non-symbol. Got Number, Expected Symbol."),
            ("fun {f x &} {x}", INVALID_VARIADIC),
        ],
    )
    def test_errors(self, interp, source, message):
        assert interp.eval(source) == Error(message)
        assert Symbol("f") not in interp.env


class TestClosures:
    def test_captures_defining_scope(self, interp):
        interp.eval("def {make-adder} (\\ {n} {\\ {x} {+ x n}})")
        interp.eval("def {add5} (make-adder 5)")
        interp.eval("def {n} 100")
        assert interp.eval("add5 1") == Number(6)

    def test_free_variable_falls_back_to_global(self, interp):
        interp.eval("def {scale} 3")
        interp.eval("def {times} (\\ {x} {* x scale})")
        assert interp.eval("times 2") == Number(6)
        interp.eval("def {scale} 4")
        assert interp.eval("times 2") == Number(8)

    def test_parameters_do_not_leak(self, interp):
        interp.eval("def {id} (\\ {p} {p})")
        interp.eval("id 1")
        assert interp.eval("p") == Error("Unbound symbol 'p'")

    def test_recursion_through_global(self, interp):
        interp.eval("def {fact} (\\ {n} {if (== n 0) {1} {* n (fact (- n 1))}})")
        assert interp.eval("fact 10") == Number(3628800)

    def test_zero_parameter_lambda_sees_closure(self, interp):
        interp.eval("def {make-thunk} (\\ {v} {\\ {} {v}})")
        interp.eval("def {thunk} (make-thunk 7)")
        assert interp.eval("thunk") == Number(7)


class TestBindArguments:
    def test_binds_in_new_child_of_closure(self):
        closure = Environment()
        bound = bind_arguments(syms("x", "y"), [Number(1), Number(2)], closure)
        local_env, remaining = bound
        assert local_env.outer is closure
        assert remaining == []
        assert local_env.lookup(Symbol("y")) == Number(2)
        assert closure.vars == {}

    def test_returns_unbound_formals(self):
        local_env, remaining = bind_arguments(syms("x", "y", "z"), [Number(1)], Environment())
        assert remaining == syms("y", "z")
        assert Symbol("y") not in local_env

    def test_too_many(self):
        assert bind_arguments(syms("x"), [Number(1), Number(2)], Environment()) == Error(
            "Too many arguments: expected 1, got 2"
        )

    def test_malformed_rest_at_call_time(self):
        result = bind_arguments(syms("&", "a", "b"), [Number(1)], Environment())
        assert result == Error(INVALID_VARIADIC)
        assert result.kind is ErrorKind.INVALID_LAMBDA_FORMAT

    def test_check_formals(self):
        assert check_formals(syms("x", "&", "xs")) is None
        assert check_formals(syms()) is None
        assert check_formals(syms("&")) == Error(INVALID_VARIADIC)
