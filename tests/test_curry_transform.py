"""
Tests for the curry transform.

Validates:
  - Curried chain shape and final result
  - Independent buffers per head invocation
  - Over-application and under-application errors
  - Construction-time signature checks
  - uncurry flattening, level exhaustion and metadata
"""

import inspect
import logging

import pytest
from curryfix.currying.curry_transform import CurriedChain, CurryTransform, curry, uncurry
from curryfix.errors import (
    ArityError,
    ArityExceeded,
    ArityMismatch,
    TooManyArguments,
)


# ═══════════════════════════════════════════════════════════════════
#  Test Fixtures: Sample Functions
# ═══════════════════════════════════════════════════════════════════

def triple(a, b, c):
    return (a, b, c)


def fib_internal_c(count):
    return lambda a: lambda b: b if count == 0 else fib_internal_c(count - 1)(b)(a + b)


# ═══════════════════════════════════════════════════════════════════
#  Curried Chains
# ═══════════════════════════════════════════════════════════════════

class TestCurry:
    def test_chain_shape(self):
        chain = curry(3, triple)
        first = chain(1)
        assert callable(first)
        second = first(2)
        assert callable(second)
        assert second(3) == (1, 2, 3)

    def test_links_are_curried_chains(self):
        step = curry(3, triple)('a')
        assert isinstance(step, CurriedChain)
        assert step.collected == ('a',)
        assert step.remaining == 2
        assert '1/3' in repr(step)

    def test_head_has_nothing_collected(self):
        head = curry(2, lambda a, b: a - b)
        assert head.collected == ()
        assert head.remaining == 2
        assert head.arity == 2

    def test_unary(self):
        assert curry(1, abs)(-4) == 4

    def test_arity_zero_invokes_immediately(self):
        calls = []

        def answer():
            calls.append(1)
            return 42

        assert curry(0, answer) == 42
        assert calls == [1]

    def test_head_invocations_are_independent(self):
        head = curry(2, lambda a, b: (a, b))
        left = head(1)
        right = head(2)
        assert left(3) == (1, 3)
        assert right(4) == (2, 4)

    def test_head_reusable_after_completion(self):
        head = curry(3, triple)
        assert head(1)(2)(3) == (1, 2, 3)
        assert head(4)(5)(6) == (4, 5, 6)

    def test_result_may_be_callable(self):
        compose = curry(2, lambda f, g: lambda x: f(g(x)))
        inc_then_double = compose(lambda x: x * 2)(lambda x: x + 1)
        assert inc_then_double(3) == 8


class TestBranching:
    def test_partly_applied_link_is_reusable(self):
        step = curry(3, triple)(1)
        left = step(2)
        right = step(7)
        assert callable(right)
        assert right.collected == (1, 7)
        assert left(3) == (1, 2, 3)
        assert right(8) == (1, 7, 8)

    def test_link_keeps_its_position(self):
        step = curry(3, triple)(1)
        step(2)(3)
        assert step.collected == (1,)
        assert step.remaining == 2
        assert '1/3' in repr(step)

    def test_reuse_after_chain_completed(self):
        step = curry(3, triple)(1)
        assert step(2)(3) == (1, 2, 3)
        assert step(4)(5) == (1, 4, 5)

    def test_final_link_reusable(self):
        last = curry(3, triple)('a')('b')
        assert last('c') == ('a', 'b', 'c')
        assert last('d') == ('a', 'b', 'd')

    def test_branches_do_not_see_each_other(self):
        step = curry(4, lambda a, b, c, d: a + b + c + d)(1)
        tens = step(10)
        hundreds = step(100)
        tens_then = tens(20)
        hundreds_then = hundreds(200)
        assert tens_then(30) == 61
        assert hundreds_then(300) == 601
        assert tens(0)(0) == 11


class TestOverApplication:
    def test_extra_argument_on_final_link(self):
        step = curry(3, triple)(1)(2)
        with pytest.raises(ArityExceeded) as exc_info:
            step(3, 4)
        assert exc_info.value.expected == 3
        assert exc_info.value.supplied == 4

    def test_too_many_arguments_on_head(self):
        with pytest.raises(ArityExceeded) as exc_info:
            curry(2, lambda a, b: a)(1, 2, 3)
        assert exc_info.value.supplied == 3

    def test_error_is_a_type_error(self):
        link = curry(2, lambda a, b: a + b)(1)
        with pytest.raises(TypeError):
            link(2, 3)
        assert issubclass(ArityExceeded, ArityError)

    def test_failure_isolated_to_one_chain(self):
        head = curry(2, lambda a, b: a * b)
        link = head(3)
        with pytest.raises(ArityExceeded):
            link(4, 5)
        assert link(4) == 12
        assert head(6)(7) == 42

    def test_links_take_exactly_one_argument(self):
        head = curry(2, lambda a, b: a + b)
        with pytest.raises(TypeError):
            head(1, 2)
        with pytest.raises(TypeError):
            head()


# ═══════════════════════════════════════════════════════════════════
#  Construction Checks
# ═══════════════════════════════════════════════════════════════════

class TestCurryValidation:
    def test_negative_arity(self):
        with pytest.raises(ValueError):
            curry(-1, triple)

    def test_non_int_arity(self):
        with pytest.raises(TypeError):
            curry(2.0, triple)
        with pytest.raises(TypeError):
            curry(True, triple)

    def test_non_callable(self):
        with pytest.raises(TypeError, match="Expected callable"):
            curry(1, 5)

    def test_arity_mismatch_too_many_declared(self):
        with pytest.raises(ArityMismatch) as exc_info:
            curry(3, lambda a, b: a)
        assert exc_info.value.expected == 3
        assert exc_info.value.supplied == 2

    def test_arity_mismatch_too_few_declared(self):
        with pytest.raises(ArityMismatch):
            curry(1, triple)

    def test_defaults_and_varargs_accepted(self):
        assert curry(2, lambda a, b, c=10: a + b + c)(1)(2) == 13
        assert curry(4, lambda *args: sum(args))(1)(2)(3)(4) == 10

    def test_required_keyword_only_rejected(self):
        with pytest.raises(ArityMismatch):
            curry(1, lambda a, *, key: a)

    def test_checks_disabled(self):
        transform = CurryTransform(check_signatures=False)
        chain = transform.curry(3, lambda a, b: a + b)
        with pytest.raises(TypeError):
            chain(1)(2)(3)

    def test_uninspectable_signature_skipped(self, monkeypatch):
        import curryfix.currying.curry_transform as module
        monkeypatch.setattr(module, 'accepts_positional', lambda func, count: None)
        transform = CurryTransform()
        assert transform.curry(2, max)(3)(7) == 7
        assert transform.stats['signature_checks_skipped'] == 1

    def test_stats(self):
        transform = CurryTransform()
        g = transform.curry(2, lambda a, b: a + b)
        transform.uncurry(2, g)
        assert transform.stats['curried'] == 1
        assert transform.stats['uncurried'] == 1

    def test_debug_logging(self, caplog):
        logger_name = 'curryfix.currying.curry_transform'
        with caplog.at_level(logging.DEBUG, logger=logger_name):
            link = curry(1, lambda x: x)
            link(1)
        assert "complete" in caplog.text


# ═══════════════════════════════════════════════════════════════════
#  Uncurry
# ═══════════════════════════════════════════════════════════════════

class TestUncurry:
    def test_hand_curried(self):
        fib = uncurry(3, fib_internal_c)
        assert [fib(c, 0, 1) for c in range(2, 6)] == [2, 3, 5, 8]

    def test_metadata(self):
        fib = uncurry(3, fib_internal_c)
        assert fib.__name__ == 'fib_internal_c'
        assert fib.arity == 3

    def test_too_many_positional(self):
        with pytest.raises(ArityExceeded) as exc_info:
            uncurry(3, fib_internal_c)(1, 0, 1, 9)
        assert not isinstance(exc_info.value, TooManyArguments)
        assert exc_info.value.expected == 3
        assert exc_info.value.supplied == 4

    def test_too_few_positional(self):
        with pytest.raises(ArityMismatch) as exc_info:
            uncurry(3, fib_internal_c)(1, 0)
        assert exc_info.value.supplied == 2

    def test_ran_out_of_levels(self):
        two_levels = lambda a: lambda b: a + b
        with pytest.raises(TooManyArguments) as exc_info:
            uncurry(3, two_levels)(1, 2, 3)
        assert isinstance(exc_info.value, ArityExceeded)
        assert exc_info.value.expected == 3
        assert exc_info.value.supplied == 3

    def test_ran_out_of_levels_on_curry_chain(self):
        transform = CurryTransform(check_signatures=False)
        flat = transform.uncurry(3, curry(2, lambda a, b: a + b))
        with pytest.raises(TooManyArguments):
            flat(1, 2, 3)

    def test_chain_with_fewer_levels_rejected_up_front(self):
        with pytest.raises(ArityMismatch) as exc_info:
            uncurry(3, curry(2, lambda a, b: a + b))
        assert exc_info.value.expected == 3
        assert exc_info.value.supplied == 2

    def test_chain_with_more_levels_rejected_up_front(self):
        with pytest.raises(ArityMismatch) as exc_info:
            uncurry(2, curry(3, triple))
        assert exc_info.value.supplied == 3

    def test_partly_applied_chain_counts_remaining_levels(self):
        step = curry(3, triple)(1)
        flat = uncurry(2, step)
        assert flat(2, 3) == (1, 2, 3)
        assert flat(4, 5) == (1, 4, 5)
        with pytest.raises(ArityMismatch):
            uncurry(3, step)

    def test_signature_matches_arity(self):
        flat = uncurry(3, fib_internal_c)
        assert len(inspect.signature(flat).parameters) == 3
        assert flat.__wrapped__ is fib_internal_c
        with pytest.raises(ArityMismatch):
            curry(2, flat)
        assert curry(3, flat)(5)(0)(1) == 8

    def test_arity_zero(self):
        assert uncurry(0, 'value')() == 'value'
        with pytest.raises(ArityExceeded):
            uncurry(0, 'value')(1)

    def test_non_callable_rejected(self):
        with pytest.raises(TypeError):
            uncurry(2, 7)

    def test_each_call_feeds_a_fresh_chain(self):
        flat = uncurry(2, curry(2, lambda a, b: a - b))
        assert flat(10, 3) == 7
        assert flat(3, 10) == -7
