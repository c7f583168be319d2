"""
Unit tests for fnbridge.core.curry - Currying Engine.

Tests zero-argument self returns, split application, arity overflow,
stage immutability, the explicit Partial/Complete result and arity
validation.
"""

from unittest.mock import Mock

import pytest

from fnbridge.core.curry import Complete, CurriedStage, Partial, curried, curry
from fnbridge.core.exceptions import ArityOverflow


def _add(a, b):
    return a + b


# ============================================================================
# Test: Application
# ============================================================================


class TestApplication:
    def test_all_at_once(self) -> None:
        add = curry(_add, 2)
        assert add(1, 2) == 3

    def test_one_at_a_time(self) -> None:
        add = curry(_add, 2)
        assert add(1)(2) == 3

    def test_zero_args_then_all(self) -> None:
        add = curry(_add, 2)
        assert add()(1, 2) == 3

    def test_split_application_equivalence(self) -> None:
        add = curry(_add, 2)
        assert add(1)(2) == add(1, 2) == _add(1, 2)

    def test_argument_order_preserved(self) -> None:
        join = curry(lambda a, b, c, d: [a, b, c, d], 4)
        assert join("a")("b", "c")()("d") == ["a", "b", "c", "d"]
        assert join("a", "b")("c", "d") == ["a", "b", "c", "d"]

    def test_result_is_returned_unwrapped(self) -> None:
        make_list = curry(lambda a, b: [a, b], 2)
        result = make_list(1)(2)
        assert result == [1, 2]
        assert not isinstance(result, CurriedStage)

    def test_callable_result_is_not_curried(self) -> None:
        make_adder = curry(lambda a, b: (lambda c: a + b + c), 2)
        assert make_adder(1, 2)(3) == 6

    def test_curried_map_example(self) -> None:
        mapper = curry(lambda fn, items: [fn(x) for x in items], 2)
        assert mapper(lambda x: x * 2)([1, 2, 3]) == [2, 4, 6]
        assert mapper()(lambda x: x * 2)([1, 2, 3]) == [2, 4, 6]


# ============================================================================
# Test: Zero-Argument Calls
# ============================================================================


class TestZeroArgs:
    def test_stage_zero_returns_self(self) -> None:
        add = curry(_add, 2)
        assert add() is add
        assert add()() is add

    def test_partial_stage_returns_self(self) -> None:
        add_one = curry(_add, 2)(1)
        assert add_one() is add_one
        assert add_one()()() is add_one

    def test_target_not_invoked(self) -> None:
        target = Mock(return_value=0)
        stage = curry(target, 2)

        for _ in range(5):
            stage()
        stage(1)()

        target.assert_not_called()

    def test_arity_zero_invokes_target(self) -> None:
        target = Mock(return_value="done")
        stage = curry(target, 0)

        assert stage() == "done"
        target.assert_called_once_with()

    def test_arity_zero_rejects_arguments(self) -> None:
        stage = curry(lambda: None, 0)
        with pytest.raises(ArityOverflow):
            stage(1)


# ============================================================================
# Test: Overflow
# ============================================================================


class TestOverflow:
    def test_too_many_at_once(self) -> None:
        target = Mock()
        add = curry(target, 2)

        with pytest.raises(ArityOverflow, match="Too many arguments"):
            add(1, 2, 3)

        target.assert_not_called()

    def test_too_many_across_calls(self) -> None:
        target = Mock()
        add_one = curry(target, 2)(1)

        with pytest.raises(ArityOverflow):
            add_one(2, 3)

        target.assert_not_called()

    def test_stage_reusable_after_overflow(self) -> None:
        add_one = curry(_add, 2)(1)

        with pytest.raises(ArityOverflow):
            add_one(2, 3)

        assert add_one.args == (1,)
        assert add_one(2) == 3

    def test_overflow_details(self) -> None:
        with pytest.raises(ArityOverflow) as exc_info:
            curry(_add, 2)(1)(2, 3)

        assert exc_info.value.arity == 2
        assert exc_info.value.received == 3

    def test_overflow_is_type_error(self) -> None:
        with pytest.raises(TypeError):
            curry(_add, 2)(1, 2, 3)


# ============================================================================
# Test: Immutability
# ============================================================================


class TestImmutability:
    def test_partial_call_creates_new_stage(self) -> None:
        add = curry(_add, 2)
        add_one = add(1)

        assert add_one is not add
        assert add.args == ()
        assert add_one.args == (1,)

    def test_branching_from_shared_stage(self) -> None:
        volume = curry(lambda w, h, d: w * h * d, 3)
        base = volume(2)

        assert base(3, 4) == 24
        assert base(5)(1) == 10
        assert base.args == (2,)

    def test_stage_attributes(self) -> None:
        stage = curry(_add, 2)(1)

        assert stage.func is _add
        assert stage.arity == 2
        assert stage.remaining == 1


# ============================================================================
# Test: Partial / Complete
# ============================================================================


class TestApply:
    def test_apply_partial(self) -> None:
        add = curry(_add, 2)
        result = add.apply(1)

        assert isinstance(result, Partial)
        assert result.stage.args == (1,)

    def test_apply_no_args_is_partial_self(self) -> None:
        add = curry(_add, 2)
        result = add.apply()

        assert result == Partial(add)

    def test_apply_complete(self) -> None:
        assert curry(_add, 2).apply(1, 2) == Complete(3)

    def test_apply_complete_with_stage_value(self) -> None:
        # A target returning a stage is still Complete.
        inner = curry(_add, 2)
        outer = curry(lambda _: inner, 1)

        result = outer.apply("x")
        assert isinstance(result, Complete)
        assert result.value is inner

    def test_apply_overflow(self) -> None:
        with pytest.raises(ArityOverflow):
            curry(_add, 2).apply(1, 2, 3)


# ============================================================================
# Test: Construction
# ============================================================================


class TestConstruction:
    @pytest.mark.parametrize("arity", [-1, 1.5, "2", None, True])
    def test_invalid_arity(self, arity) -> None:
        with pytest.raises(ValueError, match="arity"):
            curry(_add, arity)

    def test_curried_decorator(self) -> None:
        @curried(3)
        def volume(w, h, d):
            """Box volume."""
            return w * h * d

        assert isinstance(volume, CurriedStage)
        assert volume(2)(3, 4) == 24
        assert volume.__name__ == "volume"
        assert volume.__doc__ == "Box volume."

    def test_repr(self) -> None:
        stage = curry(_add, 2)(1)
        assert "_add" in repr(stage)
        assert "1/2" in repr(stage)

    def test_arity_is_explicit(self) -> None:
        # Declared parameter count is ignored; the supplied arity wins.
        def collect(*args):
            return args

        stage = curry(collect, 3)
        assert stage(1)(2)(3) == (1, 2, 3)
