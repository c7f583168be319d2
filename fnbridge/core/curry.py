"""
fnbridge.core.curry - Currying Engine

Wraps a fixed-arity function into an immutable chain of partially applied
stages. Arity is always supplied by the caller; it is never read from the
function signature.

Calling a stage holding k of N arguments with m new arguments:

    m == 0          -> the same stage
    k + m < N       -> a new stage holding k + m arguments
    k + m == N      -> func(*all_arguments)
    k + m > N       -> ArityOverflow, nothing applied

Example:
    >>> add = curry(lambda a, b: a + b, 2)
    >>> add(1)(2)
    3
    >>> add(1, 2)
    3
    >>> add()() is add
    True
"""

import functools
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .exceptions import ArityOverflow

R = TypeVar("R")


@dataclass(frozen=True)
class Partial(Generic[R]):
    """More arguments are needed; ``stage`` holds those applied so far."""

    stage: "CurriedStage[R]"


@dataclass(frozen=True)
class Complete(Generic[R]):
    """All arguments were supplied; ``value`` is the target's result."""

    value: R


class CurriedStage(Generic[R]):
    """
    One immutable partial-application state of a curried function.

    Use ``apply`` for an explicit Partial/Complete result, or call the
    stage directly to get either the next stage or the final value.
    """

    def __init__(self, func: Callable[..., R], arity: int, args: tuple[Any, ...] = ()) -> None:
        self._func = func
        self._arity = arity
        self._args = args
        functools.update_wrapper(self, func, updated=())

    @property
    def func(self) -> Callable[..., R]:
        return self._func

    @property
    def arity(self) -> int:
        return self._arity

    @property
    def args(self) -> tuple[Any, ...]:
        return self._args

    @property
    def remaining(self) -> int:
        """Number of arguments still needed before the target is invoked."""
        return self._arity - len(self._args)

    def apply(self, *args: Any) -> Partial[R] | Complete[R]:
        """
        Apply more arguments to this stage.

        Returns:
            Partial(stage) if more arguments are needed (``Partial(self)``
            when no arguments are given), otherwise Complete(result)

        Raises:
            ArityOverflow: If the total exceeds the declared arity
        """
        received = len(self._args) + len(args)
        if received > self._arity:
            raise ArityOverflow(self._arity, received)

        if received == self._arity:
            return Complete(self._func(*self._args, *args))

        if not args:
            return Partial(self)

        return Partial(CurriedStage(self._func, self._arity, self._args + args))

    def __call__(self, *args: Any) -> "CurriedStage[R] | R":
        result = self.apply(*args)
        if isinstance(result, Complete):
            return result.value
        return result.stage

    def __repr__(self) -> str:
        name = getattr(self._func, "__qualname__", None) or repr(self._func)
        return f"<CurriedStage {name} {len(self._args)}/{self._arity} args={self._args!r}>"


def curry(func: Callable[..., R], arity: int) -> CurriedStage[R]:
    """
    Curry a function with an explicit arity.

    Args:
        func: Target function, called positionally once ``arity``
            arguments have been collected
        arity: Number of arguments the target needs (>= 0)

    Returns:
        Stage-0 CurriedStage

    Raises:
        ValueError: If arity is not a non-negative integer

    Note:
        An arity-0 stage has no partial state, so calling it with no
        arguments invokes ``func`` immediately.
    """
    if isinstance(arity, bool) or not isinstance(arity, int) or arity < 0:
        raise ValueError(f"arity must be a non-negative integer, got {arity!r}")
    return CurriedStage(func, arity)


def curried(arity: int) -> Callable[[Callable[..., R]], CurriedStage[R]]:
    """Decorator form of ``curry``.

    Example:
        >>> @curried(3)
        ... def volume(w, h, d):
        ...     return w * h * d
        >>> volume(2)(3, 4)
        24
    """

    def decorator(func: Callable[..., R]) -> CurriedStage[R]:
        return curry(func, arity)

    return decorator


__all__ = [
    "Complete",
    "CurriedStage",
    "Partial",
    "curried",
    "curry",
]
