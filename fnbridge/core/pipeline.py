"""
fnbridge.core.pipeline - Left-to-Right Function Composition

``pipe(f1, f2, ..., fn)(*args)`` computes ``fn(...f2(f1(*args)))``: the
first stage receives the original arguments, every later stage receives
the previous stage's return value as its only argument.

Example:
    >>> to_label = pipe(str.strip, str.upper)
    >>> to_label("  jane  ")
    'JANE'
    >>> pipe() is pipe
    True
"""

from collections.abc import Callable
from typing import Any


class Pipeline:
    """A fixed, ordered sequence of callables invoked as one."""

    def __init__(self, stages: tuple[Callable[..., Any], ...]) -> None:
        if not stages:
            raise ValueError("Pipeline needs at least one stage; use pipe() for the builder")
        self._first = stages[0]
        self._rest = stages[1:]

    @property
    def stages(self) -> tuple[Callable[..., Any], ...]:
        return (self._first, *self._rest)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        result = self._first(*args, **kwargs)
        for stage in self._rest:
            result = stage(result)
        return result

    def __repr__(self) -> str:
        return "<%s of: %s>" % (
            type(self).__qualname__,
            " | ".join(getattr(stage, "__name__", None) or repr(stage) for stage in self.stages),
        )


def pipe(*stages: Callable[..., Any]) -> Any:
    """
    Compose callables left to right.

    Args:
        *stages: Callables; the first may take any arguments, the rest
            take exactly one

    Returns:
        Pipeline over ``stages``, or ``pipe`` itself when called with none
    """
    if not stages:
        return pipe
    return Pipeline(stages)


__all__ = [
    "Pipeline",
    "pipe",
]
