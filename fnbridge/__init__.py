"""
fnbridge - Callback Adapters, Currying and Pipelines

This package provides:
1. promisify / promisify_all: turn callback-style operations into
   zero-argument callables returning asyncio futures
2. curry: explicit-arity partial application with immutable stages
3. pipe: left-to-right function composition
4. Curried collection helpers and an immutable record manipulator

Example:
    >>> from fnbridge import curry, pipe, promisify_all
    >>>
    >>> api = promisify_all(old_api)
    >>> admins = await api.request_admins()
    >>>
    >>> add = curry(lambda a, b: a + b, 2)
    >>> add(1)(2)
    3
    >>> pipe(add, lambda n: n * 2)(2, 3)
    10
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"

from fnbridge.core import (
    AdaptedOperation,
    AdaptedOperationSet,
    ArityOverflow,
    Complete,
    CurriedStage,
    ErrorEnvelope,
    FnbridgeError,
    InvalidEnvelopeError,
    OperationFailure,
    Partial,
    Pipeline,
    SuccessEnvelope,
    curried,
    curry,
    pipe,
    promisify,
    promisify_all,
)
from fnbridge.records import RecordManipulator

__all__ = [
    "AdaptedOperation",
    "AdaptedOperationSet",
    "ArityOverflow",
    "Complete",
    "CurriedStage",
    "ErrorEnvelope",
    "FnbridgeError",
    "InvalidEnvelopeError",
    "OperationFailure",
    "Partial",
    "Pipeline",
    "RecordManipulator",
    "SuccessEnvelope",
    "__version__",
    "curried",
    "curry",
    "pipe",
    "promisify",
    "promisify_all",
]
