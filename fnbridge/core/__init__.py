"""
fnbridge.core - Function Transformation Layer

Architecture:
- envelope.py: SuccessEnvelope / ErrorEnvelope result shapes
- adapter.py: promisify / promisify_all (callback -> asyncio future)
- curry.py: curry / CurriedStage (explicit-arity partial application)
- pipeline.py: pipe / Pipeline (left-to-right composition)
- exceptions.py: OperationFailure, ArityOverflow, InvalidEnvelopeError

Example Usage:
    >>> from fnbridge.core import curry, pipe, promisify_all
    >>>
    >>> api = promisify_all(old_api)
    >>> admins = await api.request_admins()
    >>>
    >>> add = curry(lambda a, b: a + b, 2)
    >>> pipe(add, lambda n: n * 2)(2, 3)
    10
"""

from .adapter import (
    AdaptedOperation,
    AdaptedOperationSet,
    LegacyOperation,
    ResponseHandler,
    promisify,
    promisify_all,
)
from .curry import Complete, CurriedStage, Partial, curried, curry
from .envelope import ErrorEnvelope, ResponseEnvelope, SuccessEnvelope, parse_envelope
from .exceptions import ArityOverflow, FnbridgeError, InvalidEnvelopeError, OperationFailure
from .pipeline import Pipeline, pipe

__all__ = [
    # Envelopes
    "ErrorEnvelope",
    "ResponseEnvelope",
    "SuccessEnvelope",
    "parse_envelope",
    # Adapter
    "AdaptedOperation",
    "AdaptedOperationSet",
    "LegacyOperation",
    "ResponseHandler",
    "promisify",
    "promisify_all",
    # Currying and composition
    "Complete",
    "CurriedStage",
    "Partial",
    "Pipeline",
    "curried",
    "curry",
    "pipe",
    # Errors
    "ArityOverflow",
    "FnbridgeError",
    "InvalidEnvelopeError",
    "OperationFailure",
]
