"""
fnbridge.core.exceptions - Custom exceptions for function adaptation

Provides a hierarchy of domain-specific exceptions raised by the adapter
and the currying engine.

Example:
    >>> from fnbridge.core.exceptions import OperationFailure
    >>>
    >>> try:
    ...     await api.request_coffee_machine_queue_length()
    ... except OperationFailure as e:
    ...     logger.error(f"Legacy operation failed: {e}")
"""


class FnbridgeError(Exception):
    """Base exception for all fnbridge errors."""


class OperationFailure(FnbridgeError):
    """
    Raised through an adapted operation's future when the legacy
    operation reports an error envelope.

    The exception message is the envelope's ``error`` string, unchanged.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ArityOverflow(FnbridgeError, TypeError):
    """
    Raised synchronously when a curried stage receives more arguments
    than its remaining arity allows.

    No arguments from the offending call are applied; the stage that
    raised stays usable.
    """

    def __init__(self, arity: int, received: int) -> None:
        super().__init__(f"Too many arguments: expected {arity}, got {received}")
        self.arity = arity
        self.received = received


class InvalidEnvelopeError(FnbridgeError, ValueError):
    """
    Raised through an adapted operation's future when the legacy
    operation hands its handler something that is not a response envelope.
    """


__all__ = [
    "ArityOverflow",
    "FnbridgeError",
    "InvalidEnvelopeError",
    "OperationFailure",
]
