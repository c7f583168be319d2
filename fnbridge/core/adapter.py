"""
fnbridge.core.adapter - Callback-to-Future Adapter

Turns single-shot callback-style operations into zero-argument callables
that return an asyncio future.

A legacy operation accepts one handler and eventually calls it with a
response envelope:

    def request_admins(callback):
        callback({"status": "success", "data": admins})

Example:
    >>> get_admins = promisify(request_admins)
    >>> admins = await get_admins()
    >>>
    >>> # Adapt a whole namespace of legacy operations at once
    >>> api = promisify_all(old_api)
    >>> users = await api.request_users()
"""

import asyncio
import logging
from collections.abc import Callable, Iterator, Mapping
from typing import Any, Generic, TypeVar

from fnbridge.settings import get_settings

from .envelope import ErrorEnvelope, parse_envelope
from .exceptions import InvalidEnvelopeError, OperationFailure

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Type aliases for the legacy side of the boundary
ResponseHandler = Callable[[Any], None]
LegacyOperation = Callable[[ResponseHandler], Any]


def _operation_name(operation: Any) -> str:
    return getattr(operation, "__qualname__", None) or repr(operation)


def _make_handler(future: asyncio.Future[Any], name: str) -> ResponseHandler:
    """Build the handler passed to one legacy call.

    The first call settles ``future``; later calls are ignored.
    """

    def handler(response: Any) -> None:
        if future.done():
            level = logging.WARNING if get_settings().warn_on_duplicate_settlement else logging.DEBUG
            logger.log(
                level,
                f"Ignoring handler call for {name}: result already settled",
                extra={"operation": name, "cancelled": future.cancelled()},
            )
            return

        try:
            envelope = parse_envelope(response)
        except InvalidEnvelopeError as e:
            future.set_exception(e)
            return

        if isinstance(envelope, ErrorEnvelope):
            logger.debug(
                f"Legacy operation {name} reported an error",
                extra={"operation": name, "error": envelope.error},
            )
            future.set_exception(OperationFailure(envelope.error))
        else:
            future.set_result(envelope.data)

    return handler


class AdaptedOperation(Generic[T]):
    """
    Future-returning wrapper around one legacy operation.

    Each call invokes the legacy operation synchronously with a fresh
    handler and returns a future bound to the running event loop. The
    future settles on the first handler call:

    - success envelope: resolves with ``data``
    - error envelope: fails with OperationFailure(error)
    - anything else: fails with InvalidEnvelopeError

    A legacy operation that raises before calling its handler fails the
    future with that exception. One that never calls its handler leaves
    the future pending forever.
    """

    def __init__(self, legacy: LegacyOperation) -> None:
        self.legacy = legacy
        self.__name__ = getattr(legacy, "__name__", type(legacy).__name__)
        self.__qualname__ = _operation_name(legacy)
        self.__doc__ = getattr(legacy, "__doc__", None)

    def __call__(self) -> "asyncio.Future[T]":
        loop = asyncio.get_running_loop()
        future: asyncio.Future[T] = loop.create_future()
        name = self.__qualname__

        try:
            self.legacy(_make_handler(future, name))
        except Exception as e:
            if future.cancelled():
                logger.warning(
                    f"Legacy operation {name} raised after the caller cancelled",
                    exc_info=True,
                    extra={"operation": name},
                )
            elif future.done():
                logger.error(
                    f"Legacy operation {name} raised after settling its result",
                    exc_info=True,
                    extra={"operation": name},
                )
            else:
                future.set_exception(e)

        return future

    def __repr__(self) -> str:
        return f"<AdaptedOperation {self.__qualname__}>"


def promisify(legacy: LegacyOperation) -> AdaptedOperation[Any]:
    """
    Adapt a callback-style operation into a future-returning one.

    Args:
        legacy: Callable taking a single handler, which it calls with a
            response envelope

    Returns:
        AdaptedOperation; call it (no arguments) inside a running event
        loop and await the result

    Example:
        >>> @promisify
        ... def request_time(callback):
        ...     callback({"status": "success", "data": 1700000000000})
        >>> await request_time()
        1700000000000
    """
    return AdaptedOperation(legacy)


class AdaptedOperationSet(Mapping[str, AdaptedOperation[Any]]):
    """
    Read-only mapping of operation name to adapted operation.

    Entries are also reachable as attributes, and take priority over the
    Mapping methods of the same name (``get``, ``keys``, ``items``,
    ``values``). Call those through ``Mapping`` when an operation shadows
    them:

        >>> api["request_users"] is api.request_users
        True
        >>> Mapping.get(api, "request_users") is api.request_users
        True
    """

    def __init__(self, operations: Mapping[str, AdaptedOperation[Any]]) -> None:
        self._operations: dict[str, AdaptedOperation[Any]] = dict(operations)

    def __getattribute__(self, name: str) -> Any:
        if not name.startswith("_"):
            operations = object.__getattribute__(self, "__dict__").get("_operations")
            if operations is not None and name in operations:
                return operations[name]
        return super().__getattribute__(name)

    def __getitem__(self, name: str) -> AdaptedOperation[Any]:
        return self._operations[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._operations)

    def __len__(self) -> int:
        return len(self._operations)

    def __eq__(self, other: object) -> bool:
        # Mapping.__eq__ calls .items(), which an operation may shadow
        if not isinstance(other, Mapping):
            return NotImplemented
        return self._operations == {key: other[key] for key in other}

    __hash__ = None  # type: ignore[assignment]

    def __getattr__(self, name: str) -> AdaptedOperation[Any]:
        raise AttributeError(f"{type(self).__name__!r} has no operation {name!r}")

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._operations))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._operations)!r})"


def _iter_operations(namespace: Any) -> Iterator[tuple[str, LegacyOperation]]:
    """Yield (name, operation) pairs from a mapping or an object namespace."""
    if isinstance(namespace, Mapping):
        yield from namespace.items()
        return

    for attr_name in dir(namespace):
        if attr_name.startswith("_"):
            continue
        obj = getattr(namespace, attr_name, None)
        if callable(obj):
            yield attr_name, obj


def promisify_all(namespace: Mapping[str, LegacyOperation] | Any) -> AdaptedOperationSet:
    """
    Adapt every legacy operation in a namespace.

    Adaptation is eager: every entry is wrapped once, now, into a fresh
    mapping with the same key set.

    Args:
        namespace: Mapping of name to legacy operation, or any object whose
            public callable attributes are legacy operations (class
            instance, module, SimpleNamespace)

    Returns:
        AdaptedOperationSet with one AdaptedOperation per key

    Example:
        >>> api = promisify_all({"request_admins": request_admins})
        >>> list(api)
        ['request_admins']
    """
    adapted = {name: promisify(operation) for name, operation in _iter_operations(namespace)}

    logger.debug(
        f"Adapted {len(adapted)} legacy operations",
        extra={"operations": sorted(adapted)},
    )

    return AdaptedOperationSet(adapted)


__all__ = [
    "AdaptedOperation",
    "AdaptedOperationSet",
    "LegacyOperation",
    "ResponseHandler",
    "promisify",
    "promisify_all",
]
