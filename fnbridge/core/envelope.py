"""
fnbridge.core.envelope - Response Envelopes

The two-variant result shape handed to a legacy operation's handler.

Legacy operations may pass either an envelope model or a plain dict with
the same keys:

    {"status": "success", "data": ...}
    {"status": "error", "error": "..."}

Example:
    >>> parse_envelope({"status": "success", "data": [1, 2]})
    SuccessEnvelope(status='success', data=[1, 2])
    >>> parse_envelope(ErrorEnvelope(error="boom")).error
    'boom'
"""

from typing import Annotated, Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .exceptions import InvalidEnvelopeError

T = TypeVar("T")

STATUS_SUCCESS = "success"
STATUS_ERROR = "error"


class SuccessEnvelope(BaseModel, Generic[T]):
    """Envelope for a legacy operation that completed with data."""

    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = Field(default="success", description="Discriminant")
    data: T = Field(..., description="Operation payload")


class ErrorEnvelope(BaseModel):
    """Envelope for a legacy operation that failed."""

    model_config = ConfigDict(frozen=True)

    status: Literal["error"] = Field(default="error", description="Discriminant")
    error: str = Field(..., description="Error message reported by the operation")


ResponseEnvelope = Annotated[
    SuccessEnvelope[Any] | ErrorEnvelope,
    Field(discriminator="status"),
]

_envelope_adapter: TypeAdapter[SuccessEnvelope[Any] | ErrorEnvelope] = TypeAdapter(
    ResponseEnvelope
)


def parse_envelope(raw: Any) -> SuccessEnvelope[Any] | ErrorEnvelope:
    """
    Normalise whatever a legacy operation handed its handler into an envelope.

    Args:
        raw: An envelope model or a mapping with ``status`` and
            ``data``/``error`` keys

    Returns:
        SuccessEnvelope or ErrorEnvelope

    Raises:
        InvalidEnvelopeError: If ``raw`` does not match either variant
    """
    if isinstance(raw, (SuccessEnvelope, ErrorEnvelope)):
        return raw

    try:
        return _envelope_adapter.validate_python(raw)
    except ValidationError as e:
        raise InvalidEnvelopeError(f"Malformed response envelope: {e}") from e


__all__ = [
    "STATUS_ERROR",
    "STATUS_SUCCESS",
    "ErrorEnvelope",
    "ResponseEnvelope",
    "SuccessEnvelope",
    "parse_envelope",
]
