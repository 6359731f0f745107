"""
Envelope normalization.

The backend answers in two shapes:

- coded envelope: {"code": int, "data": any, "message": str?}
- raw body: anything else, already the payload

normalize() is the single place that tells them apart. Resource wrappers
and feature code never look at "code" themselves.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Union

from travel_client.transport.errors import ClassifiedFailure, FailureKind


SUCCESS_CODE = 200


class EnvelopeMode(str, Enum):
    """Which of the two response shapes a body uses."""

    CODED = "coded"
    RAW = "raw"


@dataclass(frozen=True)
class TransportMeta:
    """What the transport knows about the response besides its body."""

    method: str
    path: str
    http_status: Optional[int] = None


@dataclass(frozen=True)
class Success:
    payload: Any


@dataclass(frozen=True)
class Failure:
    error: ClassifiedFailure


Result = Union[Success, Failure]


def envelope_mode(raw_body: Any) -> EnvelopeMode:
    """A body is a coded envelope iff it is a JSON object with its own "code" key."""
    if isinstance(raw_body, Mapping) and "code" in raw_body:
        return EnvelopeMode.CODED
    return EnvelopeMode.RAW


def normalize(raw_body: Any, meta: Optional[TransportMeta] = None) -> Result:
    """
    Interpret a decoded response body.

    Args:
        raw_body: Decoded JSON body (or text / None for non-JSON bodies)
        meta: Transport details, attached to the failure when there is one

    Returns:
        Success with the unwrapped payload, or Failure with a BusinessError
        for coded envelopes whose code is not 200.
    """
    if envelope_mode(raw_body) is EnvelopeMode.RAW:
        return Success(raw_body)

    code = raw_body.get("code")
    if code == SUCCESS_CODE:
        return Success(raw_body.get("data"))

    return Failure(
        ClassifiedFailure(
            FailureKind.BUSINESS_ERROR,
            message=raw_body.get("message"),
            http_status=meta.http_status if meta else None,
            business_code=code,
        )
    )
