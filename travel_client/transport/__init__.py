"""Transport layer: envelope normalization, failure taxonomy, auth interceptors, client."""

from travel_client.transport.client import RequestSpec, TransportClient
from travel_client.transport.envelope import (
    EnvelopeMode,
    Failure,
    Success,
    TransportMeta,
    envelope_mode,
    normalize,
)
from travel_client.transport.errors import (
    ClassifiedFailure,
    FailureKind,
    NotLoggedInError,
)
from travel_client.transport.interceptors import AuthInterceptor

__all__ = [
    "RequestSpec",
    "TransportClient",
    "EnvelopeMode",
    "Failure",
    "Success",
    "TransportMeta",
    "envelope_mode",
    "normalize",
    "ClassifiedFailure",
    "FailureKind",
    "NotLoggedInError",
    "AuthInterceptor",
]
