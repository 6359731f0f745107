"""
Failure taxonomy for transport calls.

Every failing call surfaces to its caller as exactly one ClassifiedFailure.
The set of kinds is closed.
"""

from enum import Enum
from typing import Optional


class FailureKind(str, Enum):
    """Closed set of failure kinds a call can end with."""

    BAD_REQUEST = "BadRequest"
    UNAUTHORIZED = "Unauthorized"
    FORBIDDEN = "Forbidden"
    NOT_FOUND = "NotFound"
    SERVER_ERROR = "ServerError"
    TIMEOUT = "Timeout"
    NETWORK_ERROR = "NetworkError"
    BUSINESS_ERROR = "BusinessError"
    UNKNOWN = "Unknown"


DEFAULT_MESSAGES = {
    FailureKind.BAD_REQUEST: "Bad Request",
    FailureKind.UNAUTHORIZED: "Unauthorized, please login",
    FailureKind.FORBIDDEN: "Forbidden",
    FailureKind.NOT_FOUND: "Resource not found",
    FailureKind.SERVER_ERROR: "Server error",
    FailureKind.TIMEOUT: "Request timeout",
    FailureKind.NETWORK_ERROR: "Network error",
    FailureKind.BUSINESS_ERROR: "Request failed",
    FailureKind.UNKNOWN: "Unknown error",
}

STATUS_KINDS = {
    400: FailureKind.BAD_REQUEST,
    401: FailureKind.UNAUTHORIZED,
    403: FailureKind.FORBIDDEN,
    404: FailureKind.NOT_FOUND,
    500: FailureKind.SERVER_ERROR,
}


def kind_for_status(status: int) -> FailureKind:
    """Map an HTTP error status to its failure kind."""
    return STATUS_KINDS.get(status, FailureKind.UNKNOWN)


class ClassifiedFailure(Exception):
    """
    A request-time failure with its classification.

    Attributes are read-only; a failure is never modified once raised.
    Use with_kind() to derive a reclassified copy.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: Optional[str] = None,
        http_status: Optional[int] = None,
        business_code: Optional[int] = None,
    ):
        self._kind = FailureKind(kind)
        self._message = message or DEFAULT_MESSAGES[self._kind]
        self._http_status = http_status
        self._business_code = business_code
        super().__init__(self._message)

    @property
    def kind(self) -> FailureKind:
        return self._kind

    @property
    def message(self) -> str:
        return self._message

    @property
    def http_status(self) -> Optional[int]:
        return self._http_status

    @property
    def business_code(self) -> Optional[int]:
        return self._business_code

    @property
    def is_unauthorized(self) -> bool:
        return self._kind is FailureKind.UNAUTHORIZED

    def with_kind(self, kind: FailureKind) -> "ClassifiedFailure":
        """Return a new failure with the same details under another kind."""
        return ClassifiedFailure(
            kind,
            message=self._message,
            http_status=self._http_status,
            business_code=self._business_code,
        )

    def __repr__(self) -> str:
        return (
            f"ClassifiedFailure(kind={self._kind.value!r}, message={self._message!r}, "
            f"http_status={self._http_status!r}, business_code={self._business_code!r})"
        )


class NotLoggedInError(RuntimeError):
    """Raised locally, before any network call, when an operation needs a userId."""

    def __init__(self, message: str = "User not logged in"):
        super().__init__(message)
