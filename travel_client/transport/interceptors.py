"""
Authentication interceptor pair.

Request phase: attach the session credentials to every outgoing call.
Response phase: classify failures, notify the user once, and run the
forced logout transition on authentication failures.
"""

import logging
from typing import TYPE_CHECKING, MutableMapping, NoReturn

import httpx

from travel_client.transport.errors import ClassifiedFailure, FailureKind

if TYPE_CHECKING:
    from travel_client.shell.navigation import Navigator
    from travel_client.shell.notifications import Notifier
    from travel_client.stores.session import SessionStore


logger = logging.getLogger(__name__)

AUTHORIZATION_HEADER = "Authorization"
USER_ID_HEADER = "X-User-Id"


class AuthInterceptor:
    """
    Injects and recovers authentication state around every call.

    The store is read synchronously on the request side and only mutated
    through its own clear_user() on the response side.
    """

    def __init__(
        self,
        store: "SessionStore",
        navigator: "Navigator",
        notifier: "Notifier",
    ):
        self._store = store
        self._navigator = navigator
        self._notifier = notifier
        self.forced_logouts = 0

    # ------------------------------------------------------------------
    # Request phase
    # ------------------------------------------------------------------

    def attach_credentials(self, headers: MutableMapping[str, str]) -> None:
        """Add bearer token and user id headers for whatever the session holds."""
        token = self._store.token
        user_id = self._store.user_id

        if token:
            headers[AUTHORIZATION_HEADER] = f"Bearer {token}"
        if user_id is not None:
            headers[USER_ID_HEADER] = str(user_id)

    async def request_hook(self, request: httpx.Request) -> None:
        """httpx event hook running the request phase."""
        self.attach_credentials(request.headers)

    # ------------------------------------------------------------------
    # Response phase
    # ------------------------------------------------------------------

    def classify(self, failure: ClassifiedFailure) -> ClassifiedFailure:
        """Business failures carrying code 401 are authentication failures."""
        if (
            failure.kind is FailureKind.BUSINESS_ERROR
            and failure.business_code == 401
        ):
            return failure.with_kind(FailureKind.UNAUTHORIZED)
        return failure

    def handle_failure(self, failure: ClassifiedFailure) -> NoReturn:
        """
        Surface a failure to the user and re-raise it to the caller.

        Unauthorized failures additionally clear the session and redirect
        to the login route.

        Raises:
            ClassifiedFailure: always
        """
        failure = self.classify(failure)
        logger.warning(
            f"[interceptor] Call failed | kind={failure.kind.value}, "
            f"http_status={failure.http_status}, business_code={failure.business_code}, "
            f"message={failure.message}"
        )

        self._notifier.error(failure.message)

        if failure.is_unauthorized:
            self.force_logout()

        raise failure

    def force_logout(self) -> bool:
        """
        Clear the session and redirect to login.

        Safe to call repeatedly: an already-empty session is not cleared
        again, and the navigator ignores redirects while on the login route.

        Returns:
            True if this call cleared a live session
        """
        cleared = False
        if not self._store.is_empty:
            self._store.clear_user(reason="forced_logout")
            self.forced_logouts += 1
            cleared = True

        self._navigator.redirect_to_login()
        return cleared
