"""
Session state store.

Holds the authentication/profile lifecycle:

    Anonymous --register/login--> Authenticated --profile complete--> Profiled
    any state --logout or Unauthorized failure--> Anonymous

Authenticated and Profiled are told apart only by has_profile, never by
a stored state field. Outside code reads the store freely but mutates it
only through the methods below.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel

from travel_client.api import auth as auth_api
from travel_client.api import users as users_api
from travel_client.shared.logging.config import log_session_transition
from travel_client.stores.schemas import AuthResponse, Profile, Session
from travel_client.stores.storage import (
    TOKEN_KEY,
    USER_ID_KEY,
    MemoryStorage,
    SessionStorage,
)
from travel_client.transport.errors import NotLoggedInError

if TYPE_CHECKING:
    from travel_client.transport.client import TransportClient


logger = logging.getLogger(__name__)


def _parse_user_id(raw: Optional[str]) -> Optional[int]:
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"[session] Discarding non-integer stored userId: {raw!r}")
        return None


class SessionStore:
    """
    Process-wide session state.

    Token and user id are persisted to the given storage and rehydrated
    on construction. The profile lives in memory only.
    """

    def __init__(
        self,
        storage: Optional[SessionStorage] = None,
        client: Optional["TransportClient"] = None,
    ):
        self._storage = storage if storage is not None else MemoryStorage()
        # Transport used by the lifecycle transitions; None means the shared client
        self.client = client

        self._token: str = self._storage.get(TOKEN_KEY) or ""
        self._user_id: Optional[int] = _parse_user_id(self._storage.get(USER_ID_KEY))
        self._profile: Optional[Profile] = None

    # ------------------------------------------------------------------
    # State (read-only)
    # ------------------------------------------------------------------

    @property
    def token(self) -> str:
        return self._token

    @property
    def user_id(self) -> Optional[int]:
        return self._user_id

    @property
    def user(self) -> Optional[Profile]:
        return self._profile

    @property
    def is_logged_in(self) -> bool:
        return bool(self._token) and self._user_id is not None

    @property
    def has_profile(self) -> bool:
        return self._profile is not None and self._profile.is_complete

    @property
    def is_empty(self) -> bool:
        return not self._token and self._user_id is None and self._profile is None

    def snapshot(self) -> Dict[str, Any]:
        """Current state as a plain dict, for logging and debugging."""
        session = Session(token=self._token, user_id=self._user_id, profile=self._profile)
        data = session.model_dump()
        data["is_logged_in"] = self.is_logged_in
        data["has_profile"] = self.has_profile
        return data

    # ------------------------------------------------------------------
    # Primitive mutations
    # ------------------------------------------------------------------

    def set_token(self, token: str) -> None:
        self._token = token
        self._storage.set(TOKEN_KEY, token)

    def set_user_id(self, user_id: int) -> None:
        self._user_id = int(user_id)
        self._storage.set(USER_ID_KEY, str(self._user_id))

    def set_user(self, profile: Union[Profile, Mapping[str, Any], None]) -> Optional[Profile]:
        """Replace the in-memory profile. Mappings are validated into a Profile."""
        if profile is None or isinstance(profile, Profile):
            self._profile = profile
        else:
            self._profile = Profile.model_validate(profile)
        return self._profile

    def clear_user(self, reason: str = "logout") -> None:
        """Reset to anonymous and drop the persisted keys."""
        self._profile = None
        self._token = ""
        self._user_id = None
        self._storage.remove(TOKEN_KEY)
        self._storage.remove(USER_ID_KEY)
        log_session_transition(reason, self.snapshot())

    # ------------------------------------------------------------------
    # Lifecycle transitions
    # ------------------------------------------------------------------

    def _apply_auth(self, payload: Any) -> AuthResponse:
        auth = AuthResponse.model_validate(payload)
        self.set_token(auth.token)
        self.set_user_id(auth.user_id)
        self.set_user(auth.profile_stub())
        return auth

    async def register(self, email: str, password: str) -> AuthResponse:
        """
        Create an account and start an authenticated (not yet profiled) session.

        Raises:
            ClassifiedFailure: if the remote call fails; the store is untouched
        """
        payload = await auth_api.register_api(
            {"email": email, "password": password}, client=self.client
        )
        auth = self._apply_auth(payload)
        log_session_transition("register", self.snapshot())
        return auth

    async def login(self, email: str, password: str) -> AuthResponse:
        """
        Log in, then fetch the full profile when the backend reports one.

        Completes only after both round-trips have finished.

        Raises:
            ClassifiedFailure: if either remote call fails
        """
        payload = await auth_api.login_api(
            {"email": email, "password": password}, client=self.client
        )
        auth = self._apply_auth(payload)

        if auth.has_profile:
            await self.fetch_user_detail()

        log_session_transition(
            "login", self.snapshot(), extra={"backend_has_profile": auth.has_profile}
        )
        return auth

    async def logout(self) -> None:
        """
        Log out remotely (best effort) and always clear the local session.
        """
        try:
            await auth_api.logout_api(client=self.client)
        except Exception as e:
            logger.warning(f"[session] Logout call failed, clearing local session anyway: {e}")
        finally:
            self.clear_user(reason="logout")

    def _require_user_id(self) -> int:
        if self._user_id is None:
            raise NotLoggedInError()
        return self._user_id

    async def setup_profile(self, data: Union[Profile, Mapping[str, Any]]) -> Profile:
        """
        Submit profile data and replace the in-memory profile with the result.

        Raises:
            NotLoggedInError: without any network call when no userId is held
            ClassifiedFailure: if the remote call fails
        """
        user_id = self._require_user_id()
        if isinstance(data, BaseModel):
            data = data.model_dump(by_alias=True, exclude_none=True)

        payload = await users_api.setup_profile_api(user_id, dict(data), client=self.client)
        profile = self.set_user(payload)
        log_session_transition("setup_profile", self.snapshot())
        return profile

    async def fetch_user_detail(self) -> Profile:
        """
        Fetch the full profile of the logged-in user.

        Raises:
            NotLoggedInError: without any network call when no userId is held
            ClassifiedFailure: if the remote call fails
        """
        user_id = self._require_user_id()
        payload = await users_api.get_user_detail_api(user_id, client=self.client)
        profile = self.set_user(payload)
        log_session_transition("fetch_user_detail", self.snapshot())
        return profile
