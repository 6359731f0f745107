"""
Navigation signals.

The core never touches a browser location. A forced logout asks the
Navigator to redirect; the UI shell subscribes and performs the actual
route change.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List
from urllib.parse import urlencode


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Redirect:
    """A navigation request emitted to subscribers."""

    path: str
    query: Dict[str, str] = field(default_factory=dict)

    @property
    def full_path(self) -> str:
        if not self.query:
            return self.path
        return f"{self.path}?{urlencode(self.query)}"


RedirectListener = Callable[[Redirect], None]


class Navigator:
    """
    Tracks the current navigational context and emits redirect signals.

    Redirecting to the login route while already on it is a no-op, which
    keeps concurrent forced logouts from navigating twice.
    """

    def __init__(
        self,
        login_path: str = "/login",
        redirect_param: str = "redirect",
        current_path: str = "/",
    ):
        self.login_path = login_path
        self.redirect_param = redirect_param
        self._current_path = current_path
        self._listeners: List[RedirectListener] = []

    @property
    def current_path(self) -> str:
        return self._current_path

    @property
    def on_login_page(self) -> bool:
        return self._current_path.split("?", 1)[0] == self.login_path

    def navigate(self, path: str) -> None:
        """Record a navigation performed by the UI shell."""
        self._current_path = path

    def subscribe(self, listener: RedirectListener) -> Callable[[], None]:
        """Register a redirect listener. Returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def redirect_to_login(self) -> bool:
        """
        Redirect to the login route, carrying the current path as return target.

        Returns:
            True if a redirect was emitted, False if already on the login route
        """
        if self.on_login_page:
            logger.debug("[navigation] Already on login route, redirect skipped")
            return False

        redirect = Redirect(
            path=self.login_path,
            query={self.redirect_param: self._current_path},
        )
        self._current_path = redirect.full_path
        logger.info(f"[navigation] Redirecting to {redirect.full_path}")

        for listener in list(self._listeners):
            try:
                listener(redirect)
            except Exception:
                logger.exception("[navigation] Redirect listener failed")
        return True
