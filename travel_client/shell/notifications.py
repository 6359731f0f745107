"""
User-visible notifications.

Failures are announced once, centrally, by the response interceptor.
Listeners are plain callables invoked synchronously; a listener that
raises is logged and skipped so a notification never fails a call.
"""

import logging
from typing import Callable, List


logger = logging.getLogger(__name__)

NotificationListener = Callable[[str, str], None]


class Notifier:
    """Fan-out of (level, message) notifications to UI listeners."""

    def __init__(self):
        self._listeners: List[NotificationListener] = []

    def subscribe(self, listener: NotificationListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def error(self, message: str) -> None:
        self._emit("error", message)

    def info(self, message: str) -> None:
        self._emit("info", message)

    def _emit(self, level: str, message: str) -> None:
        logger.log(
            logging.WARNING if level == "error" else logging.INFO,
            f"[notify] {message}",
        )
        for listener in list(self._listeners):
            try:
                listener(level, message)
            except Exception:
                logger.exception("[notify] Notification listener failed")
