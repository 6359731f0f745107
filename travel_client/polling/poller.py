"""
Bounded completion polling.

Turns an eventually-consistent backend computation into a single
completion callback: a check function is invoked on a fixed cadence until
it reports done, the attempt cap is reached, or the poller is stopped.
The cadence and attempt cap are driven by tenacity, the same retry
library the rest of the stack uses.
"""

import asyncio
import inspect
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_result,
    stop_after_attempt,
    wait_fixed,
)


logger = logging.getLogger(__name__)

CheckFn = Callable[[], Awaitable[bool]]
OnComplete = Callable[[], Any]


@dataclass(frozen=True)
class PollConfig:
    """
    Attributes:
        interval_ms: Delay before the first tick and between ticks
        max_attempts: Checks made before giving up silently
    """

    interval_ms: int = 2000
    max_attempts: int = 30

    def __post_init__(self):
        if self.interval_ms < 0:
            raise ValueError("interval_ms must be >= 0")
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")


@dataclass(frozen=True)
class PollSession:
    """Read-only view of the poller's current (or last) session."""

    target_id: Any
    attempt: int
    max_attempts: int
    interval_ms: int
    active: bool


class AsyncCompletionPoller:
    """
    Owns at most one polling loop at a time.

    start() while active is a no-op. stop() is always safe and must be
    called when the owning context goes away; using the poller as an async
    context manager does that on every exit path.
    """

    def __init__(self, name: str = "poller"):
        self.name = name
        self._task: Optional[asyncio.Task] = None
        # Last started task, kept so wait() can see a cancellation through
        self._last_task: Optional[asyncio.Task] = None
        self._config = PollConfig()
        self._attempt = 0
        self._target_id: Any = None

    @property
    def is_active(self) -> bool:
        return self._task is not None

    @property
    def attempt(self) -> int:
        return self._attempt

    @property
    def session(self) -> PollSession:
        return PollSession(
            target_id=self._target_id,
            attempt=self._attempt,
            max_attempts=self._config.max_attempts,
            interval_ms=self._config.interval_ms,
            active=self.is_active,
        )

    def start(
        self,
        check_fn: CheckFn,
        on_complete: OnComplete,
        config: Optional[PollConfig] = None,
        target_id: Any = None,
    ) -> bool:
        """
        Begin polling. Must be called from within a running event loop.

        Args:
            check_fn: Async predicate; True means the awaited condition holds
            on_complete: Called once when check_fn reports True (may be async)
            config: Interval and attempt cap
            target_id: Identifier of what is being watched, for logs

        Returns:
            True if a new loop was started, False if one was already active
        """
        if self.is_active:
            logger.debug(f"[{self.name}] start() ignored, already polling")
            return False

        self._config = config or PollConfig()
        self._attempt = 0
        self._target_id = target_id
        self._task = asyncio.get_running_loop().create_task(
            self._run(check_fn, on_complete, self._config)
        )
        self._last_task = self._task
        logger.info(
            f"[{self.name}] Polling started | target={target_id}, "
            f"interval_ms={self._config.interval_ms}, max_attempts={self._config.max_attempts}"
        )
        return True

    def stop(self) -> None:
        """Cancel the active loop, if any. Idempotent."""
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            logger.info(f"[{self.name}] Polling stopped | attempt={self._attempt}")

    async def wait(self) -> None:
        """
        Wait until the current (or just stopped) loop has finished, without raising.

        After stop() this returns once the cancelled task has unwound.
        """
        task = self._task or self._last_task
        if task is not None:
            await asyncio.wait({task})

    async def __aenter__(self) -> "AsyncCompletionPoller":
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.stop()
        await self.wait()

    # ------------------------------------------------------------------

    def _count_attempt(self, retry_state: RetryCallState) -> None:
        self._attempt = retry_state.attempt_number

    def _exhausted(self, retry_state: RetryCallState) -> bool:
        logger.info(
            f"[{self.name}] Gave up after {retry_state.attempt_number} attempts "
            f"| target={self._target_id}"
        )
        return False

    async def _safe_check(self, check_fn: CheckFn) -> bool:
        try:
            return bool(await check_fn())
        except Exception as e:
            logger.warning(
                f"[{self.name}] Check failed on attempt {self._attempt}, "
                f"treating as not complete: {e}"
            )
            return False

    async def _run(
        self, check_fn: CheckFn, on_complete: OnComplete, config: PollConfig
    ) -> None:
        interval = config.interval_ms / 1000
        retrying = AsyncRetrying(
            stop=stop_after_attempt(config.max_attempts),
            wait=wait_fixed(interval),
            retry=retry_if_result(lambda done: done is not True),
            before=self._count_attempt,
            retry_error_callback=self._exhausted,
        )

        current = asyncio.current_task()
        try:
            # First tick fires one interval after start
            await asyncio.sleep(interval)
            done = await retrying(self._safe_check, check_fn)
        finally:
            if self._task is current:
                self._task = None

        if not done:
            return

        logger.info(f"[{self.name}] Condition met on attempt {self._attempt}")
        try:
            result = on_complete()
            if inspect.isawaitable(result):
                await result
        except Exception:
            logger.exception(f"[{self.name}] on_complete callback failed")
