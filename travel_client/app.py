"""
Client composition.

Wires the session store, auth interceptor, transport client, and UI-shell
seams into one TravelClient. A process keeps exactly one of these, so
every resource wrapper shares the same auth headers and failure handling.
"""

import logging
import sys
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from travel_client.polling import watchers
from travel_client.polling.poller import AsyncCompletionPoller, OnComplete, PollConfig
from travel_client.shared.config import DEFAULT_CONFIG, ClientConfig
from travel_client.shared.logging.config import setup_logging
from travel_client.shared.logging.request_log import RequestLog
from travel_client.shell.navigation import Navigator
from travel_client.shell.notifications import Notifier
from travel_client.stores.chat_sessions import ChatSessionsStore
from travel_client.stores.session import SessionStore
from travel_client.stores.storage import JsonFileStorage, MemoryStorage, SessionStorage
from travel_client.transport.client import TransportClient
from travel_client.transport.interceptors import AuthInterceptor


LOG_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)-35s | %(message)s"
)


def configure_logging(
    level: int = logging.INFO,
    structured: bool = False,
    log_file: Optional[str] = None,
) -> None:
    """
    Console logging for applications embedding the client.

    Args:
        level: Logging level
        structured: Emit the client's records as JSON lines, including the
            session summaries attached to lifecycle transitions
        log_file: With structured, also append the JSON lines to this file
    """
    if structured:
        setup_logging(level=level, log_file=log_file, logger_name="travel_client")
    else:
        logging.basicConfig(
            level=level,
            format=LOG_FORMAT,
            datefmt="%Y-%m-%d %H:%M:%S",
            handlers=[logging.StreamHandler(sys.stdout)],
            force=True,
        )

    # Quiet noisy third-party loggers
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


@dataclass
class TravelClient:
    """Everything a UI shell needs to talk to the backend."""

    config: ClientConfig
    store: SessionStore
    navigator: Navigator
    notifier: Notifier
    transport: TransportClient
    chat_sessions: ChatSessionsStore

    def poll_config(self) -> PollConfig:
        return PollConfig(
            interval_ms=self.config.poll_interval_ms,
            max_attempts=self.config.poll_max_attempts,
        )

    def new_poller(self, name: str = "poller") -> AsyncCompletionPoller:
        return AsyncCompletionPoller(name=name)

    def watch_coordinates(
        self, poller: AsyncCompletionPoller, trip_id: Any, on_update: OnComplete
    ) -> bool:
        """Watch a trip's geocoding with this client's cadence and threshold."""
        return watchers.watch_coordinates(
            poller,
            trip_id,
            on_update,
            client=self.transport,
            config=self.poll_config(),
            threshold=self.config.coordinate_threshold,
        )

    def watch_itinerary(
        self, poller: AsyncCompletionPoller, trip_id: Any, on_ready: OnComplete
    ) -> bool:
        """Watch a trip's itinerary generation with this client's cadence."""
        return watchers.watch_itinerary(
            poller,
            trip_id,
            on_ready,
            client=self.transport,
            config=self.poll_config(),
        )

    async def aclose(self) -> None:
        await self.transport.aclose()

    async def __aenter__(self) -> "TravelClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def create_travel_client(
    config: Optional[ClientConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    storage: Optional[SessionStorage] = None,
    current_path: str = "/",
) -> TravelClient:
    """
    Build a fully wired client.

    Args:
        config: Client configuration (defaults to the environment-derived one)
        transport: httpx transport override (e.g. ASGITransport or MockTransport)
        storage: Durable session storage override
        current_path: Navigational context the shell starts on

    Returns:
        A TravelClient whose store, interceptor, and transport share state
    """
    config = config or DEFAULT_CONFIG

    if storage is None:
        storage = JsonFileStorage(config.storage_path) if config.storage_path else MemoryStorage()

    store = SessionStore(storage)
    navigator = Navigator(
        login_path=config.login_path,
        redirect_param=config.redirect_param,
        current_path=current_path,
    )
    notifier = Notifier()
    interceptor = AuthInterceptor(store, navigator, notifier)
    request_log = RequestLog(config.request_log_dir) if config.request_log_dir else None

    transport_client = TransportClient(
        config, interceptor, transport=transport, request_log=request_log
    )
    store.client = transport_client

    return TravelClient(
        config=config,
        store=store,
        navigator=navigator,
        notifier=notifier,
        transport=transport_client,
        chat_sessions=ChatSessionsStore(transport_client),
    )


# Module-level cache for the shared client
_travel_client: Optional[TravelClient] = None


def get_travel_client() -> TravelClient:
    """
    Returns the process-wide TravelClient.

    Created on first use from the environment-derived configuration and
    reused for every subsequent call.
    """
    global _travel_client
    if _travel_client is None:
        _travel_client = create_travel_client()
    return _travel_client


def set_travel_client(client: Optional[TravelClient]) -> None:
    """Install (or with None, forget) the process-wide TravelClient."""
    global _travel_client
    _travel_client = client
