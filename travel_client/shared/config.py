"""
Client configuration.

Centralizes the tunable options for the transport, forced-logout
navigation, and background polling, so callers can tune behavior
without touching the wiring. Values are read from the environment
(and a local .env file) once, at import time.
"""

import os
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urljoin

from dotenv import load_dotenv
load_dotenv()


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}")


@dataclass(frozen=True)
class ClientConfig:
    """
    Configuration for the travel API client.

    Attributes:
        base_url: API base address; relative values are joined onto origin
        origin: Scheme and host used when base_url is relative
        timeout: Upper bound for a single call, in seconds
        login_path: Route the forced logout redirects to
        redirect_param: Query parameter carrying the originating path
        poll_interval_ms: Delay between two poller ticks
        poll_max_attempts: Ticks before a poller gives up silently
        coordinate_threshold: Fraction of geocoded activities considered "ready"
        storage_path: JSON file for durable session keys (memory when unset)
        request_log_dir: Directory for per-call timing logs (disabled when unset)
    """

    # Transport
    base_url: str = "/api"
    origin: str = "http://localhost:8080"
    timeout: float = 60.0  # seconds

    # Forced logout navigation
    login_path: str = "/login"
    redirect_param: str = "redirect"

    # Background polling
    poll_interval_ms: int = 2000
    poll_max_attempts: int = 30
    coordinate_threshold: float = 0.5

    # Persistence and diagnostics
    storage_path: Optional[str] = None
    request_log_dir: Optional[str] = None

    @property
    def resolved_base_url(self) -> str:
        """Absolute base URL the transport talks to."""
        if self.base_url.startswith(("http://", "https://")):
            return self.base_url
        return urljoin(self.origin.rstrip("/") + "/", self.base_url.lstrip("/"))


def load_config_from_env() -> ClientConfig:
    """Build a configuration from TRAVEL_* environment variables."""
    defaults = ClientConfig()
    return ClientConfig(
        base_url=os.environ.get("TRAVEL_API_BASE_URL") or defaults.base_url,
        origin=os.environ.get("TRAVEL_API_ORIGIN") or defaults.origin,
        timeout=_env_float("TRAVEL_API_TIMEOUT", defaults.timeout),
        storage_path=os.environ.get("TRAVEL_CLIENT_STORAGE") or None,
        request_log_dir=os.environ.get("TRAVEL_CLIENT_REQUEST_LOG_DIR") or None,
    )


# Default configuration instance
DEFAULT_CONFIG = load_config_from_env()


def get_config(
    base_url: Optional[str] = None,
    origin: Optional[str] = None,
    timeout: Optional[float] = None,
    login_path: Optional[str] = None,
    poll_interval_ms: Optional[int] = None,
    poll_max_attempts: Optional[int] = None,
    coordinate_threshold: Optional[float] = None,
    storage_path: Optional[str] = None,
    request_log_dir: Optional[str] = None,
) -> ClientConfig:
    """
    Create a configuration with optional overrides.

    Args:
        base_url: Override for the API base address
        origin: Override for the origin relative base URLs are joined onto
        timeout: Override for the per-call timeout (seconds)
        login_path: Override for the login route
        poll_interval_ms: Override for the poller tick interval
        poll_max_attempts: Override for the poller attempt cap
        coordinate_threshold: Override for the geocoded fraction counted as ready
        storage_path: Override for the session storage file
        request_log_dir: Override for the request log directory

    Returns:
        ClientConfig with specified overrides applied
    """
    return ClientConfig(
        base_url=base_url or DEFAULT_CONFIG.base_url,
        origin=origin or DEFAULT_CONFIG.origin,
        timeout=timeout or DEFAULT_CONFIG.timeout,
        login_path=login_path or DEFAULT_CONFIG.login_path,
        redirect_param=DEFAULT_CONFIG.redirect_param,
        poll_interval_ms=poll_interval_ms or DEFAULT_CONFIG.poll_interval_ms,
        poll_max_attempts=poll_max_attempts or DEFAULT_CONFIG.poll_max_attempts,
        coordinate_threshold=coordinate_threshold
        if coordinate_threshold is not None
        else DEFAULT_CONFIG.coordinate_threshold,
        storage_path=storage_path
        if storage_path is not None
        else DEFAULT_CONFIG.storage_path,
        request_log_dir=request_log_dir
        if request_log_dir is not None
        else DEFAULT_CONFIG.request_log_dir,
    )
