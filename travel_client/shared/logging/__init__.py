"""Logging configuration and utilities."""

from travel_client.shared.logging.config import (
    setup_logging,
    log_session_transition,
    StructuredFormatter,
)
from travel_client.shared.logging.request_log import RequestLog

__all__ = [
    "setup_logging",
    "log_session_transition",
    "StructuredFormatter",
    "RequestLog",
]
