"""
Structured logging configuration.

JSON-lines output for the client's own loggers. Session lifecycle
transitions carry their event name and a token-free session summary,
which the plain console format would drop.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional


class StructuredFormatter(logging.Formatter):
    """
    Formats client log records as one JSON object per line.

    Records created by log_session_transition have their "event" lifted to
    the top level next to "message", with the rest of the attached data
    under "extra".
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            if "event" in extra:
                log_entry["event"] = extra["event"]
            log_entry["extra"] = extra

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    logger_name: str = "travel_client",
) -> logging.Logger:
    """
    Route a logger tree (the whole client by default) to JSON lines.

    Args:
        level: Logging level (default: INFO)
        log_file: Optional file the JSON lines are appended to as well
        logger_name: Root of the logger tree to configure

    Returns:
        The configured logger. It no longer propagates to the root logger,
        so records are not printed twice in the plain format.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    logger.propagate = False

    # Replace handlers from an earlier call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = StructuredFormatter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def log_session_transition(
    event: str,
    session: Dict[str, Any],
    extra: Optional[Dict[str, Any]] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """
    Log a session store lifecycle transition.

    The token itself is never logged, only whether one is held.

    Args:
        event: Name of the event (e.g., "login", "forced_logout")
        session: Current session snapshot (see SessionStore.snapshot)
        extra: Additional context to include in the log
        logger: Logger instance to use. If not provided, uses default.
    """
    if logger is None:
        logger = logging.getLogger("travel_client.session")

    session_summary = {
        "has_token": bool(session.get("token")),
        "user_id": session.get("user_id"),
        "is_logged_in": session.get("is_logged_in"),
        "has_profile": session.get("has_profile"),
    }

    log_data = {
        "event": event,
        "session_summary": session_summary,
    }

    if extra:
        log_data["extra"] = extra

    record = logger.makeRecord(
        logger.name,
        logging.INFO,
        "",
        0,
        f"Session transition: {event}",
        args=(),
        exc_info=None,
    )
    record.extra = log_data

    logger.handle(record)
