"""
Shared infrastructure for the client.

Modules:
- config: Client configuration loaded from the environment
- logging: Structured JSON logging and the request log
"""

from travel_client.shared.config import ClientConfig, DEFAULT_CONFIG, get_config
from travel_client.shared.logging.config import setup_logging, log_session_transition

__all__ = [
    "ClientConfig",
    "DEFAULT_CONFIG",
    "get_config",
    "setup_logging",
    "log_session_transition",
]
