"""
Client for the travel-planning backend.

This package contains:
- transport/: envelope normalizer, failure taxonomy, auth interceptors, transport client
- stores/: session lifecycle store and chat sessions store
- polling/: bounded completion poller and the background-job watchers
- shell/: navigation and notification seams towards the UI
- api/: one thin wrapper per backend endpoint
- shared/: configuration and logging
"""

from travel_client.app import (
    TravelClient,
    create_travel_client,
    get_travel_client,
    set_travel_client,
)

__all__ = [
    "TravelClient",
    "create_travel_client",
    "get_travel_client",
    "set_travel_client",
]
