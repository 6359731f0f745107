"""Bounded polling of long-running backend jobs."""

from travel_client.polling.poller import AsyncCompletionPoller, PollConfig, PollSession
from travel_client.polling.watchers import (
    coordinates_ready,
    itinerary_ready,
    make_coordinate_check,
    make_itinerary_check,
    watch_coordinates,
    watch_itinerary,
)

__all__ = [
    "AsyncCompletionPoller",
    "PollConfig",
    "PollSession",
    "coordinates_ready",
    "itinerary_ready",
    "make_coordinate_check",
    "make_itinerary_check",
    "watch_coordinates",
    "watch_itinerary",
]
