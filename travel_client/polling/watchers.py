"""
Applied pollers for the backend's background jobs.

- coordinate enrichment: activities are geocoded after a trip is created;
  the map is refreshed once enough of them carry coordinates.
- itinerary generation: the trip status endpoint reports progress until
  the generated itinerary is stored.
"""

import logging
from typing import TYPE_CHECKING, Any, Mapping, Optional

from travel_client.api import trips as trips_api
from travel_client.polling.poller import (
    AsyncCompletionPoller,
    CheckFn,
    OnComplete,
    PollConfig,
)

if TYPE_CHECKING:
    from travel_client.transport.client import TransportClient


logger = logging.getLogger(__name__)

DEFAULT_COORDINATE_THRESHOLD = 0.5


def _has_coordinates(activity: Any) -> bool:
    if not isinstance(activity, Mapping):
        return False
    return activity.get("latitude") is not None and activity.get("longitude") is not None


def coordinates_ready(trip: Any, threshold: float = DEFAULT_COORDINATE_THRESHOLD) -> bool:
    """
    Decide whether enough activities of a trip have been geocoded.

    True once at least one activity has coordinates and the geocoded
    fraction reaches the threshold. This is a "good enough to redraw the
    map" signal, not "everything enriched".
    """
    if not isinstance(trip, Mapping) or not trip.get("days"):
        return False

    total = 0
    with_coordinates = 0
    for day in trip["days"]:
        if not isinstance(day, Mapping):
            continue
        for activity in day.get("activities") or []:
            total += 1
            if _has_coordinates(activity):
                with_coordinates += 1

    return with_coordinates > 0 and with_coordinates >= total * threshold


def make_coordinate_check(
    trip_id: Any,
    client: Optional["TransportClient"] = None,
    threshold: float = DEFAULT_COORDINATE_THRESHOLD,
) -> CheckFn:
    """Build a check function fetching the trip and applying coordinates_ready."""

    async def check() -> bool:
        trip = await trips_api.get_trip_by_id(trip_id, client=client)
        return coordinates_ready(trip, threshold)

    return check


def itinerary_ready(status: Any) -> bool:
    """The generation job is done when it reports completed or full progress."""
    if not isinstance(status, Mapping):
        return False
    if str(status.get("status") or "").lower() == "completed":
        return True
    progress = status.get("progress")
    return isinstance(progress, (int, float)) and progress >= 100


def make_itinerary_check(
    trip_id: Any, client: Optional["TransportClient"] = None
) -> CheckFn:
    async def check() -> bool:
        status = await trips_api.get_trip_status(trip_id, client=client)
        return itinerary_ready(status)

    return check


def watch_coordinates(
    poller: AsyncCompletionPoller,
    trip_id: Any,
    on_update: OnComplete,
    client: Optional["TransportClient"] = None,
    config: Optional[PollConfig] = None,
    threshold: float = DEFAULT_COORDINATE_THRESHOLD,
) -> bool:
    """Start polling until the trip's activities are geocoded, then call on_update."""
    return poller.start(
        make_coordinate_check(trip_id, client, threshold),
        on_update,
        config,
        target_id=trip_id,
    )


def watch_itinerary(
    poller: AsyncCompletionPoller,
    trip_id: Any,
    on_ready: OnComplete,
    client: Optional["TransportClient"] = None,
    config: Optional[PollConfig] = None,
) -> bool:
    """Start polling the generation status of a trip, then call on_ready."""
    return poller.start(
        make_itinerary_check(trip_id, client),
        on_ready,
        config,
        target_id=trip_id,
    )
