"""
Reverse geocoding for profile locations.

Turns coordinates into the "City, State" string the profile's location
field uses, via OpenStreetMap's Nominatim service. This talks to a third
party, not the backend, so it uses its own httpx client: no session
credentials are attached and failures do not reach the auth interceptor.
"""

import logging
from typing import Any, Mapping, Optional

import httpx

from travel_client.transport.errors import (
    ClassifiedFailure,
    FailureKind,
    kind_for_status,
)


logger = logging.getLogger(__name__)

NOMINATIM_REVERSE_URL = "https://nominatim.openstreetmap.org/reverse"
# Nominatim rejects anonymous clients
USER_AGENT = "TravelAgent/1.0"
UNKNOWN_LOCATION = "Unknown Location"

AUSTRALIAN_STATES = {
    "New South Wales": "NSW",
    "Victoria": "VIC",
    "Queensland": "QLD",
    "South Australia": "SA",
    "Western Australia": "WA",
    "Tasmania": "TAS",
    "Northern Territory": "NT",
    "Australian Capital Territory": "ACT",
}


def format_location(address: Any) -> str:
    """
    Format a Nominatim address block as "City, State".

    The city falls back to town, village, then suburb. Australian states
    are abbreviated. Returns "Unknown Location" when no city is known.
    """
    if not isinstance(address, Mapping):
        return UNKNOWN_LOCATION

    city = (
        address.get("city")
        or address.get("town")
        or address.get("village")
        or address.get("suburb")
        or ""
    )
    state = address.get("state") or ""
    state_code = AUSTRALIAN_STATES.get(state, state)

    if city and state_code:
        return f"{city}, {state_code}"
    return city or UNKNOWN_LOCATION


async def _lookup(
    http_client: httpx.AsyncClient, latitude: float, longitude: float
) -> httpx.Response:
    return await http_client.get(
        NOMINATIM_REVERSE_URL,
        params={
            "format": "json",
            "lat": latitude,
            "lon": longitude,
            "addressdetails": 1,
        },
        headers={"Accept": "application/json", "User-Agent": USER_AGENT},
    )


async def reverse_geocode(
    latitude: float,
    longitude: float,
    http_client: Optional[httpx.AsyncClient] = None,
    timeout: float = 10.0,
) -> str:
    """
    Look up the "City, State" location for a pair of coordinates.

    Args:
        latitude: Latitude in degrees
        longitude: Longitude in degrees
        http_client: Client to use; a short-lived one is created when omitted
        timeout: Timeout for the short-lived client, in seconds

    Returns:
        The formatted location

    Raises:
        ClassifiedFailure: if the lookup fails or returns an error status
    """
    _log = f"[geocoding] [lat={latitude}, lon={longitude}] "

    try:
        if http_client is None:
            async with httpx.AsyncClient(timeout=timeout) as client:
                response = await _lookup(client, latitude, longitude)
        else:
            response = await _lookup(http_client, latitude, longitude)
    except httpx.TimeoutException as e:
        logger.warning(f"{_log}Lookup timed out")
        raise ClassifiedFailure(FailureKind.TIMEOUT) from e
    except httpx.RequestError as e:
        logger.warning(f"{_log}Lookup failed: {e}")
        raise ClassifiedFailure(FailureKind.NETWORK_ERROR) from e

    if not response.is_success:
        logger.warning(f"{_log}Lookup returned status {response.status_code}")
        raise ClassifiedFailure(
            kind_for_status(response.status_code),
            message="Geocoding request failed",
            http_status=response.status_code,
        )

    try:
        data = response.json()
    except ValueError as e:
        raise ClassifiedFailure(
            FailureKind.UNKNOWN, message="Geocoding request failed"
        ) from e

    location = format_location(data.get("address") if isinstance(data, Mapping) else None)
    logger.debug(f"{_log}Resolved to {location}")
    return location
