"""Trip endpoints, including the asynchronous itinerary generation job."""

from typing import Any, Dict, Optional

from travel_client.api.base import request
from travel_client.transport.client import TransportClient


async def create_trip(data: Dict[str, Any], client: Optional[TransportClient] = None) -> Any:
    return await request("/trips", "POST", body=data, client=client)


async def get_trip_by_id(trip_id: Any, client: Optional[TransportClient] = None) -> Any:
    return await request(f"/trips/{trip_id}", "GET", client=client)


async def generate_itinerary(
    data: Dict[str, Any], client: Optional[TransportClient] = None
) -> Any:
    """Start itinerary generation. Progress is observed through get_trip_status."""
    return await request("/trips/generate", "POST", body=data, client=client)


async def get_trip_status(trip_id: Any, client: Optional[TransportClient] = None) -> Any:
    return await request(f"/trips/{trip_id}/status", "GET", client=client)


async def get_latest_trip(user_id: int, client: Optional[TransportClient] = None) -> Any:
    return await request(f"/trips/users/{user_id}/latest", "GET", client=client)


async def get_user_trips(user_id: int, client: Optional[TransportClient] = None) -> Any:
    return await request(f"/trips/users/{user_id}", "GET", client=client)
