"""Itinerary editor endpoints."""

from typing import Any, Dict, Optional

from travel_client.api.base import request
from travel_client.transport.client import TransportClient


def _editor(trip_id: Any, suffix: str = "") -> str:
    return f"/trips/{trip_id}/editor{suffix}"


async def get_editable_itinerary(trip_id: Any, client: Optional[TransportClient] = None) -> Any:
    return await request(_editor(trip_id), "GET", client=client)


async def move_activity(
    trip_id: Any, item_id: Any, data: Dict[str, Any], client: Optional[TransportClient] = None
) -> Any:
    return await request(
        _editor(trip_id, f"/activities/{item_id}/move"), "POST", body=data, client=client
    )


async def add_activity(
    trip_id: Any, data: Dict[str, Any], client: Optional[TransportClient] = None
) -> Any:
    return await request(_editor(trip_id, "/activities"), "POST", body=data, client=client)


async def delete_activity(
    trip_id: Any, item_id: Any, client: Optional[TransportClient] = None
) -> Any:
    return await request(_editor(trip_id, f"/activities/{item_id}"), "DELETE", client=client)


async def optimize_itinerary(
    trip_id: Any, data: Dict[str, Any], client: Optional[TransportClient] = None
) -> Any:
    return await request(_editor(trip_id, "/optimize"), "POST", body=data, client=client)


async def suggest_replacement(
    trip_id: Any, item_id: Any, data: Dict[str, Any], client: Optional[TransportClient] = None
) -> Any:
    return await request(
        _editor(trip_id, f"/activities/{item_id}/suggest-replace"),
        "POST",
        body=data,
        client=client,
    )


async def update_activity(
    trip_id: Any, item_id: Any, data: Dict[str, Any], client: Optional[TransportClient] = None
) -> Any:
    return await request(
        _editor(trip_id, f"/activities/{item_id}"), "PUT", body=data, client=client
    )


async def save_itinerary_edit(
    trip_id: Any, data: Dict[str, Any], client: Optional[TransportClient] = None
) -> Any:
    return await request(_editor(trip_id, "/save"), "POST", body=data, client=client)


async def add_new_day(
    trip_id: Any, data: Dict[str, Any], client: Optional[TransportClient] = None
) -> Any:
    return await request(_editor(trip_id, "/days"), "POST", body=data, client=client)


async def update_day_date(
    trip_id: Any, day_id: Any, date: str, client: Optional[TransportClient] = None
) -> Any:
    return await request(
        _editor(trip_id, f"/days/{day_id}"), "PUT", body={"date": date}, client=client
    )


async def delete_day(trip_id: Any, day_id: Any, client: Optional[TransportClient] = None) -> Any:
    return await request(_editor(trip_id, f"/days/{day_id}"), "DELETE", client=client)
