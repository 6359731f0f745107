"""Destination endpoints."""

from typing import Any, Dict, Optional

from travel_client.api.base import request
from travel_client.transport.client import TransportClient


async def save_destination(data: Dict[str, Any], client: Optional[TransportClient] = None) -> Any:
    return await request("/destinations", "POST", body=data, client=client)


async def get_destination_by_id(
    destination_id: Any, client: Optional[TransportClient] = None
) -> Any:
    return await request(f"/destinations/{destination_id}", "GET", client=client)
