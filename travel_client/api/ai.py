"""Intent parsing and destination recommendation endpoints."""

from typing import Any, Dict, Optional

from travel_client.api.base import request
from travel_client.transport.client import TransportClient


async def parse_intent_api(data: Dict[str, Any], client: Optional[TransportClient] = None) -> Any:
    return await request("/ai/parse-intent", "POST", body=data, client=client)


async def recommend_destinations_api(
    data: Dict[str, Any], client: Optional[TransportClient] = None
) -> Any:
    return await request("/ai/destinations/recommend", "POST", body=data, client=client)


async def next_batch_api(data: Dict[str, Any], client: Optional[TransportClient] = None) -> Any:
    return await request(
        "/ai/destinations/recommend/next-batch", "POST", body=data, client=client
    )


async def get_destination_detail_api(
    destination_id: Any, client: Optional[TransportClient] = None
) -> Any:
    return await request(f"/destinations/{destination_id}", "GET", client=client)
