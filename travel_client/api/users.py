"""User profile endpoints."""

from typing import Any, Dict, Optional

from travel_client.api.base import request
from travel_client.transport.client import TransportClient


async def setup_profile_api(
    user_id: int, data: Dict[str, Any], client: Optional[TransportClient] = None
) -> Any:
    return await request(f"/users/{user_id}/profile", "POST", body=data, client=client)


async def get_user_detail_api(user_id: int, client: Optional[TransportClient] = None) -> Any:
    return await request(f"/users/{user_id}/profile", "GET", client=client)


async def get_current_user_api(client: Optional[TransportClient] = None) -> Any:
    return await request("/users/me", "GET", client=client)
