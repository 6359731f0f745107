"""Authentication endpoints."""

from typing import Any, Dict, Optional

from travel_client.api.base import request
from travel_client.transport.client import TransportClient


async def register_api(data: Dict[str, Any], client: Optional[TransportClient] = None) -> Any:
    return await request("/auth/register", "POST", body=data, client=client)


async def login_api(data: Dict[str, Any], client: Optional[TransportClient] = None) -> Any:
    return await request("/auth/login", "POST", body=data, client=client)


async def logout_api(client: Optional[TransportClient] = None) -> Any:
    return await request("/auth/logout", "POST", client=client)
