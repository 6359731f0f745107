"""Chat message endpoints."""

from typing import Any, Dict, Optional

from travel_client.api.base import request
from travel_client.transport.client import TransportClient


async def send_chat_message(data: Dict[str, Any], client: Optional[TransportClient] = None) -> Any:
    return await request("/chat", "POST", body=data, client=client)


async def get_chat_history(
    session_id: str, user_id: int, client: Optional[TransportClient] = None
) -> Any:
    return await request(
        f"/chat/history/{session_id}", "GET", query={"userId": user_id}, client=client
    )


async def clear_chat_history(
    session_id: str, user_id: int, client: Optional[TransportClient] = None
) -> Any:
    return await request(f"/chat/{session_id}", "DELETE", query={"userId": user_id}, client=client)
