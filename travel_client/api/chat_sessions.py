"""Chat session endpoints."""

from typing import Any, Optional

from travel_client.api.base import request
from travel_client.transport.client import TransportClient


async def list_chat_sessions(
    user_id: int, limit: int = 30, client: Optional[TransportClient] = None
) -> Any:
    return await request(
        "/chat/sessions", "GET", query={"userId": user_id, "limit": limit}, client=client
    )


async def create_chat_session(
    user_id: int, session_id: str, title: str = "", client: Optional[TransportClient] = None
) -> Any:
    return await request(
        "/chat/sessions",
        "POST",
        query={"userId": user_id, "sessionId": session_id, "title": title},
        client=client,
    )


async def list_chat_session_messages(
    user_id: int, session_id: str, limit: int = 200, client: Optional[TransportClient] = None
) -> Any:
    return await request(
        f"/chat/sessions/{session_id}/messages",
        "GET",
        query={"userId": user_id, "limit": limit},
        client=client,
    )


async def delete_chat_session(
    user_id: int, session_id: str, client: Optional[TransportClient] = None
) -> Any:
    return await request(
        f"/chat/sessions/{session_id}", "DELETE", query={"userId": user_id}, client=client
    )
