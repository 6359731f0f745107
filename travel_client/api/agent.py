"""
Unified agent endpoint.

The agent decides on its own whether to chat, recommend destinations,
generate a trip, or finish. Its reply is consumed here only as a payload:
actionType, message, intent, recommendations, tripId, reasoningHistory,
metadata.
"""

from typing import Any, Optional

from travel_client.api.base import request
from travel_client.transport.client import TransportClient


async def chat_with_agent(
    user_id: int,
    session_id: str,
    message: str,
    client: Optional[TransportClient] = None,
) -> Any:
    # The backend reads the message as a plain-text body
    return await request(
        "/agent/chat",
        "POST",
        query={"userId": user_id, "sessionId": session_id},
        content=message,
        headers={"Content-Type": "text/plain"},
        client=client,
    )
