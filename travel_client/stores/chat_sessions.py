"""
Chat sessions store.

Keeps the list of a user's agent chat sessions in sync with the backend.
"""

import logging
from typing import TYPE_CHECKING, Any, List, Optional

from travel_client.api import chat_sessions as chat_sessions_api
from travel_client.transport.errors import NotLoggedInError

if TYPE_CHECKING:
    from travel_client.transport.client import TransportClient


logger = logging.getLogger(__name__)


class ChatSessionsStore:
    def __init__(self, client: Optional["TransportClient"] = None):
        self.client = client
        self.sessions: List[Any] = []
        self.loading_sessions = False

    async def fetch_sessions(self, user_id: Optional[int], limit: int = 30) -> List[Any]:
        if not user_id:
            return []
        self.loading_sessions = True
        try:
            data = await chat_sessions_api.list_chat_sessions(
                user_id, limit, client=self.client
            )
            self.sessions = data if isinstance(data, list) else []
            return self.sessions
        finally:
            self.loading_sessions = False

    async def ensure_session(
        self, user_id: Optional[int], session_id: str, title: str = ""
    ) -> Any:
        """Create (or reuse) a chat session on the backend, then refresh the list."""
        if not user_id:
            raise NotLoggedInError()
        created = await chat_sessions_api.create_chat_session(
            user_id, session_id, title, client=self.client
        )
        await self.fetch_sessions(user_id)
        return created

    async def fetch_session_messages(
        self, user_id: Optional[int], session_id: Optional[str], limit: int = 200
    ) -> List[Any]:
        if not user_id or not session_id:
            return []
        data = await chat_sessions_api.list_chat_session_messages(
            user_id, session_id, limit, client=self.client
        )
        return data if isinstance(data, list) else []

    async def remove_session(self, user_id: Optional[int], session_id: Optional[str]) -> None:
        if not user_id or not session_id:
            return
        await chat_sessions_api.delete_chat_session(user_id, session_id, client=self.client)
        logger.info(f"[chat_sessions] Removed session {session_id} for user {user_id}")
        await self.fetch_sessions(user_id)
