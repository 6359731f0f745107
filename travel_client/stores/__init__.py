"""Client-side stores: session lifecycle and chat sessions."""

from travel_client.stores.chat_sessions import ChatSessionsStore
from travel_client.stores.schemas import AuthResponse, Profile, Session
from travel_client.stores.session import SessionStore
from travel_client.stores.storage import JsonFileStorage, MemoryStorage, SessionStorage

__all__ = [
    "ChatSessionsStore",
    "AuthResponse",
    "Profile",
    "Session",
    "SessionStore",
    "JsonFileStorage",
    "MemoryStorage",
    "SessionStorage",
]
