"""
Shared fixtures: an in-process fake backend and client builders.

The fake backend is a small FastAPI app served through httpx.ASGITransport,
speaking both envelope styles the real backend uses.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx
import pytest
from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse

from travel_client.app import TravelClient, create_travel_client
from travel_client.shared.config import get_config
from travel_client.stores.storage import MemoryStorage, SessionStorage


BASE_URL = "http://testserver/api"


@dataclass
class BackendState:
    """Knobs and call records of the fake backend."""

    has_profile: bool = True
    logout_fails: bool = False
    geocoded_after_fetches: int = 2
    trip_fetches: int = 0
    profile_fetches: int = 0
    status_fetches: int = 0
    calls: List[Dict[str, Any]] = field(default_factory=list)
    chat_sessions: List[Dict[str, Any]] = field(default_factory=list)


def _coded(data: Any = None, code: int = 200, message: Optional[str] = None) -> Dict[str, Any]:
    body = {"code": code, "data": data}
    if message is not None:
        body["message"] = message
    return body


def _profile(user_id: int, **overrides) -> Dict[str, Any]:
    profile = {
        "userId": user_id,
        "email": "ana@example.com",
        "status": "active",
        "location": "Sydney, NSW",
        "travelStyle": "relaxed",
        "interests": ["food", "hiking"],
    }
    profile.update(overrides)
    return profile


def _trip(trip_id: int, geocoded: bool) -> Dict[str, Any]:
    coords = {"latitude": -33.86, "longitude": 151.21} if geocoded else {}
    return {
        "tripId": trip_id,
        "destination": "Sydney",
        "days": [
            {
                "dayNumber": 1,
                "activities": [
                    {"activityName": "Opera House", **coords},
                    {"activityName": "Harbour walk", **coords},
                ],
            },
            {
                "dayNumber": 2,
                "activities": [{"activityName": "Bondi beach"}],
            },
        ],
    }


def build_backend(state: BackendState) -> FastAPI:
    router = APIRouter(prefix="/api")

    @router.post("/auth/login")
    async def login(request: Request):
        body = await request.json()
        if body.get("password") == "wrong":
            return _coded(code=400, message="Invalid email or password")
        return _coded(
            {
                "userId": 7,
                "token": "t1",
                "email": body.get("email"),
                "status": "active",
                "hasProfile": state.has_profile,
            }
        )

    @router.post("/auth/register")
    async def register(request: Request):
        body = await request.json()
        return _coded(
            {
                "userId": 8,
                "token": "t2",
                "email": body.get("email"),
                "status": "active",
                "hasProfile": False,
            }
        )

    @router.post("/auth/logout")
    async def logout():
        if state.logout_fails:
            return JSONResponse(status_code=500, content={"message": "Session store down"})
        return _coded(None)

    @router.get("/users/{user_id}/profile")
    async def get_profile(user_id: int):
        state.profile_fetches += 1
        return _coded(_profile(user_id))

    @router.post("/users/{user_id}/profile")
    async def setup_profile(user_id: int, request: Request):
        body = await request.json()
        return _coded(_profile(user_id, **body))

    @router.get("/trips/{trip_id}")
    async def get_trip(trip_id: int):
        state.trip_fetches += 1
        # Raw body, no envelope
        return _trip(trip_id, geocoded=state.trip_fetches >= state.geocoded_after_fetches)

    @router.get("/trips/{trip_id}/status")
    async def get_trip_status(trip_id: int):
        state.status_fetches += 1
        progress = min(100, state.status_fetches * 50)
        return {
            "tripId": trip_id,
            "status": "completed" if progress >= 100 else "generating",
            "progress": progress,
        }

    @router.get("/echo")
    async def echo(request: Request):
        return {
            "authorization": request.headers.get("authorization"),
            "userId": request.headers.get("x-user-id"),
            "query": dict(request.query_params),
        }

    @router.get("/secure")
    async def secure():
        return JSONResponse(status_code=401, content={"message": "Token expired"})

    @router.get("/business-unauthorized")
    async def business_unauthorized():
        return _coded(code=401, message="Session invalid")

    @router.get("/chat/sessions")
    async def list_sessions(userId: int, limit: int = 30):
        return _coded([s for s in state.chat_sessions if s["userId"] == userId][:limit])

    @router.post("/chat/sessions")
    async def create_session(userId: int, sessionId: str, title: str = ""):
        session = {"userId": userId, "sessionId": sessionId, "title": title}
        state.chat_sessions.append(session)
        return _coded(session)

    @router.get("/chat/sessions/{session_id}/messages")
    async def list_messages(session_id: str, userId: int, limit: int = 200):
        return _coded([{"role": "user", "content": "hi", "sessionId": session_id}])

    @router.delete("/chat/sessions/{session_id}")
    async def delete_session(session_id: str, userId: int):
        state.chat_sessions[:] = [
            s for s in state.chat_sessions if s["sessionId"] != session_id
        ]
        return _coded(None)

    @router.post("/agent/chat")
    async def agent_chat(request: Request, userId: int, sessionId: str):
        text = (await request.body()).decode("utf-8")
        return _coded(
            {
                "actionType": "chat",
                "message": f"echo: {text}",
                "contentType": request.headers.get("content-type"),
                "sessionId": sessionId,
            }
        )

    app = FastAPI()

    @app.middleware("http")
    async def record_calls(request: Request, call_next):
        state.calls.append({"method": request.method, "path": request.url.path})
        return await call_next(request)

    app.include_router(router)
    return app


def make_client(
    transport: httpx.AsyncBaseTransport,
    storage: Optional[SessionStorage] = None,
    timeout: float = 5.0,
    current_path: str = "/trips/5",
    **config_overrides,
) -> TravelClient:
    """Build a wired client against the given transport."""
    config = get_config(
        base_url=BASE_URL,
        timeout=timeout,
        storage_path="",
        request_log_dir="",
        **config_overrides,
    )
    return create_travel_client(
        config,
        transport=transport,
        storage=storage if storage is not None else MemoryStorage(),
        current_path=current_path,
    )


@pytest.fixture
def backend_state() -> BackendState:
    return BackendState()


@pytest.fixture
def backend_transport(backend_state) -> httpx.ASGITransport:
    return httpx.ASGITransport(app=build_backend(backend_state))


@pytest.fixture
def client_builder():
    """The make_client helper, for tests that bring their own transport."""
    return make_client
