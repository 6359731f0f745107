"""
Shared plumbing for resource wrappers.

Wrappers accept an optional TransportClient and otherwise use the single
shared one, so auth headers and failure handling are never duplicated.
"""

from typing import Any, Mapping, Optional

from travel_client.transport.client import RequestSpec, TransportClient


def resolve_client(client: Optional[TransportClient] = None) -> TransportClient:
    """Return the given client, or the process-wide shared one."""
    if client is not None:
        return client
    from travel_client.app import get_travel_client

    return get_travel_client().transport


async def request(
    path: str,
    method: str = "GET",
    query: Optional[Mapping[str, Any]] = None,
    body: Any = None,
    content: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
    client: Optional[TransportClient] = None,
) -> Any:
    spec = RequestSpec(
        path=path,
        method=method,
        query=query,
        body=body,
        content=content,
        headers=headers,
    )
    return await resolve_client(client).call(spec)
