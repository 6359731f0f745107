"""
Transport client.

The single chokepoint every backend call goes through. Wraps one shared
httpx.AsyncClient with the auth interceptor, the envelope normalizer,
and a hard per-call deadline.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import httpx

from travel_client.shared.config import ClientConfig
from travel_client.shared.logging.request_log import RequestLog
from travel_client.transport.envelope import Success, TransportMeta, normalize
from travel_client.transport.errors import (
    ClassifiedFailure,
    FailureKind,
    kind_for_status,
)
from travel_client.transport.interceptors import AuthInterceptor


logger = logging.getLogger(__name__)

ALLOWED_METHODS = frozenset({"GET", "POST", "PUT", "DELETE"})


@dataclass(frozen=True)
class RequestSpec:
    """
    Description of one outgoing call.

    Attributes:
        path: Path relative to the API base address
        method: One of GET, POST, PUT, DELETE
        query: Query parameters; None values are dropped
        body: JSON body
        content: Raw text body, sent instead of body when set
        headers: Extra headers for this call only
    """

    path: str
    method: str = "GET"
    query: Optional[Mapping[str, Any]] = None
    body: Any = None
    content: Optional[str] = None
    headers: Optional[Mapping[str, str]] = None


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _body_message(body: Any) -> Optional[str]:
    if isinstance(body, Mapping):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return None


class TransportClient:
    """
    Shared client for all resource wrappers.

    For a given call the order is always: request interceptor, transport,
    normalizer, response interceptor. Calls resolve with the unwrapped
    payload or raise a ClassifiedFailure.
    """

    def __init__(
        self,
        config: ClientConfig,
        interceptor: AuthInterceptor,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        request_log: Optional[RequestLog] = None,
    ):
        self._config = config
        self._interceptor = interceptor
        self._request_log = request_log
        self._http = httpx.AsyncClient(
            base_url=config.resolved_base_url,
            timeout=config.timeout,
            headers={"Accept": "application/json"},
            transport=transport,
            event_hooks={"request": [interceptor.request_hook]},
        )

    @property
    def base_url(self) -> str:
        return str(self._http.base_url)

    @property
    def interceptor(self) -> AuthInterceptor:
        return self._interceptor

    @property
    def request_log(self) -> Optional[RequestLog]:
        return self._request_log

    async def call(self, spec: RequestSpec) -> Any:
        """
        Perform one call.

        Args:
            spec: What to send

        Returns:
            The unwrapped success payload

        Raises:
            ClassifiedFailure: for any transport, HTTP, or business failure
            ValueError: for an unsupported HTTP method
        """
        method = spec.method.upper()
        if method not in ALLOWED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {spec.method}")

        _log = f"[transport] [call={method} {spec.path}] "
        started = time.perf_counter()
        logger.debug(f"{_log}Sending")

        try:
            response = await asyncio.wait_for(
                self._send(method, spec), timeout=self._config.timeout
            )
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            failure = ClassifiedFailure(FailureKind.TIMEOUT)
            failure.__cause__ = e
        except httpx.TransportError as e:
            failure = ClassifiedFailure(FailureKind.NETWORK_ERROR)
            failure.__cause__ = e
        except httpx.DecodingError as e:
            # A response arrived but its body could not be decoded
            failure = ClassifiedFailure(FailureKind.UNKNOWN)
            failure.__cause__ = e
        except httpx.RequestError as e:
            failure = ClassifiedFailure(FailureKind.NETWORK_ERROR)
            failure.__cause__ = e
        else:
            body = _decode_body(response)
            status = response.status_code

            if not response.is_success:
                failure = ClassifiedFailure(
                    kind_for_status(status),
                    message=_body_message(body),
                    http_status=status,
                )
            else:
                result = normalize(body, TransportMeta(method, spec.path, status))
                if isinstance(result, Success):
                    self._record(method, spec.path, started, status=status)
                    logger.debug(f"{_log}Succeeded | status={status}")
                    return result.payload
                failure = result.error

        try:
            self._interceptor.handle_failure(failure)
        except ClassifiedFailure as final:
            self._record(method, spec.path, started, failure=final)
            raise

    async def _send(self, method: str, spec: RequestSpec) -> httpx.Response:
        params: Optional[Dict[str, Any]] = None
        if spec.query:
            params = {k: v for k, v in spec.query.items() if v is not None}

        if spec.content is not None:
            return await self._http.request(
                method,
                spec.path,
                params=params,
                content=spec.content,
                headers=spec.headers,
            )
        return await self._http.request(
            method,
            spec.path,
            params=params,
            json=spec.body,
            headers=spec.headers,
        )

    def _record(
        self,
        method: str,
        path: str,
        started: float,
        status: Optional[int] = None,
        failure: Optional[ClassifiedFailure] = None,
    ) -> None:
        if self._request_log is None:
            return
        self._request_log.log_call(
            method=method,
            endpoint=path,
            duration_ms=(time.perf_counter() - started) * 1000,
            success=failure is None,
            failure_kind=failure.kind.value if failure else None,
            http_status=failure.http_status if failure else status,
        )

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "TransportClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
