"""HTTP round trip and body decoding shared by dispatch and discovery."""

import json
from functools import lru_cache
from typing import Any, Optional, Type, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from zil_sleuth.core.base import RpcConfig
from zil_sleuth.core.exceptions import ErrorKind, ProtocolError, TransportError

T = TypeVar("T")


def create_http_client(
    config: RpcConfig, transport: Optional[httpx.AsyncBaseTransport] = None
) -> httpx.AsyncClient:
    """New HTTP client for one call. The timeout comes only from ``config``."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(config.timeout),
        headers=config.headers,
        transport=transport,
    )


async def post_json(client: httpx.AsyncClient, url: str, payload: Any) -> bytes:
    """POST ``payload`` to ``url`` and return the raw body."""
    try:
        response = await client.post(url, json=payload)
        response.raise_for_status()
    except httpx.TimeoutException as e:
        raise TransportError(f"Timed out talking to {url}: {e}", ErrorKind.TIMEOUT, url) from e
    except httpx.ConnectError as e:
        raise TransportError(f"Could not connect to {url}: {e}", ErrorKind.CONNECTION, url) from e
    except httpx.HTTPStatusError as e:
        raise TransportError(
            f"{url} answered HTTP {e.response.status_code}",
            ErrorKind.HTTP_STATUS,
            url,
            status_code=e.response.status_code,
        ) from e
    except httpx.HTTPError as e:
        raise TransportError(f"Request to {url} failed: {e}", ErrorKind.NETWORK, url) from e
    except httpx.InvalidURL as e:
        raise TransportError(f"Invalid node URL {url}: {e}", ErrorKind.INVALID_URL, url) from e
    return response.content


def parse_json(body: bytes, url: Optional[str] = None) -> Any:
    try:
        return json.loads(body)
    except ValueError as e:
        raise ProtocolError(
            f"Response from {url} is not valid JSON: {e}", ErrorKind.INVALID_JSON, url
        ) from e


@lru_cache(maxsize=128)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def decode(body: bytes, response_type: Type[T], url: Optional[str] = None) -> T:
    """Decode ``body`` into ``response_type`` or raise ProtocolError."""
    data = parse_json(body, url)
    try:
        return _adapter(response_type).validate_python(data)
    except ValidationError as e:
        raise ProtocolError(
            f"Response from {url} does not match {response_type}: "
            f"{e.error_count()} validation error(s)",
            ErrorKind.UNEXPECTED_SHAPE,
            url,
        ) from e
