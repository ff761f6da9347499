"""Shared fixtures: an in-memory stand-in for a set of Zilliqa nodes."""

import json
from typing import Callable, Dict, List, Union

import httpx
import pytest

from zil_sleuth.core.base import RpcConfig

Behaviour = Union[Exception, Callable[[httpx.Request], httpx.Response]]


class FakeNetwork:
    """Routes requests by host to scripted behaviours and records every call."""

    def __init__(self):
        self.routes: Dict[str, Behaviour] = {}
        self.calls: List[str] = []
        self.bodies: List[object] = []

    def add(self, host: str, behaviour: Behaviour):
        self.routes[host] = behaviour
        return self

    def json(self, host: str, payload, status_code: int = 200):
        return self.add(host, lambda request: httpx.Response(status_code, json=payload))

    def raw(self, host: str, content: bytes, status_code: int = 200):
        return self.add(host, lambda request: httpx.Response(status_code, content=content))

    def refuse(self, host: str):
        return self.add(host, httpx.ConnectError("connection refused"))

    def time_out(self, host: str):
        return self.add(host, httpx.ReadTimeout("timed out"))

    def handler(self, request: httpx.Request) -> httpx.Response:
        host = request.url.host
        self.calls.append(host)
        self.bodies.append(json.loads(request.content))
        behaviour = self.routes[host]
        if isinstance(behaviour, Exception):
            raise type(behaviour)(str(behaviour), request=request)
        return behaviour(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def network():
    return FakeNetwork()


@pytest.fixture
def config():
    return RpcConfig(timeout=5.0, max_error=5)
