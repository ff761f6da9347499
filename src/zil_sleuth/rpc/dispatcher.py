"""Sequential failover of JSON-RPC requests across a node registry."""

import logging
from typing import Optional, Sequence, Type, TypeVar, Union

import httpx

from zil_sleuth.core.base import RpcConfig
from zil_sleuth.core.exceptions import DispatchError, ExhaustionError

from .methods import RequestEnvelope
from .registry import NodeRegistry
from .suppression import ErrorSuppressionPolicy
from .transport import create_http_client, decode, post_json

T = TypeVar("T")

Payloads = Union[RequestEnvelope, Sequence[RequestEnvelope]]


class RequestDispatcher:
    """Sends a request to each node in turn until one answers in the expected shape.

    Nodes are visited once, in registry order. A failure moves on to the next
    node unless the same kind of failure has already been seen
    ``config.max_error`` times in a row, in which case that failure is raised.
    If the registry runs out first, an :class:`ExhaustionError` is raised that
    is also a ProtocolError or TransportError, like the last failure it wraps.

    Dispatch calls share no mutable state and may run concurrently.
    """

    def __init__(
        self,
        registry: NodeRegistry,
        config: Optional[RpcConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.registry = registry
        self.config = config or RpcConfig()
        self.transport = transport
        self.logger = logging.getLogger(self.__class__.__name__)

    async def dispatch(self, payloads: Payloads, response_type: Type[T]) -> T:
        """Send ``payloads`` (one envelope or a batch) and decode the reply as ``response_type``."""
        if not isinstance(payloads, dict):
            payloads = list(payloads)

        policy = ErrorSuppressionPolicy(max_error=self.config.max_error)
        last_error: Optional[DispatchError] = None
        attempts = 0

        async with create_http_client(self.config, self.transport) as client:
            for url in self.registry:
                attempts += 1
                try:
                    body = await post_json(client, url, payloads)
                    result = decode(body, response_type, url)
                except DispatchError as e:
                    last_error = e
                    if not policy.admit(e.kind):
                        self.logger.error(
                            f"Giving up after {attempts} attempt(s): "
                            f"{e.kind.value} repeated {policy.repeat_count + 1} times, last at {url}"
                        )
                        raise
                    self.logger.warning(f"Node {url} failed ({e.kind.value}): {e}")
                    continue

                self.logger.debug(f"Node {url} answered after {attempts} attempt(s)")
                return result

        self.logger.error(f"All {attempts} node(s) failed, last error: {last_error}")
        raise ExhaustionError.from_last_error(last_error, attempts) from last_error
