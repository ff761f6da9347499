"""Zil Sleuth - resilient Zilliqa JSON-RPC client and data toolkit."""

from .config import settings, Settings
from .core import (
    DiscoveryError,
    DispatchError,
    ExhaustionError,
    ProtocolError,
    RPCResponseError,
    RpcConfig,
    TransportError,
    ZilSleuthError,
)
from .rpc import (
    NodeRegistry,
    RequestDispatcher,
    ZilliqaClient,
    ZilMethods,
    build_payload,
    discover,
)
from .datasource import ZilliqaSource
from .factory import ClientFactory, PipelineFactory

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "settings",
    "Settings",
    "RpcConfig",
    # RPC
    "ZilliqaClient",
    "NodeRegistry",
    "RequestDispatcher",
    "ZilMethods",
    "build_payload",
    "discover",
    # Errors
    "ZilSleuthError",
    "DispatchError",
    "TransportError",
    "ProtocolError",
    "ExhaustionError",
    "DiscoveryError",
    "RPCResponseError",
    # Data sources
    "ZilliqaSource",
    "ClientFactory",
    "PipelineFactory",
]
