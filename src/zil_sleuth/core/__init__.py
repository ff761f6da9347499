"""Core infrastructure for zil_sleuth package."""

from .base import BaseSource, RpcConfig
from .exceptions import (
    ConfigurationError,
    DiscoveryError,
    DiscoveryFailure,
    DispatchError,
    ErrorKind,
    ExhaustionError,
    PipelineError,
    ProtocolError,
    ProtocolExhaustionError,
    RPCResponseError,
    TransportError,
    TransportExhaustionError,
    ZilSleuthError,
)

__all__ = [
    "BaseSource",
    "RpcConfig",
    "ConfigurationError",
    "DiscoveryError",
    "DiscoveryFailure",
    "DispatchError",
    "ErrorKind",
    "ExhaustionError",
    "PipelineError",
    "ProtocolError",
    "ProtocolExhaustionError",
    "RPCResponseError",
    "TransportError",
    "TransportExhaustionError",
    "ZilSleuthError",
]
