"""JSON-RPC transport for Zilliqa nodes."""

from .client import ZilliqaClient
from .discovery import discover
from .dispatcher import RequestDispatcher
from .methods import RequestEnvelope, ZilMethods, build_payload
from .models import CreateTransactionRes, GetBalanceRes, RpcErrorObject, RpcResponse
from .registry import NodeRegistry
from .suppression import MAX_ERROR, ErrorSuppressionPolicy

__all__ = [
    "ZilliqaClient",
    "discover",
    "RequestDispatcher",
    "RequestEnvelope",
    "ZilMethods",
    "build_payload",
    "CreateTransactionRes",
    "GetBalanceRes",
    "RpcErrorObject",
    "RpcResponse",
    "NodeRegistry",
    "MAX_ERROR",
    "ErrorSuppressionPolicy",
]
