"""Zilliqa JSON-RPC client."""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Type, TypeVar

import httpx

from zil_sleuth.core.base import RpcConfig
from zil_sleuth.core.exceptions import ProtocolError, RPCResponseError

from .discovery import discover
from .dispatcher import Payloads, RequestDispatcher
from .methods import RequestEnvelope, ZilMethods, build_payload
from .models import CreateTransactionRes, GetBalanceRes, RpcResponse
from .registry import NodeRegistry

T = TypeVar("T")


class ZilliqaClient:
    """Failover client over an ordered list of Zilliqa nodes."""

    def __init__(
        self,
        nodes: Optional[Sequence[str]] = None,
        config: Optional[RpcConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or RpcConfig()
        self.transport = transport
        self.registry = (
            NodeRegistry.default() if nodes is None else NodeRegistry.from_list(nodes)
        )
        self.logger = logging.getLogger(self.__class__.__name__)
        self._dispatcher = RequestDispatcher(self.registry, self.config, transport)

    @classmethod
    def from_nodes(cls, nodes: Sequence[str], **kwargs) -> "ZilliqaClient":
        return cls(nodes=nodes, **kwargs)

    @classmethod
    async def bootstrap(
        cls,
        seed: str,
        config: Optional[RpcConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "ZilliqaClient":
        """Client over the nodes advertised in the SSN list read through ``seed``."""
        registry = await discover(seed, config, transport)
        return cls(nodes=registry.nodes, config=config, transport=transport)

    @property
    def nodes(self) -> List[str]:
        return list(self.registry)

    @staticmethod
    def build_payload(params: Any, method: ZilMethods) -> RequestEnvelope:
        return build_payload(params, method)

    async def dispatch(self, payloads: Payloads, response_type: Type[T]) -> T:
        """Send one envelope or a batch, decoding the reply as ``response_type``."""
        return await self._dispatcher.dispatch(payloads, response_type)

    async def call(self, method: ZilMethods, params: Any, result_type: Type[T]) -> T:
        """Single call returning the decoded ``result`` field.

        Raises RPCResponseError when the node returns a JSON-RPC error object.
        """
        response = await self.dispatch(
            build_payload(params, method), RpcResponse[result_type]
        )
        if response.error is not None:
            raise RPCResponseError(
                response.error.code, response.error.message, response.error.data
            )
        if response.result is None:
            raise ProtocolError(f"{method} returned neither result nor error")
        return response.result

    async def get_balance(self, address: str) -> GetBalanceRes:
        return await self.call(ZilMethods.GetBalance, [address], GetBalanceRes)

    async def get_network_id(self) -> str:
        return await self.call(ZilMethods.GetNetworkId, [""], str)

    async def get_minimum_gas_price(self) -> str:
        return await self.call(ZilMethods.GetMinimumGasPrice, [""], str)

    async def get_blockchain_info(self) -> Dict[str, Any]:
        return await self.call(ZilMethods.GetBlockchainInfo, [""], Dict[str, Any])

    async def get_latest_tx_block(self) -> Dict[str, Any]:
        return await self.call(ZilMethods.GetLatestTxBlock, [""], Dict[str, Any])

    async def get_transaction(self, tx_hash: str) -> Dict[str, Any]:
        return await self.call(ZilMethods.GetTransaction, [tx_hash], Dict[str, Any])

    async def get_smart_contract_sub_state(
        self, contract: str, field: str, indices: Sequence[str] = ()
    ) -> Dict[str, Any]:
        return await self.call(
            ZilMethods.GetSmartContractSubState,
            [contract, field, list(indices)],
            Dict[str, Any],
        )

    async def create_transaction(
        self, signed_tx: Mapping[str, Any]
    ) -> CreateTransactionRes:
        """Submit an already signed and serialized transaction."""
        return await self.call(
            ZilMethods.CreateTransaction, [dict(signed_tx)], CreateTransactionRes
        )
