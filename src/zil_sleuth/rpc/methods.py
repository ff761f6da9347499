"""Zilliqa JSON-RPC method catalog and request envelopes."""

from enum import Enum
from typing import Any, TypedDict, Union

JSONRPC_VERSION = "2.0"
PAYLOAD_ID = 1


class RequestEnvelope(TypedDict):
    id: Union[int, str]
    jsonrpc: str
    method: str
    params: Any


class ZilMethods(str, Enum):
    """Remote procedures exposed by Zilliqa nodes."""

    # Blockchain
    GetNetworkId = "GetNetworkId"
    GetBlockchainInfo = "GetBlockchainInfo"
    GetShardingStructure = "GetShardingStructure"
    GetDsBlock = "GetDsBlock"
    GetLatestDsBlock = "GetLatestDsBlock"
    GetNumDSBlocks = "GetNumDSBlocks"
    GetDSBlockRate = "GetDSBlockRate"
    DSBlockListing = "DSBlockListing"
    GetTxBlock = "GetTxBlock"
    GetLatestTxBlock = "GetLatestTxBlock"
    GetNumTxBlocks = "GetNumTxBlocks"
    GetTxBlockRate = "GetTxBlockRate"
    TxBlockListing = "TxBlockListing"
    GetNumTransactions = "GetNumTransactions"
    GetTransactionRate = "GetTransactionRate"
    GetCurrentMiniEpoch = "GetCurrentMiniEpoch"
    GetCurrentDSEpoch = "GetCurrentDSEpoch"
    GetPrevDifficulty = "GetPrevDifficulty"
    GetPrevDSDifficulty = "GetPrevDSDifficulty"
    GetTotalCoinSupply = "GetTotalCoinSupply"
    GetMinerInfo = "GetMinerInfo"

    # Transactions
    CreateTransaction = "CreateTransaction"
    GetTransaction = "GetTransaction"
    GetTransactionStatus = "GetTransactionStatus"
    GetRecentTransactions = "GetRecentTransactions"
    GetTransactionsForTxBlock = "GetTransactionsForTxBlock"
    GetTransactionsForTxBlockEx = "GetTransactionsForTxBlockEx"
    GetTxnBodiesForTxBlock = "GetTxnBodiesForTxBlock"
    GetTxnBodiesForTxBlockEx = "GetTxnBodiesForTxBlockEx"
    GetNumTxnsDSEpoch = "GetNumTxnsDSEpoch"
    GetNumTxnsTxEpoch = "GetNumTxnsTxEpoch"
    GetMinimumGasPrice = "GetMinimumGasPrice"

    # Contracts
    GetContractAddressFromTransactionID = "GetContractAddressFromTransactionID"
    GetSmartContracts = "GetSmartContracts"
    GetSmartContractCode = "GetSmartContractCode"
    GetSmartContractInit = "GetSmartContractInit"
    GetSmartContractState = "GetSmartContractState"
    GetSmartContractSubState = "GetSmartContractSubState"
    GetStateProof = "GetStateProof"

    # Account
    GetBalance = "GetBalance"

    def __str__(self) -> str:
        return self.value


def build_payload(params: Any, method: ZilMethods) -> RequestEnvelope:
    """Build a JSON-RPC request envelope for ``method``."""
    return {
        "id": PAYLOAD_ID,
        "jsonrpc": JSONRPC_VERSION,
        "method": str(method),
        "params": params,
    }
