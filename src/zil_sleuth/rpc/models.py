"""Response shapes returned by Zilliqa nodes."""

from typing import Any, Dict, Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class RpcErrorObject(BaseModel):
    code: int
    message: str
    data: Optional[Any] = None


class RpcResponse(BaseModel, Generic[T]):
    """One JSON-RPC response member: either ``result`` or ``error`` is set."""

    model_config = ConfigDict(extra="allow")

    id: Optional[Union[int, str]] = None
    jsonrpc: Optional[str] = None
    result: Optional[T] = None
    error: Optional[RpcErrorObject] = None


class GetBalanceRes(BaseModel):
    balance: str
    nonce: int


class CreateTransactionRes(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    info: Optional[str] = Field(default=None, alias="Info")
    tran_id: str = Field(alias="TranID")
    contract_address: Optional[str] = Field(default=None, alias="ContractAddress")


class SSNListResult(BaseModel):
    model_config = ConfigDict(extra="allow")

    ssnlist: Dict[str, Any]


class SSNListResponse(BaseModel):
    """Envelope of a ``GetSmartContractSubState(staking, "ssnlist", [])`` reply.

    Only the container shape is enforced; individual entries are parsed
    leniently by discovery.
    """

    model_config = ConfigDict(extra="allow")

    result: SSNListResult


BatchResponse = List[RpcResponse[T]]
