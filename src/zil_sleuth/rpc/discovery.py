"""Bootstrap discovery of Zilliqa nodes from the staking contract's SSN list."""

import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx
from pydantic import ValidationError

from zil_sleuth.config.settings import settings
from zil_sleuth.core.base import RpcConfig
from zil_sleuth.core.exceptions import (
    DiscoveryError,
    DiscoveryFailure,
    ProtocolError,
    TransportError,
)

from .methods import JSONRPC_VERSION, RequestEnvelope, ZilMethods
from .models import SSNListResponse
from .registry import NodeRegistry
from .transport import create_http_client, parse_json, post_json

logger = logging.getLogger(__name__)

SSNLIST_FIELD = "ssnlist"
# Position of the node URL in an SSN entry's constructor arguments
NODE_URL_INDEX = 5


def ssnlist_payload(staking_contract: Optional[str] = None) -> RequestEnvelope:
    return {
        "id": "1",
        "jsonrpc": JSONRPC_VERSION,
        "method": str(ZilMethods.GetSmartContractSubState),
        "params": [staking_contract or settings.rpc.staking_contract, SSNLIST_FIELD, []],
    }


def _failure_from_validation(error: ValidationError) -> Tuple[DiscoveryFailure, str]:
    """Map the first schema violation to the expectation that was broken."""
    first = error.errors()[0]
    loc = tuple(first["loc"])
    missing = first["type"] == "missing"
    if not loc:
        # Top level is not an object, so there is no result key to find
        reason = DiscoveryFailure.MISSING_RESULT
    elif loc == ("result",):
        reason = DiscoveryFailure.MISSING_RESULT if missing else DiscoveryFailure.RESULT_NOT_OBJECT
    elif missing:
        reason = DiscoveryFailure.MISSING_SSNLIST
    else:
        reason = DiscoveryFailure.SSNLIST_NOT_OBJECT
    return reason, first["msg"]


def extract_ssn_entries(ssnlist: Dict[str, Any]) -> List[Tuple[str, str]]:
    """Return ``(validator, node_url)`` pairs in validator-address order.

    Entries without a string at ``arguments[5]`` are skipped.
    """
    entries = []
    for validator in sorted(ssnlist):
        value = ssnlist[validator]
        arguments = value.get("arguments") if isinstance(value, dict) else None
        if not isinstance(arguments, list) or len(arguments) <= NODE_URL_INDEX:
            logger.debug(f"Skipping SSN {validator}: no node URL in arguments")
            continue
        url = arguments[NODE_URL_INDEX]
        if not isinstance(url, str):
            logger.debug(f"Skipping SSN {validator}: node URL is not a string")
            continue
        entries.append((validator, url))
    return entries


def parse_ssnlist(body: bytes, seed: str) -> Dict[str, Any]:
    """Decode a seed reply down to its ``ssnlist`` object or raise DiscoveryError."""
    try:
        data = parse_json(body, seed)
    except ProtocolError as e:
        raise DiscoveryError(DiscoveryFailure.INVALID_JSON, seed, str(e)) from e
    try:
        return SSNListResponse.model_validate(data).result.ssnlist
    except ValidationError as e:
        reason, detail = _failure_from_validation(e)
        raise DiscoveryError(reason, seed, detail) from e


async def fetch_ssnlist(
    seed: str,
    config: Optional[RpcConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Dict[str, Any]:
    """Read the staking contract's ``ssnlist`` through ``seed``."""
    config = config or RpcConfig()
    async with create_http_client(config, transport) as client:
        try:
            body = await post_json(client, seed, ssnlist_payload())
        except TransportError as e:
            raise DiscoveryError(DiscoveryFailure.SEED_UNREACHABLE, seed, str(e)) from e
    return parse_ssnlist(body, seed)


async def discover(
    seed: str,
    config: Optional[RpcConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> NodeRegistry:
    """Build a registry from the SSN list advertised by ``seed``, followed by ``seed``."""
    ssnlist = await fetch_ssnlist(seed, config, transport)
    nodes = [url for _, url in extract_ssn_entries(ssnlist)]
    logger.info(
        f"Discovered {len(nodes)} node(s) from {len(ssnlist)} SSN entries via {seed}"
    )
    nodes.append(seed)
    return NodeRegistry.from_list(nodes)
