#!/usr/bin/env python3
"""
Example usage of the zil_sleuth client.
"""

import asyncio
import logging
from typing import List

from zil_sleuth import ZilliqaClient, ZilMethods, DispatchError, DiscoveryError
from zil_sleuth.rpc.models import GetBalanceRes, RpcResponse
from zil_sleuth.utils.logging import setup_logging

logger = logging.getLogger(__name__)

ADDRESSES = [
    "7793a8e8c09d189d4d421ce5bc5b3674656c5ac1",
    "a7C67D49C82c7dc1B73D231640B2e4d0661D37c1",
]


async def get_client(seed: str) -> ZilliqaClient:
    """Discover nodes through the seed, falling back to the seed alone."""
    try:
        return await ZilliqaClient.bootstrap(seed)
    except DiscoveryError as e:
        logger.warning(f"Discovery failed, using {seed} only: {e}")
        return ZilliqaClient.from_nodes([seed])


async def main():
    setup_logging()
    client = await get_client("https://api.zilliqa.com")
    logger.info(f"Using {len(client.nodes)} node(s)")

    # Batch call: one HTTP request, responses matched by position
    payloads = [
        client.build_payload([address], ZilMethods.GetBalance) for address in ADDRESSES
    ]
    try:
        responses = await client.dispatch(payloads, List[RpcResponse[GetBalanceRes]])
    except DispatchError as e:
        logger.error(f"Balance batch failed ({e.kind.value}): {e}")
        return

    for address, response in zip(ADDRESSES, responses):
        if response.error:
            logger.info(f"{address}: {response.error.message}")
        else:
            logger.info(f"{address}: {response.result.balance} Qa")

    logger.info(f"Minimum gas price: {await client.get_minimum_gas_price()}")


if __name__ == "__main__":
    asyncio.run(main())
