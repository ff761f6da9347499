"""DLT resources backed by the Zilliqa JSON-RPC client."""

import asyncio
from typing import Iterator, List, Optional, Sequence

import dlt

from zil_sleuth.config.settings import settings
from zil_sleuth.core.base import BaseSource
from zil_sleuth.rpc.client import ZilliqaClient
from zil_sleuth.rpc.discovery import extract_ssn_entries, fetch_ssnlist
from zil_sleuth.rpc.methods import ZilMethods, build_payload
from zil_sleuth.rpc.models import GetBalanceRes, RpcResponse


class ZilliqaSource(BaseSource):
    """Creating DLT resources for Zilliqa network data."""

    def __init__(self, client: ZilliqaClient):
        super().__init__(client)

    def get_available_sources(self) -> List[str]:
        """Return list of available source names."""
        return ["ssn_nodes", "balances"]

    def _ssn_rows(self, seed: str) -> Iterator[dict]:
        ssnlist = asyncio.run(
            fetch_ssnlist(seed, self.client.config, self.client.transport)
        )
        for validator, node_url in extract_ssn_entries(ssnlist):
            yield {"validator": validator, "node_url": node_url}

    def _balance_rows(self, addresses: Sequence[str]) -> Iterator[dict]:
        if not addresses:
            return
        payloads = [build_payload([address], ZilMethods.GetBalance) for address in addresses]
        responses = asyncio.run(
            self.client.dispatch(payloads, List[RpcResponse[GetBalanceRes]])
        )

        # Batch replies are matched to requests by position
        for address, response in zip(addresses, responses):
            if response.error is not None:
                self.logger.warning(
                    f"Skipping balance of {address}: {response.error.message}"
                )
                continue
            if response.result is None:
                self.logger.warning(f"Skipping balance of {address}: empty result")
                continue
            yield {
                "address": address,
                "balance": response.result.balance,
                "nonce": response.result.nonce,
            }

    def ssn_nodes(self, seed: Optional[str] = None):
        """SSN validators and the node URL each one advertises."""
        seed = seed or self.client.registry[0]
        self.logger.info(f"Reading SSN list through {seed}")
        return dlt.resource(
            self._ssn_rows(seed),
            name="ssn_nodes",
            primary_key="validator",
            write_disposition="replace",
            columns=settings.columns.SSN_COLUMNS,
        )

    def balances(self, addresses: Sequence[str]):
        """Balance and nonce for each address."""
        addresses = list(addresses)
        self.logger.info(f"Fetching balances for {len(addresses)} address(es)")
        return dlt.resource(
            self._balance_rows(addresses),
            name="balances",
            primary_key="address",
            write_disposition="merge",
            columns=settings.columns.BALANCE_COLUMNS,
        )
