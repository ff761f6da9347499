"""Centralized configuration management for zil_sleuth."""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


class APIUrls:
    """Zilliqa RPC endpoint URLs."""

    ZILLIQA_MAINNET = "https://api.zilliqa.com"
    ZILLIQA_TESTNET = "https://dev-api.zilliqa.com"


class Contracts:
    """Well-known contract addresses."""

    # SSN list holder of the mainnet staking contract
    STAKING = "a7C67D49C82c7dc1B73D231640B2e4d0661D37c1"


def _optional_float(name: str, default: Optional[float]) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    if raw.lower() == "none":
        return None
    return float(raw)


@dataclass
class RPCSettings:
    """RPC-specific settings."""

    main_url: Optional[str] = None
    staking_contract: Optional[str] = None
    timeout: Optional[float] = 30.0
    max_error: int = 5

    def __post_init__(self):
        # Load from environment if not provided
        if self.main_url is None:
            self.main_url = os.getenv("ZILLIQA_RPC_URL", APIUrls.ZILLIQA_MAINNET)
        if self.staking_contract is None:
            self.staking_contract = os.getenv(
                "ZILLIQA_STAKING_CONTRACT", Contracts.STAKING
            )
        self.timeout = _optional_float("ZILLIQA_RPC_TIMEOUT", self.timeout)
        self.max_error = int(os.getenv("ZILLIQA_RPC_MAX_ERROR", self.max_error))


@dataclass
class DuckDBSettings:
    """Local DuckDB destination for dlt pipelines."""

    database_path: str = field(
        default_factory=lambda: os.getenv(
            "ZILLIQA_DUCKDB_PATH", os.path.join("data", "zilliqa.duckdb")
        )
    )


@dataclass
class ColumnSchemas:
    """Standardized column schemas for DLT pipelines."""

    SSN_COLUMNS = {
        "validator": {"data_type": "text"},
        "node_url": {"data_type": "text"},
    }

    BALANCE_COLUMNS = {
        "address": {"data_type": "text"},
        "balance": {"data_type": "decimal"},
        "nonce": {"data_type": "bigint"},
    }


class Settings:
    """Main settings class."""

    def __init__(self):
        self.rpc = RPCSettings()
        self.duckdb = DuckDBSettings()
        self.columns = ColumnSchemas()
        self.api_urls = APIUrls()
        self.contracts = Contracts()


# Global settings instance
settings = Settings()
