"""Factory classes for creating clients and pipeline components."""

import os
from typing import Literal, Optional, Sequence

import dlt

from .config.settings import settings
from .core.base import RpcConfig
from .core.exceptions import PipelineError
from .datasource.zilliqa import ZilliqaSource
from .rpc.client import ZilliqaClient


class ClientFactory:
    """Factory for creating Zilliqa clients."""

    @staticmethod
    def create_client(
        nodes: Optional[Sequence[str]] = None, config: Optional[RpcConfig] = None
    ) -> ZilliqaClient:
        return ZilliqaClient(nodes=nodes, config=config)

    @staticmethod
    async def create_bootstrapped_client(
        seed: Optional[str] = None, config: Optional[RpcConfig] = None
    ) -> ZilliqaClient:
        return await ZilliqaClient.bootstrap(seed or settings.rpc.main_url, config)


class PipelineFactory:
    """Factory for creating pipeline components."""

    @staticmethod
    def create_dlt_pipeline(
        name: str,
        destination: Literal["duckdb"] = "duckdb",
        dataset_name: Optional[str] = None,
    ):
        """Create DLT pipeline with specified destination."""
        if destination != "duckdb":
            raise PipelineError(f"Unsupported destination: {destination}")

        # Ensure data directory exists for DuckDB
        db_dir = os.path.dirname(settings.duckdb.database_path)
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)
        dest = dlt.destinations.duckdb(settings.duckdb.database_path)

        return dlt.pipeline(
            pipeline_name=name, destination=dest, dataset_name=dataset_name or name
        )

    @staticmethod
    def create_zilliqa_source(
        nodes: Optional[Sequence[str]] = None, config: Optional[RpcConfig] = None
    ) -> ZilliqaSource:
        return ZilliqaSource(ClientFactory.create_client(nodes, config))
