"""Async Cosmos DB client initialization."""

from __future__ import annotations

import logging

from azure.core.exceptions import AzureError
from azure.cosmos import PartitionKey
from azure.cosmos.aio import CosmosClient as AzureCosmosClient
from azure.cosmos.aio import DatabaseProxy

from catalog_text.config import CosmosConfig

logger = logging.getLogger(__name__)

# Container name -> unique key path enforced by Cosmos DB.
CONTAINERS: dict[str, str] = {
    "texts": "/slug",
    "commodities": "/name",
}


class CosmosClient:
    """Manages the async Cosmos DB client and database reference."""

    def __init__(self, config: CosmosConfig) -> None:
        self._config = config
        self._client: AzureCosmosClient | None = None
        self._database: DatabaseProxy | None = None

    async def initialize(self) -> None:
        """Create the client and obtain a database reference."""
        self._client = AzureCosmosClient(self._config.endpoint, credential=self._config.key)
        self._database = self._client.get_database_client(self._config.database)

    async def close(self) -> None:
        """Close the underlying client."""
        if self._client:
            await self._client.close()
            self._client = None
            self._database = None

    @property
    def database(self) -> DatabaseProxy:
        if self._database is None:
            raise RuntimeError("CosmosClient not initialized — call initialize() first")
        return self._database

    @property
    def client(self) -> AzureCosmosClient:
        if self._client is None:
            raise RuntimeError("CosmosClient not initialized — call initialize() first")
        return self._client


async def ensure_containers(client: AzureCosmosClient, database_name: str) -> None:
    """Create the database and containers (with unique keys) if missing."""
    database = await client.create_database_if_not_exists(id=database_name)
    for name, unique_path in CONTAINERS.items():
        await database.create_container_if_not_exists(
            id=name,
            partition_key=PartitionKey(path="/id"),
            unique_key_policy={"uniqueKeys": [{"paths": [unique_path]}]},
        )
        logger.debug("Container ready — name=%s unique_key=%s", name, unique_path)


async def init_database(config: CosmosConfig) -> CosmosClient:
    """Connect to Cosmos DB and provision containers.

    Raises ``ConnectionError`` when the account cannot be reached or provisioned.
    """
    cosmos = CosmosClient(config)
    await cosmos.initialize()
    try:
        await ensure_containers(cosmos.client, config.database)
    except AzureError as exc:
        await cosmos.close()
        msg = f"Cannot provision Cosmos DB database {config.database!r}: {exc.message}"
        raise ConnectionError(msg) from exc
    logger.info("Cosmos DB ready — database=%s", config.database)
    return cosmos
