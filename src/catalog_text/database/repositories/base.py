"""Generic repository over a single Cosmos DB container."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar, cast

from azure.core.exceptions import AzureError
from azure.cosmos.exceptions import CosmosResourceNotFoundError
from pydantic import ValidationError

from catalog_text.errors import StorageError
from catalog_text.models.base import DocumentBase

if TYPE_CHECKING:
    from azure.cosmos.aio import ContainerProxy, DatabaseProxy

T = TypeVar("T", bound=DocumentBase)

# Transport failures, Cosmos HTTP errors, and stored documents that no
# longer match the model.
_STORAGE_FAILURES = (AzureError, ValidationError)


class BaseRepository(Generic[T]):
    """CRUD and query helpers shared by every container repository.

    Any SDK or document-shape failure is raised as ``StorageError``; a point
    read of a missing item returns None.
    """

    container_name: ClassVar[str]
    model_class: ClassVar[type[DocumentBase]]

    def __init__(self, database: DatabaseProxy) -> None:
        self._container: ContainerProxy = database.get_container_client(self.container_name)

    def _to_model(self, data: dict[str, Any]) -> T:
        return cast("T", self.model_class.model_validate(data))

    async def create(self, item: T) -> T:
        """Insert a new document."""
        try:
            data = await self._container.create_item(body=item.model_dump(mode="json"))
            return self._to_model(data)
        except _STORAGE_FAILURES as exc:
            msg = f"Failed to create {self.container_name} item {item.id}"
            raise StorageError(msg) from exc

    async def get(self, item_id: str, partition_key: str) -> T | None:
        """Read a document by id, or None if it does not exist."""
        try:
            data = await self._container.read_item(item=item_id, partition_key=partition_key)
            return self._to_model(data)
        except CosmosResourceNotFoundError:
            return None
        except _STORAGE_FAILURES as exc:
            msg = f"Failed to read {self.container_name} item {item_id}"
            raise StorageError(msg) from exc

    async def update(self, item: T, partition_key: str) -> T:
        """Replace a document, stamping ``updated_at``."""
        item.updated_at = datetime.now(UTC)
        try:
            data = await self._container.replace_item(
                item=item.id,
                body=item.model_dump(mode="json"),
            )
            return self._to_model(data)
        except _STORAGE_FAILURES as exc:
            msg = f"Failed to update {self.container_name} item {item.id} ({partition_key})"
            raise StorageError(msg) from exc

    async def query(
        self,
        sql: str,
        parameters: list[dict[str, Any]] | None = None,
    ) -> list[T]:
        """Run a SQL query and return the matching documents."""
        try:
            return [
                self._to_model(data)
                async for data in self._container.query_items(
                    query=sql,
                    parameters=parameters or [],
                )
            ]
        except _STORAGE_FAILURES as exc:
            msg = f"Failed to query {self.container_name}"
            raise StorageError(msg) from exc
