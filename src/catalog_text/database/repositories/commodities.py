"""Repository for the commodities container (partitioned by /id, unique /name)."""

from __future__ import annotations

from catalog_text.database.repositories.base import BaseRepository
from catalog_text.errors import DuplicateKeyError
from catalog_text.models.commodity import Commodity


class CommodityRepository(BaseRepository[Commodity]):
    """Provide data access for the commodities container."""

    container_name = "commodities"
    model_class = Commodity

    async def list_all(self) -> list[Commodity]:
        """Fetch all commodities ordered by name."""
        return await self.query("SELECT * FROM c ORDER BY c.name ASC")

    async def get_by_name(self, name: str) -> Commodity | None:
        """Fetch the commodity with the given name."""
        results = await self.query(
            "SELECT * FROM c WHERE c.name = @name",
            [{"name": "@name", "value": name}],
        )
        return results[0] if results else None

    async def create(self, item: Commodity) -> Commodity:
        """Insert a commodity, refusing a name that is already taken."""
        if await self.get_by_name(item.name) is not None:
            raise DuplicateKeyError("name", item.name)
        return await super().create(item)
