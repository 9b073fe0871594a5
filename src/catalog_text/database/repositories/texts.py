"""Repository for the texts container (partitioned by /id, unique /slug)."""

from __future__ import annotations

from catalog_text.database.repositories.base import BaseRepository
from catalog_text.errors import DuplicateKeyError
from catalog_text.models.text import Text


class TextRepository(BaseRepository[Text]):
    """Provide data access for the texts container."""

    container_name = "texts"
    model_class = Text

    async def get_by_slug(self, slug: str) -> Text | None:
        """Fetch the text with the given slug."""
        results = await self.query(
            "SELECT * FROM c WHERE c.slug = @slug",
            [{"name": "@slug", "value": slug}],
        )
        return results[0] if results else None

    async def create(self, item: Text) -> Text:
        """Insert a text, refusing a slug that is already taken."""
        if await self.get_by_slug(item.slug) is not None:
            raise DuplicateKeyError("slug", item.slug)
        return await super().create(item)

    async def save(self, item: Text) -> Text:
        """Persist changes to an existing text, including cache fills."""
        return await self.update(item, item.id)
