"""Repository modules for each Cosmos DB container."""

from catalog_text.database.repositories.commodities import CommodityRepository
from catalog_text.database.repositories.texts import TextRepository

__all__ = [
    "CommodityRepository",
    "TextRepository",
]
