"""Data models for Cosmos DB document types."""

from catalog_text.models.commodity import Commodity, StorageClass
from catalog_text.models.text import LocalizedVariant, Text

__all__ = [
    "Commodity",
    "LocalizedVariant",
    "StorageClass",
    "Text",
]
