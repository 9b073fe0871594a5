"""Error types raised by rendering and storage."""

from __future__ import annotations


class CatalogTextError(Exception):
    """Base class for failures surfaced to callers as internal errors."""


class RenderError(CatalogTextError):
    """The Markdown-to-HTML transform failed."""


class StorageError(CatalogTextError):
    """A Cosmos DB read or write failed."""


class DuplicateKeyError(StorageError):
    """A document with the same unique key (slug or name) already exists."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(f"{field} {value!r} already exists")
        self.field = field
        self.value = value
