"""Commodity document model — types of goods in the catalog."""

from __future__ import annotations

from enum import StrEnum

from pydantic import model_validator

from catalog_text.models.base import DocumentBase


class StorageClass(StrEnum):
    STANDARD = "Standard"
    BULK = "Bulk"
    FLUID = "Fluid"
    HAZARDOUS = "Hazardous"


class Commodity(DocumentBase):
    """A type of good. ``description_id`` references a Text by id without owning it."""

    name: str
    min_level: int | float | None = None
    max_level: int | float | None = None
    storage: StorageClass = StorageClass.STANDARD
    description_id: str | None = None

    @model_validator(mode="after")
    def _check_levels(self) -> Commodity:
        if (
            self.min_level is not None
            and self.max_level is not None
            and self.min_level > self.max_level
        ):
            msg = f"min_level ({self.min_level}) exceeds max_level ({self.max_level})"
            raise ValueError(msg)
        return self
