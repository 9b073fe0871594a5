"""Commodity catalog lookups and description rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalog_text.services.texts import resolve_html

if TYPE_CHECKING:
    from catalog_text.database.repositories.commodities import CommodityRepository
    from catalog_text.database.repositories.texts import TextRepository
    from catalog_text.models.commodity import Commodity


async def list_commodities(commodities_repo: CommodityRepository) -> list[Commodity]:
    """Return every commodity ordered by name."""
    return await commodities_repo.list_all()


async def get_commodity(
    name: str, commodities_repo: CommodityRepository
) -> Commodity | None:
    """Return the commodity with this name, or None."""
    return await commodities_repo.get_by_name(name)


async def describe_commodity(
    name: str,
    commodities_repo: CommodityRepository,
    texts_repo: TextRepository,
    language_code: str | None = None,
) -> tuple[Commodity, str] | None:
    """Return a commodity with its description rendered to HTML.

    The description is empty when the commodity has no description or the
    referenced text no longer exists. Returns None if the commodity is unknown.
    """
    commodity = await commodities_repo.get_by_name(name)
    if commodity is None:
        return None
    if not commodity.description_id:
        return commodity, ""

    text = await texts_repo.get(commodity.description_id, commodity.description_id)
    if text is None:
        return commodity, ""

    resolution = resolve_html(text, language_code)
    if resolution.rendered:
        await texts_repo.save(resolution.document)
    return commodity, resolution.html
