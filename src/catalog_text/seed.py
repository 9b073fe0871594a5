"""Maintenance entry point — load texts and commodities from a JSON seed file.

Texts are matched by slug and commodities by name. New entries are created;
existing texts get their changed sources replaced through ``update_source``
(which drops the cached HTML), and existing commodities are overwritten.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path

import click
from pydantic import BaseModel, Field, ValidationError

from catalog_text.config import load_settings
from catalog_text.database.client import init_database
from catalog_text.database.repositories.commodities import CommodityRepository
from catalog_text.database.repositories.texts import TextRepository
from catalog_text.errors import CatalogTextError, StorageError
from catalog_text.logging import configure_logging
from catalog_text.models.commodity import Commodity, StorageClass
from catalog_text.models.text import LocalizedVariant, Text
from catalog_text.services.texts import update_source

logger = logging.getLogger(__name__)


class SeedText(BaseModel):
    slug: str
    source: str = ""
    translations: dict[str, str] = Field(default_factory=dict)


class SeedCommodity(BaseModel):
    name: str
    min_level: int | float | None = None
    max_level: int | float | None = None
    storage: StorageClass = StorageClass.STANDARD
    description: str | None = None  # slug of a text


class SeedFile(BaseModel):
    texts: list[SeedText] = Field(default_factory=list)
    commodities: list[SeedCommodity] = Field(default_factory=list)


@dataclass(frozen=True)
class SeedSummary:
    texts_created: int = 0
    texts_updated: int = 0
    commodities_created: int = 0
    commodities_updated: int = 0


async def _sync_text(entry: SeedText, existing: Text, texts_repo: TextRepository) -> bool:
    """Apply changed sources to an existing text. Return True if anything changed."""
    wanted: list[tuple[str | None, str]] = [(None, entry.source), *entry.translations.items()]
    text = existing
    changed = False
    for language_code, source in wanted:
        variant = text.translations.get(language_code) if language_code else None
        current = text.source if language_code is None else (variant.source if variant else None)
        if current == source:
            continue
        updated = await update_source(entry.slug, source, texts_repo, language_code)
        if updated is None:
            msg = f"Text {entry.slug!r} disappeared while seeding"
            raise StorageError(msg)
        text = updated
        changed = True
    return changed


async def apply_seed(
    seed: SeedFile,
    texts_repo: TextRepository,
    commodities_repo: CommodityRepository,
) -> SeedSummary:
    """Create or update every text and commodity in ``seed``."""
    texts_created = texts_updated = 0
    text_ids: dict[str, str] = {}
    for entry in seed.texts:
        existing = await texts_repo.get_by_slug(entry.slug)
        if existing is None:
            text = Text(
                slug=entry.slug,
                source=entry.source,
                translations={
                    code: LocalizedVariant(source=source)
                    for code, source in entry.translations.items()
                },
            )
            text = await texts_repo.create(text)
            texts_created += 1
            logger.info("Text created — slug=%s", entry.slug)
        else:
            text = existing
            if await _sync_text(entry, existing, texts_repo):
                texts_updated += 1
        text_ids[entry.slug] = text.id

    commodities_created = commodities_updated = 0
    for entry in seed.commodities:
        description_id = None
        if entry.description:
            description_id = text_ids.get(entry.description)
            if description_id is None:
                described = await texts_repo.get_by_slug(entry.description)
                description_id = described.id if described else None
            if description_id is None:
                logger.warning(
                    "Commodity description not found — name=%s slug=%s",
                    entry.name,
                    entry.description,
                )

        fields = {
            "name": entry.name,
            "min_level": entry.min_level,
            "max_level": entry.max_level,
            "storage": entry.storage,
            "description_id": description_id,
        }
        existing_commodity = await commodities_repo.get_by_name(entry.name)
        if existing_commodity is None:
            await commodities_repo.create(Commodity(**fields))
            commodities_created += 1
            logger.info("Commodity created — name=%s", entry.name)
        else:
            commodity = Commodity(
                id=existing_commodity.id,
                created_at=existing_commodity.created_at,
                **fields,
            )
            await commodities_repo.update(commodity, commodity.id)
            commodities_updated += 1

    return SeedSummary(
        texts_created=texts_created,
        texts_updated=texts_updated,
        commodities_created=commodities_created,
        commodities_updated=commodities_updated,
    )


async def run(path: Path) -> SeedSummary:
    """Load ``path`` and apply it to the configured Cosmos DB account."""
    settings = load_settings()
    configure_logging(settings.app.log_level, log_file=settings.app.log_file or None)

    seed = SeedFile.model_validate_json(path.read_text(encoding="utf-8"))
    cosmos = await init_database(settings.cosmos)
    try:
        return await apply_seed(
            seed,
            TextRepository(cosmos.database),
            CommodityRepository(cosmos.database),
        )
    finally:
        await cosmos.close()


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def main(path: Path) -> None:
    """Create or update texts and commodities from a JSON seed file."""
    try:
        summary = asyncio.run(run(path))
    except ValidationError as exc:
        msg = f"Invalid seed file {path}: {exc}"
        raise click.ClickException(msg) from exc
    except (ConnectionError, CatalogTextError) as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(
        f"texts: {summary.texts_created} created, {summary.texts_updated} updated; "
        f"commodities: {summary.commodities_created} created, "
        f"{summary.commodities_updated} updated"
    )


if __name__ == "__main__":
    main()
