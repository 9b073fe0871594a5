"""Text business logic — language resolution, render caching, and source edits."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from catalog_text.errors import RenderError
from catalog_text.rendering import render_markdown

if TYPE_CHECKING:
    from collections.abc import Callable

    from catalog_text.database.repositories.texts import TextRepository
    from catalog_text.models.text import Text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving a Text to HTML.

    ``document`` is the input itself when the cache was already filled, or an
    updated copy carrying the newly rendered HTML. ``rendered`` tells the caller
    whether that copy still needs to be persisted.
    """

    html: str
    document: Text
    language_code: str | None
    rendered: bool


def resolve_html(
    document: Text,
    language_code: str | None = None,
    *,
    renderer: Callable[[str], str] = render_markdown,
) -> Resolution:
    """Return the HTML to display for ``document`` in ``language_code``.

    An exact match in ``translations`` selects that variant; anything else
    (no code, empty code, unknown code, empty variant) uses the default
    source. ``en-US`` never matches ``en``. The input is never mutated.
    """
    variant = document.variant(language_code)
    target = variant if variant is not None else document
    resolved_code = language_code if variant is not None else None

    if target.html:
        return Resolution(
            html=target.html,
            document=document,
            language_code=resolved_code,
            rendered=False,
        )

    try:
        html = renderer(target.source)
    except Exception as exc:
        msg = f"Failed to render text {document.slug!r} (language={resolved_code})"
        raise RenderError(msg) from exc

    updated = document.model_copy(deep=True)
    if resolved_code is None:
        updated.html = html
    else:
        updated.translations[resolved_code].html = html

    logger.info(
        "Text rendered — slug=%s language=%s length=%d",
        document.slug,
        resolved_code or "default",
        len(html),
    )
    return Resolution(
        html=html,
        document=updated,
        language_code=resolved_code,
        rendered=True,
    )


async def get_text_html(
    slug: str,
    texts_repo: TextRepository,
    language_code: str | None = None,
) -> tuple[Text, str] | None:
    """Load a text by slug and return it with its resolved HTML.

    Returns None if no text has the slug. A freshly rendered result is saved
    back so later loads reuse it.
    """
    text = await texts_repo.get_by_slug(slug)
    if text is None:
        logger.info("Text not found — slug=%s", slug)
        return None

    resolution = resolve_html(text, language_code)
    if resolution.rendered:
        text = await texts_repo.save(resolution.document)
    return text, resolution.html


async def update_source(
    slug: str,
    source: str,
    texts_repo: TextRepository,
    language_code: str | None = None,
) -> Text | None:
    """Replace a text's Markdown source and drop the stale cached HTML.

    Returns None if no text has the slug.
    """
    text = await texts_repo.get_by_slug(slug)
    if text is None:
        return None
    text.set_source(source, language_code)
    saved = await texts_repo.save(text)
    logger.info(
        "Text source updated — slug=%s language=%s",
        slug,
        language_code or "default",
    )
    return saved
