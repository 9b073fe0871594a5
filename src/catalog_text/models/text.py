"""Text document model — wiki-like Markdown pages with per-language variants."""

from __future__ import annotations

from pydantic import BaseModel, Field

from catalog_text.models.base import DocumentBase


class LocalizedVariant(BaseModel):
    """The Markdown source of one language and its cached HTML rendering."""

    source: str = ""
    html: str = ""


class Text(DocumentBase):
    """A Markdown page addressed by slug.

    ``html`` and every ``LocalizedVariant.html`` are derived from the
    co-located ``source``; an empty string means "not rendered yet".
    ``translations`` is keyed by ISO 639 language code.
    """

    slug: str
    source: str = ""
    html: str = ""
    translations: dict[str, LocalizedVariant] = Field(default_factory=dict)

    def variant(self, language_code: str | None) -> LocalizedVariant | None:
        """Return the authored variant for an exact language code, if any.

        A variant whose source is empty counts as missing.
        """
        if not language_code:
            return None
        variant = self.translations.get(language_code)
        if variant is None or not variant.source:
            return None
        return variant

    def set_source(self, source: str, language_code: str | None = None) -> None:
        """Replace the default or per-language source and invalidate its HTML."""
        if language_code:
            self.translations[language_code] = LocalizedVariant(source=source)
        else:
            self.source = source
            self.html = ""
