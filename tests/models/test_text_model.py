"""Tests for the Text model defaults, variant lookup, and source edits."""

from catalog_text.models.text import LocalizedVariant, Text


class TestTextModel:
    """Test the Text document model."""

    def test_defaults(self) -> None:
        """Verify default field values on a new text."""
        text = Text(slug="welcome")

        assert text.slug == "welcome"
        assert text.source == ""
        assert text.html == ""
        assert text.translations == {}
        assert text.id is not None
        assert text.created_at is not None

    def test_round_trips_cosmos_document(self) -> None:
        """Verify a stored document with Cosmos system fields validates."""
        text = Text.model_validate(
            {
                "id": "text-1",
                "slug": "welcome",
                "source": "**Hello**",
                "html": "",
                "translations": {"fr": {"source": "**Bonjour**"}},
                "_etag": "etag-1",
                "_ts": 1700000000,
            }
        )

        assert text.translations["fr"] == LocalizedVariant(source="**Bonjour**")
        assert "_etag" not in text.model_dump()

    def test_variant_exact_match_only(self) -> None:
        text = Text(slug="t", translations={"en": LocalizedVariant(source="hi")})

        assert text.variant("en") is text.translations["en"]
        assert text.variant("en-US") is None
        assert text.variant("") is None
        assert text.variant(None) is None

    def test_variant_with_empty_source_is_missing(self) -> None:
        text = Text(slug="t", translations={"fr": LocalizedVariant()})

        assert text.variant("fr") is None

    def test_set_source_default_clears_html(self) -> None:
        text = Text(slug="t", source="old", html="<p>old</p>")

        text.set_source("new")

        assert text.source == "new"
        assert text.html == ""

    def test_set_source_adds_translation(self) -> None:
        text = Text(slug="t", source="old", html="<p>old</p>")

        text.set_source("nouveau", "fr")

        assert text.translations["fr"] == LocalizedVariant(source="nouveau")
        assert text.html == "<p>old</p>"
