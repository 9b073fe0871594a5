"""Tests for the text page route handler."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from catalog_text.errors import RenderError, StorageError
from catalog_text.models.text import Text
from catalog_text.routes.texts import text_page


@pytest.fixture
def request_mock() -> MagicMock:
    request = MagicMock()
    request.app.state.cosmos = MagicMock()
    request.app.state.templates = MagicMock()
    return request


class TestTextPage:
    """Test the text page route."""

    async def test_renders_template(self, request_mock: MagicMock) -> None:
        """Verify the resolved HTML and slug reach the template."""
        text = Text(slug="welcome", source="**Hello**")
        with (
            patch("catalog_text.routes.texts.TextRepository") as repo_cls,
            patch(
                "catalog_text.routes.texts.texts_svc.get_text_html",
                new_callable=AsyncMock,
                return_value=(text, "<p><strong>Hello</strong></p>"),
            ) as get_html,
        ):
            await text_page(request_mock, "welcome", "fr")

        get_html.assert_awaited_once_with("welcome", repo_cls.return_value, "fr")
        request_mock.app.state.templates.TemplateResponse.assert_called_once_with(
            "text.html",
            {
                "request": request_mock,
                "title": "welcome",
                "content": "<p><strong>Hello</strong></p>",
            },
        )

    async def test_not_found(self, request_mock: MagicMock) -> None:
        """Verify an unknown slug returns a plain 404."""
        with (
            patch("catalog_text.routes.texts.TextRepository"),
            patch(
                "catalog_text.routes.texts.texts_svc.get_text_html",
                new_callable=AsyncMock,
                return_value=None,
            ),
        ):
            response = await text_page(request_mock, "missing", None)

        assert response.status_code == 404
        assert response.body == b"Not Found"
        request_mock.app.state.templates.TemplateResponse.assert_not_called()

    @pytest.mark.parametrize("error", [StorageError("down"), RenderError("bad")])
    async def test_internal_error(self, request_mock: MagicMock, error: Exception) -> None:
        """Verify storage and render failures return a generic 500."""
        with (
            patch("catalog_text.routes.texts.TextRepository"),
            patch(
                "catalog_text.routes.texts.texts_svc.get_text_html",
                new_callable=AsyncMock,
                side_effect=error,
            ),
        ):
            response = await text_page(request_mock, "welcome", None)

        assert response.status_code == 500
        assert response.body == b"Error retrieving text"
