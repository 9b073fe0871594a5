"""Tests for BaseRepository CRUD and error translation."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from azure.core.exceptions import ServiceRequestError
from azure.cosmos.exceptions import CosmosHttpResponseError, CosmosResourceNotFoundError

from catalog_text.database.repositories.texts import TextRepository
from catalog_text.errors import StorageError
from catalog_text.models.text import Text


def _items(*documents: dict):
    async def _gen():
        for document in documents:
            yield document

    return _gen()


class TestBaseRepository:
    """Exercise the shared repository methods through TextRepository."""

    @pytest.fixture
    def repo(self) -> TextRepository:
        mock_db = MagicMock()
        mock_container = AsyncMock()
        mock_db.get_container_client.return_value = mock_container
        return TextRepository(mock_db)

    def test_uses_texts_container(self, repo: TextRepository) -> None:
        assert repo.container_name == "texts"

    async def test_get_returns_model(self, repo: TextRepository) -> None:
        repo._container.read_item.return_value = {"id": "t-1", "slug": "welcome"}  # noqa: SLF001

        text = await repo.get("t-1", "t-1")

        assert text is not None
        assert text.slug == "welcome"
        repo._container.read_item.assert_awaited_once_with(  # noqa: SLF001
            item="t-1", partition_key="t-1"
        )

    async def test_get_missing_returns_none(self, repo: TextRepository) -> None:
        repo._container.read_item.side_effect = CosmosResourceNotFoundError(  # noqa: SLF001
            status_code=404, message="gone"
        )

        assert await repo.get("t-1", "t-1") is None

    async def test_get_failure_raises_storage_error(self, repo: TextRepository) -> None:
        repo._container.read_item.side_effect = CosmosHttpResponseError(  # noqa: SLF001
            status_code=503, message="unavailable"
        )

        with pytest.raises(StorageError):
            await repo.get("t-1", "t-1")

    async def test_update_replaces_item(self, repo: TextRepository) -> None:
        text = Text(id="t-1", slug="welcome", html="<p>x</p>")
        before = text.updated_at
        repo._container.replace_item.side_effect = lambda item, body: body  # noqa: SLF001

        saved = await repo.update(text, "t-1")

        kwargs = repo._container.replace_item.call_args.kwargs  # noqa: SLF001
        assert kwargs["item"] == "t-1"
        assert kwargs["body"]["html"] == "<p>x</p>"
        assert saved.updated_at >= before

    async def test_update_failure_raises_storage_error(self, repo: TextRepository) -> None:
        repo._container.replace_item.side_effect = CosmosHttpResponseError(  # noqa: SLF001
            status_code=500, message="boom"
        )

        with pytest.raises(StorageError):
            await repo.update(Text(slug="welcome"), "x")

    async def test_query_collects_models(self, repo: TextRepository) -> None:
        repo._container.query_items = MagicMock(  # noqa: SLF001
            return_value=_items({"id": "a", "slug": "a"}, {"id": "b", "slug": "b"})
        )

        result = await repo.query("SELECT * FROM c")

        assert [t.slug for t in result] == ["a", "b"]
        kwargs = repo._container.query_items.call_args.kwargs  # noqa: SLF001
        assert kwargs == {"query": "SELECT * FROM c", "parameters": []}

    async def test_query_transport_failure_raises_storage_error(
        self, repo: TextRepository
    ) -> None:
        repo._container.query_items = MagicMock(  # noqa: SLF001
            side_effect=ServiceRequestError("connection refused")
        )

        with pytest.raises(StorageError) as exc_info:
            await repo.query("SELECT * FROM c")

        assert isinstance(exc_info.value.__cause__, ServiceRequestError)

    async def test_query_malformed_document_raises_storage_error(
        self, repo: TextRepository
    ) -> None:
        repo._container.query_items = MagicMock(  # noqa: SLF001
            return_value=_items({"id": "1", "source": "x"})
        )

        with pytest.raises(StorageError):
            await repo.query("SELECT * FROM c")

    async def test_get_transport_failure_raises_storage_error(
        self, repo: TextRepository
    ) -> None:
        repo._container.read_item.side_effect = ServiceRequestError(  # noqa: SLF001
            "timed out"
        )

        with pytest.raises(StorageError):
            await repo.get("t-1", "t-1")
