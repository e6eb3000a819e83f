"""Tests for the search module."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from traktkit import Trakt
from traktkit.models import IdType, SearchResult, SearchType

# =============================================================================
# Sample API Responses
# =============================================================================

SAMPLE_TEXT_RESULTS = [
    {
        "type": "movie",
        "score": 26.019499,
        "movie": {"title": "TRON: Legacy", "year": 2010, "ids": {"trakt": 1, "slug": "tron-legacy-2010"}},
    },
    {
        "type": "show",
        "score": 19.533358,
        "show": {"title": "Tron: Uprising", "year": 2012, "ids": {"trakt": 2, "slug": "tron-uprising"}},
    },
    {
        "type": "person",
        "score": 12.0,
        "person": {"name": "Bryan Cranston", "ids": {"trakt": 297737, "slug": "bryan-cranston"}},
    },
]


class TestSearchResult:
    """Tests for SearchResult model."""

    def test_get_title_movie(self):
        result = SearchResult.model_validate(SAMPLE_TEXT_RESULTS[0])

        assert result.type == SearchType.MOVIE
        assert result.get_title() == "TRON: Legacy"

    def test_get_title_person(self):
        result = SearchResult.model_validate(SAMPLE_TEXT_RESULTS[2])

        assert result.get_title() == "Bryan Cranston"

    def test_get_title_list_alias(self):
        result = SearchResult.model_validate(
            {"type": "list", "list": {"name": "Star Wars", "ids": {"trakt": 55}}}
        )

        assert result.list_.name == "Star Wars"
        assert result.get_title() == "Star Wars"


class TestSearchModule:
    """Tests for SearchModule."""

    @pytest.fixture
    def mock_response(self):
        """Create a mock HTTP response."""

        def _create_response(data, status_code: int = 200):
            response = MagicMock(spec=httpx.Response)
            response.status_code = status_code
            response.json.return_value = data
            response.content = b"{}"
            response.text = str(data)
            response.reason_phrase = "OK"
            response.headers = {}
            return response

        return _create_response

    @pytest.fixture
    def trakt(self):
        trakt = Trakt(client_id="test_id", client_secret="test_secret")
        trakt.client._client = MagicMock(spec=httpx.AsyncClient)
        return trakt

    @pytest.mark.asyncio
    async def test_text(self, trakt, mock_response):
        trakt.client._client.request = AsyncMock(return_value=mock_response(SAMPLE_TEXT_RESULTS))

        results = await trakt.search.text("tron", type="movie,show,person")

        assert len(results) == 3
        assert results[1].show.title == "Tron: Uprising"
        call_args = trakt.client._client.request.call_args
        assert call_args.args == ("GET", "/search/movie,show,person")
        assert call_args.kwargs["params"] == {"query": "tron"}

    @pytest.mark.asyncio
    async def test_text_with_year_and_pagination(self, trakt, mock_response):
        trakt.client._client.request = AsyncMock(return_value=mock_response([]))

        await trakt.search.text("breaking bad", SearchType.SHOW, year=2008, page=2, limit=20)

        call_args = trakt.client._client.request.call_args
        assert call_args.args[1] == "/search/show"
        assert call_args.kwargs["params"] == {
            "query": "breaking bad",
            "year": 2008,
            "page": 2,
            "limit": 20,
        }

    @pytest.mark.asyncio
    async def test_id_lookup(self, trakt, mock_response):
        trakt.client._client.request = AsyncMock(
            return_value=mock_response(SAMPLE_TEXT_RESULTS[:1])
        )

        results = await trakt.search.id(IdType.IMDB, "tt1104001", type=SearchType.MOVIE)

        assert results[0].movie.ids.trakt == 1
        call_args = trakt.client._client.request.call_args
        assert call_args.args[1] == "/search/imdb/tt1104001"
        assert call_args.kwargs["params"] == {"type": "movie"}

    @pytest.mark.asyncio
    async def test_id_is_url_encoded(self, trakt, mock_response):
        trakt.client._client.request = AsyncMock(return_value=mock_response([]))

        await trakt.search.id("trakt", "a/b c")

        call_args = trakt.client._client.request.call_args
        assert call_args.args[1] == "/search/trakt/a%2Fb%20c"
        assert call_args.kwargs["params"] is None
