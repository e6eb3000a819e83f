"""Tests for the sync module."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from traktkit import Trakt
from traktkit.models import IDs, ItemRef, MediaType, PlaybackParams, SyncItem, SyncParams

# =============================================================================
# Sample API Responses
# =============================================================================

SAMPLE_SYNC_RESPONSE = {
    "added": {"movies": 1, "episodes": 12},
    "existing": {"movies": 0, "episodes": 0},
    "not_found": {
        "movies": [{"ids": {"imdb": "tt0000111"}}],
        "shows": [],
        "seasons": [],
        "episodes": [],
    },
}

SAMPLE_COLLECTION = [
    {
        "last_collected_at": "2014-09-01T09:10:11.000Z",
        "last_updated_at": "2014-09-01T09:10:11.000Z",
        "show": {"title": "Breaking Bad", "year": 2008, "ids": {"trakt": 1, "slug": "breaking-bad"}},
        "seasons": [
            {
                "number": 1,
                "episodes": [
                    {"number": 1, "collected_at": "2014-09-01T09:10:11.000Z", "metadata": {"resolution": "hd_720p"}},
                    {"number": 2, "collected_at": "2014-09-01T09:10:11.000Z"},
                ],
            }
        ],
    }
]

SAMPLE_PLAYBACK = [
    {
        "progress": 10,
        "paused_at": "2015-01-25T22:01:32.000Z",
        "id": 13,
        "type": "movie",
        "movie": {"title": "Batman Begins", "year": 2005, "ids": {"trakt": 1, "slug": "batman-begins-2005"}},
    }
]


class TestSyncModule:
    """Tests for SyncModule."""

    @pytest.fixture
    def mock_response(self):
        """Create a mock HTTP response."""

        def _create_response(data, status_code: int = 200):
            response = MagicMock(spec=httpx.Response)
            response.status_code = status_code
            response.json.return_value = data
            response.content = b"" if data is None else b"{}"
            response.text = "" if data is None else str(data)
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
    async def test_collection_get(self, trakt, mock_response):
        trakt.client._client.request = AsyncMock(return_value=mock_response(SAMPLE_COLLECTION))

        items = await trakt.sync.collection.get(MediaType.SHOWS)

        assert items[0].show.title == "Breaking Bad"
        assert len(items[0].seasons[0].episodes) == 2
        assert items[0].seasons[0].episodes[0].metadata == {"resolution": "hd_720p"}
        assert trakt.client._client.request.call_args.args == ("GET", "/sync/collection/shows")

    @pytest.mark.asyncio
    async def test_collection_add_model(self, trakt, mock_response):
        trakt.client._client.request = AsyncMock(
            return_value=mock_response(SAMPLE_SYNC_RESPONSE)
        )

        response = await trakt.sync.collection.add(
            SyncParams(movies=[SyncItem(ids=IDs(imdb="tt1104001"))])
        )

        assert response.added.movies == 1
        assert response.added.episodes == 12
        assert response.not_found.movies[0].ids.imdb == "tt0000111"
        call_args = trakt.client._client.request.call_args
        assert call_args.args == ("POST", "/sync/collection")
        assert call_args.kwargs["json"] == {"movies": [{"ids": {"imdb": "tt1104001"}}]}

    @pytest.mark.asyncio
    async def test_collection_remove_mapping(self, trakt, mock_response):
        trakt.client._client.request = AsyncMock(
            return_value=mock_response({"deleted": {"movies": 1}})
        )

        response = await trakt.sync.collection.remove({"movies": [{"ids": {"trakt": 1}}]})

        assert response.deleted.movies == 1
        call_args = trakt.client._client.request.call_args
        assert call_args.args == ("POST", "/sync/collection/remove")
        assert call_args.kwargs["json"] == {"movies": [{"ids": {"trakt": 1}}]}

    @pytest.mark.asyncio
    async def test_watched_uses_history(self, trakt, mock_response):
        trakt.client._client.request = AsyncMock(
            side_effect=[
                mock_response([]),
                mock_response(SAMPLE_SYNC_RESPONSE),
                mock_response(SAMPLE_SYNC_RESPONSE),
            ]
        )

        await trakt.sync.watched.get("movies")
        await trakt.sync.watched.add({"movies": [{"ids": {"trakt": 1}}]})
        await trakt.sync.watched.remove({"movies": [{"ids": {"trakt": 1}}]})

        paths = [c.args[1] for c in trakt.client._client.request.call_args_list]
        assert paths == ["/sync/watched/movies", "/sync/history", "/sync/history/remove"]

    @pytest.mark.asyncio
    async def test_ratings(self, trakt, mock_response):
        trakt.client._client.request = AsyncMock(return_value=mock_response([]))

        await trakt.sync.ratings.get("movies", rating=9)
        await trakt.sync.ratings.get("episodes")

        paths = [c.args[1] for c in trakt.client._client.request.call_args_list]
        assert paths == ["/sync/ratings/movies/9", "/sync/ratings/episodes"]

    @pytest.mark.asyncio
    async def test_ratings_add_with_rating(self, trakt, mock_response):
        trakt.client._client.request = AsyncMock(
            return_value=mock_response(SAMPLE_SYNC_RESPONSE)
        )

        await trakt.sync.ratings.add(
            SyncParams(movies=[SyncItem(ids=IDs(trakt=1), rating=8)])
        )

        assert trakt.client._client.request.call_args.kwargs["json"] == {
            "movies": [{"ids": {"trakt": 1}, "rating": 8}]
        }

    @pytest.mark.asyncio
    async def test_watchlist(self, trakt, mock_response):
        trakt.client._client.request = AsyncMock(
            return_value=mock_response(
                [
                    {
                        "rank": 1,
                        "id": 101,
                        "listed_at": "2014-09-01T09:10:11.000Z",
                        "type": "movie",
                        "movie": {"title": "Star Wars", "ids": {"trakt": 12}},
                    }
                ]
            )
        )

        items = await trakt.sync.watchlist.get("movies")

        assert items[0].rank == 1
        assert trakt.client._client.request.call_args.args[1] == "/sync/watchlist/movies"

    @pytest.mark.asyncio
    async def test_history_get(self, trakt, mock_response):
        trakt.client._client.request = AsyncMock(return_value=mock_response([]))

        await trakt.sync.history.get(type="shows", item_id=1, start_at="2024-01-01", limit=10)

        call_args = trakt.client._client.request.call_args
        assert call_args.args[1] == "/sync/history/shows/1"
        assert call_args.kwargs["params"] == {"start_at": "2024-01-01", "limit": 10}

    @pytest.mark.asyncio
    async def test_history_remove_by_ids(self, trakt, mock_response):
        trakt.client._client.request = AsyncMock(
            return_value=mock_response({"deleted": {"episodes": 2}})
        )

        await trakt.sync.history.remove(SyncParams(ids=[1982346, 1982347]))

        call_args = trakt.client._client.request.call_args
        assert call_args.args[1] == "/sync/history/remove"
        assert call_args.kwargs["json"] == {"ids": [1982346, 1982347]}

    @pytest.mark.asyncio
    async def test_playback_get(self, trakt, mock_response):
        trakt.client._client.request = AsyncMock(return_value=mock_response(SAMPLE_PLAYBACK))

        progress = await trakt.sync.playback.get("movies")

        assert progress[0].progress == 10.0
        assert progress[0].movie.title == "Batman Begins"
        assert trakt.client._client.request.call_args.args[1] == "/sync/playback/movies"

    @pytest.mark.asyncio
    async def test_playback_set(self, trakt, mock_response):
        trakt.client._client.request = AsyncMock(return_value=mock_response({}))

        await trakt.sync.playback.set(
            PlaybackParams(progress=42.5, movie=ItemRef(ids=IDs(trakt=1)))
        )

        call_args = trakt.client._client.request.call_args
        assert call_args.args == ("POST", "/sync/playback")
        assert call_args.kwargs["json"] == {"progress": 42.5, "movie": {"ids": {"trakt": 1}}}

    @pytest.mark.asyncio
    async def test_playback_remove(self, trakt, mock_response):
        trakt.client._client.request = AsyncMock(return_value=mock_response(None, 204))

        await trakt.sync.playback.remove(13)

        assert trakt.client._client.request.call_args.args == ("DELETE", "/sync/playback/13")
