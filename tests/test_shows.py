"""Tests for the shows module."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from traktkit import Trakt
from traktkit.models import Period

# =============================================================================
# Sample API Responses
# =============================================================================

SAMPLE_SHOW = {
    "title": "Breaking Bad",
    "year": 2008,
    "ids": {
        "trakt": 1,
        "slug": "breaking-bad",
        "tvdb": 81189,
        "imdb": "tt0903747",
        "tmdb": 1396,
    },
}

SAMPLE_SHOW_EXTENDED = {
    **SAMPLE_SHOW,
    "overview": "Breaking Bad is an American crime drama...",
    "first_aired": "2008-01-20T02:00:00.000Z",
    "airs": {"day": "Sunday", "time": "21:00", "timezone": "America/New_York"},
    "runtime": 60,
    "certification": "TV-MA",
    "network": "AMC",
    "country": "us",
    "status": "ended",
    "rating": 9.3,
    "votes": 52000,
    "genres": ["drama", "crime"],
    "aired_episodes": 62,
}

SAMPLE_SEASONS = [
    {"number": 0, "ids": {"trakt": 1, "tvdb": 439371, "tmdb": 3577}},
    {"number": 1, "ids": {"trakt": 2, "tvdb": 30272, "tmdb": 3572}},
]

SAMPLE_EPISODE = {
    "season": 1,
    "number": 1,
    "title": "Pilot",
    "ids": {"trakt": 16, "tvdb": 349232, "imdb": "tt0959621", "tmdb": 62085},
}


class TestShowsModule:
    """Tests for ShowsModule."""

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
    async def test_get_extended(self, trakt, mock_response):
        trakt.client._client.request = AsyncMock(return_value=mock_response(SAMPLE_SHOW_EXTENDED))

        show = await trakt.shows.get("breaking-bad", extended=True)

        assert show.title == "Breaking Bad"
        assert show.airs.day == "Sunday"
        assert show.first_aired.year == 2008
        assert show.aired_episodes == 62
        call_args = trakt.client._client.request.call_args
        assert call_args.args == ("GET", "/shows/breaking-bad")
        assert call_args.kwargs["params"] == {"extended": "full"}

    @pytest.mark.asyncio
    async def test_trending(self, trakt, mock_response):
        trakt.client._client.request = AsyncMock(
            return_value=mock_response([{"watchers": 35, "show": SAMPLE_SHOW}])
        )

        trending = await trakt.shows.trending()

        assert trending[0].watchers == 35
        assert trending[0].show.ids.tvdb == 81189

    @pytest.mark.asyncio
    async def test_anticipated(self, trakt, mock_response):
        trakt.client._client.request = AsyncMock(
            return_value=mock_response([{"list_count": 5383, "show": SAMPLE_SHOW}])
        )

        anticipated = await trakt.shows.anticipated(limit=1)

        assert anticipated[0].list_count == 5383
        assert trakt.client._client.request.call_args.kwargs["params"] == {"limit": 1}

    @pytest.mark.asyncio
    async def test_watched_period(self, trakt, mock_response):
        trakt.client._client.request = AsyncMock(
            return_value=mock_response(
                [
                    {
                        "watcher_count": 203742,
                        "play_count": 8784154,
                        "collected_count": 783611,
                        "collector_count": 71556,
                        "show": SAMPLE_SHOW,
                    }
                ]
            )
        )

        watched = await trakt.shows.watched(Period.ALL)

        assert watched[0].collector_count == 71556
        assert trakt.client._client.request.call_args.args[1] == "/shows/watched/all"

    @pytest.mark.asyncio
    async def test_lists_with_type_and_sort(self, trakt, mock_response):
        trakt.client._client.request = AsyncMock(return_value=mock_response([]))

        await trakt.shows.lists("breaking-bad", type="official", sort="likes")

        assert trakt.client._client.request.call_args.args[1] == (
            "/shows/breaking-bad/lists/official/likes"
        )

    @pytest.mark.asyncio
    async def test_comments_default_sort(self, trakt, mock_response):
        trakt.client._client.request = AsyncMock(return_value=mock_response([]))

        await trakt.shows.comments("breaking-bad")

        assert trakt.client._client.request.call_args.args[1] == (
            "/shows/breaking-bad/comments/newest"
        )

    @pytest.mark.asyncio
    async def test_stats(self, trakt, mock_response):
        trakt.client._client.request = AsyncMock(
            return_value=mock_response(
                {
                    "watchers": 265955,
                    "plays": 13401090,
                    "collectors": 121161,
                    "collected_episodes": 3421456,
                    "comments": 255,
                    "lists": 118750,
                    "votes": 62574,
                }
            )
        )

        stats = await trakt.shows.stats("breaking-bad")

        assert stats.collected_episodes == 3421456
        assert stats.watchers == 265955

    @pytest.mark.asyncio
    async def test_seasons(self, trakt, mock_response):
        trakt.client._client.request = AsyncMock(return_value=mock_response(SAMPLE_SEASONS))

        seasons = await trakt.shows.seasons("breaking-bad")

        assert [s.number for s in seasons] == [0, 1]
        assert trakt.client._client.request.call_args.args[1] == "/shows/breaking-bad/seasons"

    @pytest.mark.asyncio
    async def test_season_info(self, trakt, mock_response):
        trakt.client._client.request = AsyncMock(
            return_value=mock_response({**SAMPLE_SEASONS[1], "episode_count": 7})
        )

        season = await trakt.shows.season("breaking-bad", 1)

        assert season.episode_count == 7
        call_args = trakt.client._client.request.call_args
        assert call_args.args[1] == "/shows/breaking-bad/seasons/1/info"
        assert call_args.kwargs["params"] is None

    @pytest.mark.asyncio
    async def test_episodes_with_translations(self, trakt, mock_response):
        trakt.client._client.request = AsyncMock(return_value=mock_response([SAMPLE_EPISODE]))

        episodes = await trakt.shows.episodes("breaking-bad", 1, translations="es")

        assert episodes[0].title == "Pilot"
        call_args = trakt.client._client.request.call_args
        assert call_args.args[1] == "/shows/breaking-bad/seasons/1"
        assert call_args.kwargs["params"] == {"translations": "es"}

    @pytest.mark.asyncio
    async def test_episode(self, trakt, mock_response):
        trakt.client._client.request = AsyncMock(return_value=mock_response(SAMPLE_EPISODE))

        episode = await trakt.shows.episode("breaking-bad", 1, 1, extended=True)

        assert episode.ids.imdb == "tt0959621"
        call_args = trakt.client._client.request.call_args
        assert call_args.args[1] == "/shows/breaking-bad/seasons/1/episodes/1"
        assert call_args.kwargs["params"] == {"extended": "full"}
