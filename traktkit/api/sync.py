"""Sync endpoints for the authenticated user's library.

Each section (collection, watched, ratings, watchlist, history) supports
``get``, ``add`` and ``remove``. ``add``/``remove`` take ``SyncParams`` or a
plain mapping of the same shape and report counts in ``SyncResponse``.

Example:
    await trakt.sync.watchlist.add(
        SyncParams(movies=[SyncItem(ids=IDs(imdb="tt1104001"))])
    )
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from traktkit.api.base import BaseModule, ItemId, page_params, segment
from traktkit.api.users import history_params, history_path
from traktkit.client import TraktClient
from traktkit.models.shared import MediaType
from traktkit.models.sync import (
    CollectionItem,
    HistoryItem,
    PlaybackParams,
    PlaybackProgress,
    RatedItem,
    SyncParams,
    SyncResponse,
    WatchedItem,
    WatchlistItem,
)

SyncBody = SyncParams | Mapping[str, Any]


def _body(params: SyncBody) -> SyncParams | dict[str, Any]:
    if isinstance(params, SyncParams):
        return params
    return dict(params)


class SyncSection(BaseModule):
    """``add``/``remove`` for a section posting to ``path`` and ``path/remove``."""

    path = ""

    async def add(self, params: SyncBody) -> SyncResponse:
        return await self._send(SyncResponse, "post", self.path, _body(params))

    async def remove(self, params: SyncBody) -> SyncResponse:
        return await self._send(SyncResponse, "post", f"{self.path}/remove", _body(params))


class SyncCollection(SyncSection):
    path = "/sync/collection"

    async def get(self, type: MediaType | str) -> list[CollectionItem]:
        return await self._get_many(CollectionItem, f"/sync/collection/{segment(type)}")


class SyncWatched(SyncSection):
    """Watched state; marking and unmarking go through the history."""

    path = "/sync/history"

    async def get(self, type: MediaType | str) -> list[WatchedItem]:
        return await self._get_many(WatchedItem, f"/sync/watched/{segment(type)}")


class SyncRatings(SyncSection):
    path = "/sync/ratings"

    async def get(self, type: MediaType | str, rating: int | None = None) -> list[RatedItem]:
        path = f"/sync/ratings/{segment(type)}"
        if rating:
            path += f"/{rating}"
        return await self._get_many(RatedItem, path)


class SyncWatchlist(SyncSection):
    path = "/sync/watchlist"

    async def get(self, type: MediaType | str) -> list[WatchlistItem]:
        return await self._get_many(WatchlistItem, f"/sync/watchlist/{segment(type)}")


class SyncHistory(SyncSection):
    path = "/sync/history"

    async def get(
        self,
        type: MediaType | str | None = None,
        item_id: ItemId | None = None,
        start_at: datetime | str | None = None,
        end_at: datetime | str | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> list[HistoryItem]:
        return await self._get_many(
            HistoryItem,
            history_path("/sync/history", type, item_id),
            history_params(start_at, end_at, page, limit),
        )


class SyncPlayback(BaseModule):
    """Paused playback progress for resuming movies and episodes."""

    async def get(
        self,
        type: MediaType | str | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> list[PlaybackProgress]:
        path = "/sync/playback"
        if type:
            path += f"/{segment(type)}"
        return await self._get_many(PlaybackProgress, path, page_params(page, limit))

    async def set(self, params: PlaybackParams | Mapping[str, Any]) -> SyncResponse:
        body = params if isinstance(params, PlaybackParams) else dict(params)
        return await self._send(SyncResponse, "post", "/sync/playback", body)

    async def remove(self, id: int) -> None:
        await self._call("delete", f"/sync/playback/{id}")


class SyncModule:
    def __init__(self, client: TraktClient):
        self.collection = SyncCollection(client)
        self.watched = SyncWatched(client)
        self.ratings = SyncRatings(client)
        self.watchlist = SyncWatchlist(client)
        self.history = SyncHistory(client)
        self.playback = SyncPlayback(client)
