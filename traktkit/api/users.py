"""User profiles, social graph and personal libraries.

Methods taking an ``id`` accept a username slug or ``me`` for the
authenticated user; the ``my_*`` shortcuts always target ``me``.
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from traktkit.api.base import BaseModule, ItemId, extended_params, page_params, segment
from traktkit.api.recommendations import RecommendationFeed
from traktkit.client import TraktClient
from traktkit.models.comments import CommentItem, Like
from traktkit.models.lists import TraktList
from traktkit.models.shared import CommentType, MediaType
from traktkit.models.sync import (
    CollectionItem,
    HistoryItem,
    RatedItem,
    WatchedItem,
    WatchlistItem,
)
from traktkit.models.users import (
    FollowRequest,
    FollowResponse,
    Friend,
    HiddenItem,
    UserProfile,
    UserSettings,
    UserStats,
)

HIDDEN_SECTIONS = frozenset(
    {"calendar", "progress_watched", "progress_collected", "recommendations"}
)


def history_path(
    base: str,
    type: MediaType | str | None = None,
    item_id: ItemId | None = None,
) -> str:
    """History path; the item id is only used together with a type."""
    path = base
    if type:
        path += f"/{segment(type)}"
        if item_id:
            path += f"/{item_id}"
    return path


def history_params(
    start_at: datetime | str | None = None,
    end_at: datetime | str | None = None,
    page: int | None = None,
    limit: int | None = None,
) -> dict[str, Any]:
    return {"start_at": start_at, "end_at": end_at, **page_params(page, limit)}


class UsersModule(BaseModule):
    """Profiles, settings, follow requests, and per-user libraries."""

    def __init__(self, client: TraktClient):
        super().__init__(client)
        self.my_recommendations = RecommendationFeed(client, "/users/me/recommendations")

    async def get(self, id: str, extended: bool = False) -> UserProfile:
        return await self._get_one(UserProfile, f"/users/{id}", extended_params(extended))

    # =========================================================================
    # Authenticated user
    # =========================================================================

    async def profile(self) -> UserProfile:
        return await self._get_one(UserProfile, "/users/me")

    async def update_profile(self, params: Mapping[str, Any]) -> UserProfile:
        return await self._send(UserProfile, "post", "/users/me", dict(params))

    async def settings(self) -> UserSettings:
        """Account, profile and sharing settings of the authenticated user."""
        return await self._get_one(UserSettings, "/users/settings")

    async def update_settings(self, params: Mapping[str, Any]) -> UserSettings:
        return await self._send(UserSettings, "post", "/users/settings", dict(params))

    async def requests(self) -> list[FollowRequest]:
        """Pending follow requests for a private account."""
        return await self._get_many(FollowRequest, "/users/requests")

    async def approve(self, id: int) -> FollowResponse:
        return await self._send(FollowResponse, "post", f"/users/requests/{id}")

    async def deny(self, id: int) -> None:
        await self._call("delete", f"/users/requests/{id}")

    async def hidden(self, section: str) -> list[HiddenItem]:
        """Items hidden from a section.

        Args:
            section: calendar, progress_watched, progress_collected or
                recommendations

        Raises:
            ValueError: Unknown section
        """
        if section not in HIDDEN_SECTIONS:
            raise ValueError(f"Unknown hidden section: {section}")
        return await self._get_many(HiddenItem, f"/users/hidden/{section}")

    async def likes(
        self,
        type: str | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> list[Like]:
        """Comments and lists liked by the authenticated user.

        Args:
            type: ``comments`` or ``lists`` (default: both)
        """
        params = {"type": type, **page_params(page, limit)}
        return await self._get_many(Like, "/users/likes", params)

    async def watched(self, type: MediaType | str) -> list[WatchedItem]:
        return await self._get_many(WatchedItem, f"/users/me/watched/{segment(type)}")

    async def my_collection(self, type: MediaType | str) -> list[CollectionItem]:
        return await self._get_many(CollectionItem, f"/users/me/collection/{segment(type)}")

    async def my_ratings(
        self, type: MediaType | str, rating: int | None = None
    ) -> list[RatedItem]:
        path = f"/users/me/ratings/{segment(type)}"
        if rating:
            path += f"/{rating}"
        return await self._get_many(RatedItem, path)

    async def my_watchlist(self, type: MediaType | str) -> list[WatchlistItem]:
        return await self._get_many(WatchlistItem, f"/users/me/watchlist/{segment(type)}")

    async def my_history(
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
            history_path("/users/me/history", type, item_id),
            history_params(start_at, end_at, page, limit),
        )

    # =========================================================================
    # Any user
    # =========================================================================

    async def collection(self, id: str, type: MediaType | str) -> list[CollectionItem]:
        return await self._get_many(CollectionItem, f"/users/{id}/collection/{segment(type)}")

    async def comments(
        self,
        id: str,
        type: MediaType | str = "all",
        comment_type: CommentType | str = CommentType.ALL,
    ) -> list[CommentItem]:
        return await self._get_many(
            CommentItem, f"/users/{id}/comments/{segment(type)}/{segment(comment_type)}"
        )

    async def lists(self, id: str) -> list[TraktList]:
        return await self._get_many(TraktList, f"/users/{id}/lists")

    async def followers(self, id: str) -> list[Friend]:
        return await self._get_many(Friend, f"/users/{id}/followers")

    async def following(self, id: str) -> list[Friend]:
        return await self._get_many(Friend, f"/users/{id}/following")

    async def friends(self, id: str) -> list[Friend]:
        """Users that follow each other with ``id``."""
        return await self._get_many(Friend, f"/users/{id}/friends")

    async def follow(self, id: str) -> FollowResponse:
        """Follow a user; private accounts must approve the request first."""
        return await self._send(FollowResponse, "post", f"/users/{id}/follow")

    async def unfollow(self, id: str) -> None:
        await self._call("delete", f"/users/{id}/follow")

    async def history(
        self,
        id: str,
        type: MediaType | str | None = None,
        item_id: ItemId | None = None,
        start_at: datetime | str | None = None,
        end_at: datetime | str | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> list[HistoryItem]:
        """Watch history of a user, newest first.

        Args:
            id: Username slug or ``me``
            type: Restrict to movies, shows, seasons or episodes
            item_id: Trakt id of a single item (requires ``type``)
            start_at: Only plays at or after this time
            end_at: Only plays at or before this time
        """
        return await self._get_many(
            HistoryItem,
            history_path(f"/users/{id}/history", type, item_id),
            history_params(start_at, end_at, page, limit),
        )

    async def ratings(
        self,
        id: str,
        type: MediaType | str,
        rating: int | None = None,
    ) -> list[RatedItem]:
        path = f"/users/{id}/ratings/{segment(type)}"
        if rating:
            path += f"/{rating}"
        return await self._get_many(RatedItem, path)

    async def watchlist(self, id: str, type: MediaType | str) -> list[WatchlistItem]:
        return await self._get_many(WatchlistItem, f"/users/{id}/watchlist/{segment(type)}")

    async def stats(self, id: str) -> UserStats:
        return await self._get_one(UserStats, f"/users/{id}/stats")
