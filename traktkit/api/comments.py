"""Comments: shouts and reviews on movies, shows, seasons, episodes and lists."""

from collections.abc import Mapping
from typing import Any

from traktkit.api.base import BaseModule, page_params, segment
from traktkit.models.comments import (
    Comment,
    CommentItem,
    CommentPostParams,
    CommentReplyParams,
    CommentUpdateParams,
)
from traktkit.models.shared import CommentType


def feed_params(
    comment_type: CommentType | str | None,
    type: str | None,
    include_replies: bool | None,
    page: int | None,
    limit: int | None,
) -> dict[str, Any]:
    return {
        "comment_type": segment(comment_type) if comment_type else None,
        "type": type,
        "include_replies": include_replies,
        **page_params(page, limit),
    }


class CommentsModule(BaseModule):
    async def get(self, id: int) -> Comment:
        return await self._get_one(Comment, f"/comments/{id}")

    async def create(self, params: CommentPostParams | Mapping[str, Any]) -> Comment:
        """Post a comment on an item.

        Trakt rejects comments shorter than five words.
        """
        body = params if isinstance(params, CommentPostParams) else dict(params)
        return await self._send(Comment, "post", "/comments", body)

    async def update(
        self, id: int, params: CommentUpdateParams | Mapping[str, Any]
    ) -> Comment:
        body = params if isinstance(params, CommentUpdateParams) else dict(params)
        return await self._send(Comment, "put", f"/comments/{id}", body)

    async def delete(self, id: int) -> None:
        await self._call("delete", f"/comments/{id}")

    async def replies(
        self, id: int, page: int | None = None, limit: int | None = None
    ) -> list[Comment]:
        return await self._get_many(Comment, f"/comments/{id}/replies", page_params(page, limit))

    async def reply(
        self, id: int, params: CommentReplyParams | Mapping[str, Any]
    ) -> Comment:
        body = params if isinstance(params, CommentReplyParams) else dict(params)
        return await self._send(Comment, "post", f"/comments/{id}/replies", body)

    async def like(self, id: int) -> None:
        await self._call("post", f"/comments/{id}/like")

    async def unlike(self, id: int) -> None:
        await self._call("delete", f"/comments/{id}/like")

    # =========================================================================
    # Feeds
    # =========================================================================

    async def trending(
        self,
        comment_type: CommentType | str | None = None,
        type: str | None = None,
        include_replies: bool | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> list[CommentItem]:
        """Most active comments in the last 24 hours.

        Args:
            comment_type: all, reviews or shouts
            type: Item type (movies, shows, seasons, episodes, lists)
            include_replies: Include replies in the feed
        """
        params = feed_params(comment_type, type, include_replies, page, limit)
        return await self._get_many(CommentItem, "/comments/trending", params)

    async def recent(
        self,
        comment_type: CommentType | str | None = None,
        type: str | None = None,
        include_replies: bool | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> list[CommentItem]:
        params = feed_params(comment_type, type, include_replies, page, limit)
        return await self._get_many(CommentItem, "/comments/recent", params)

    async def updates(
        self,
        comment_type: CommentType | str | None = None,
        type: str | None = None,
        include_replies: bool | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> list[CommentItem]:
        """Recently updated comments."""
        params = feed_params(comment_type, type, include_replies, page, limit)
        return await self._get_many(CommentItem, "/comments/updates", params)
