"""Personal and official lists."""

from collections.abc import Mapping
from typing import Any

from traktkit.api.base import BaseModule, ItemId, extended_params, page_params, segment
from traktkit.client import TraktClient
from traktkit.models.comments import Comment
from traktkit.models.lists import (
    CreateListParams,
    ListItem,
    ListItemResponse,
    ListItemsParams,
    TraktList,
    TrendingList,
    UpdateListParams,
)
from traktkit.models.shared import CommentSort

ItemsBody = ListItemsParams | Mapping[str, Any]


def _items_body(params: ItemsBody) -> ListItemsParams | dict[str, Any]:
    if isinstance(params, ListItemsParams):
        return params
    return dict(params)


class ListItemManagement(BaseModule):
    """Add, remove and reorder items of a list owned by the current user."""

    async def add(self, id: ItemId, params: ItemsBody) -> ListItemResponse:
        return await self._send(
            ListItemResponse, "post", f"/lists/{id}/items", _items_body(params)
        )

    async def remove(self, id: ItemId, params: ItemsBody) -> ListItemResponse:
        return await self._send(
            ListItemResponse, "post", f"/lists/{id}/items/remove", _items_body(params)
        )

    async def reorder(self, id: ItemId, params: ItemsBody) -> ListItemResponse:
        """Reorder items; each entry carries its new ``rank``."""
        return await self._send(
            ListItemResponse, "post", f"/lists/{id}/items/reorder", _items_body(params)
        )


class ListsModule(BaseModule):
    """Browse, create and edit lists.

    Example:
        created = await trakt.lists.create(CreateListParams(name="Star Wars"))
        await trakt.lists.item_management.add(
            created.ids.trakt,
            ListItemsParams(movies=[ListItemEntry(ids=IDs(imdb="tt0076759"))]),
        )
    """

    def __init__(self, client: TraktClient):
        super().__init__(client)
        self.item_management = ListItemManagement(client)

    async def trending(
        self, page: int | None = None, limit: int | None = None
    ) -> list[TrendingList]:
        return await self._get_many(TrendingList, "/lists/trending", page_params(page, limit))

    async def popular(
        self, page: int | None = None, limit: int | None = None
    ) -> list[TrendingList]:
        return await self._get_many(TrendingList, "/lists/popular", page_params(page, limit))

    async def get(self, id: ItemId) -> TraktList:
        return await self._get_one(TraktList, f"/lists/{id}")

    async def items(
        self,
        id: ItemId,
        type: str | None = None,
        extended: bool = False,
        page: int | None = None,
        limit: int | None = None,
    ) -> list[ListItem]:
        """Items of a list.

        Args:
            id: List Trakt id or slug
            type: Restrict to movie, show, season, episode or person
                (comma separated for several)
            extended: Include full item details
        """
        params = {"type": type, **extended_params(extended), **page_params(page, limit)}
        return await self._get_many(ListItem, f"/lists/{id}/items", params)

    async def comments(
        self, id: ItemId, sort: CommentSort | str = CommentSort.NEWEST
    ) -> list[Comment]:
        return await self._get_many(Comment, f"/lists/{id}/comments/{segment(sort)}")

    async def create(self, params: CreateListParams | Mapping[str, Any]) -> TraktList:
        """Create a personal list for the current user."""
        body = params if isinstance(params, CreateListParams) else dict(params)
        return await self._send(TraktList, "post", "/lists", body)

    async def update(
        self, id: ItemId, params: UpdateListParams | Mapping[str, Any]
    ) -> TraktList:
        body = params if isinstance(params, UpdateListParams) else dict(params)
        return await self._send(TraktList, "put", f"/lists/{id}", body)

    async def delete(self, id: ItemId) -> None:
        await self._call("delete", f"/lists/{id}")

    async def like(self, id: ItemId) -> None:
        await self._call("post", f"/lists/{id}/like")

    async def unlike(self, id: ItemId) -> None:
        await self._call("delete", f"/lists/{id}/like")
