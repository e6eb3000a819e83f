"""Personalized recommendations."""

from traktkit.api.base import BaseModule, ItemId, page_params
from traktkit.client import TraktClient
from traktkit.models.movies import Movie
from traktkit.models.shows import Show


class RecommendationFeed(BaseModule):
    """Recommended movies and shows under a path prefix.

    Served both at ``/recommendations`` and ``/users/me/recommendations``.
    """

    def __init__(self, client: TraktClient, prefix: str = "/recommendations"):
        super().__init__(client)
        self._prefix = prefix

    @staticmethod
    def _params(
        ignore_collected: bool | None,
        ignore_watchlisted: bool | None,
        page: int | None,
        limit: int | None,
    ) -> dict:
        return {
            "ignore_collected": ignore_collected,
            "ignore_watchlisted": ignore_watchlisted,
            **page_params(page, limit),
        }

    async def movies(
        self,
        ignore_collected: bool | None = None,
        ignore_watchlisted: bool | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> list[Movie]:
        """Movie recommendations for the authenticated user.

        Args:
            ignore_collected: Skip movies already in the collection
            ignore_watchlisted: Skip movies already on the watchlist
            page: Page number
            limit: Results per page
        """
        params = self._params(ignore_collected, ignore_watchlisted, page, limit)
        return await self._get_many(Movie, f"{self._prefix}/movies", params)

    async def shows(
        self,
        ignore_collected: bool | None = None,
        ignore_watchlisted: bool | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> list[Show]:
        params = self._params(ignore_collected, ignore_watchlisted, page, limit)
        return await self._get_many(Show, f"{self._prefix}/shows", params)


class HiddenRecommendations(BaseModule):
    """Hide items from future recommendations."""

    async def movie(self, id: ItemId) -> None:
        await self._call("delete", f"/recommendations/movies/{id}")

    async def show(self, id: ItemId) -> None:
        await self._call("delete", f"/recommendations/shows/{id}")


class RecommendationsModule(RecommendationFeed):
    def __init__(self, client: TraktClient):
        super().__init__(client, "/recommendations")
        self.hide = HiddenRecommendations(client)
