"""Search endpoints: text query and external id lookup."""

import urllib.parse

from traktkit.api.base import BaseModule, page_params, segment
from traktkit.models.search import IdType, SearchResult, SearchType


class SearchModule(BaseModule):
    async def text(
        self,
        query: str,
        type: SearchType | str = SearchType.MOVIE,
        year: int | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> list[SearchResult]:
        """Search by title, name or other text fields.

        Args:
            query: Search text
            type: Item type, or several comma separated (``movie,show``)
            year: Restrict results to a release year
            page: Page number
            limit: Results per page

        Returns:
            Results ordered by relevance
        """
        params = {"query": query, "year": year, **page_params(page, limit)}
        return await self._get_many(SearchResult, f"/search/{segment(type)}", params)

    async def id(
        self,
        id_type: IdType | str,
        id: str | int,
        type: SearchType | str | None = None,
        page: int | None = None,
        limit: int | None = None,
    ) -> list[SearchResult]:
        """Look up items by an external id (IMDb, TMDB, TVDB) or a Trakt id.

        Several item types can share an id (a TMDB id is not unique across
        movies and shows), so narrow it with ``type``.
        """
        encoded = urllib.parse.quote(str(id), safe="")
        params = {"type": segment(type) if type else None, **page_params(page, limit)}
        return await self._get_many(
            SearchResult, f"/search/{segment(id_type)}/{encoded}", params
        )
