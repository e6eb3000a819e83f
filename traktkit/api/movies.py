"""Movies endpoints: charts, details and per-movie metadata."""

from traktkit.api.base import BaseModule, ItemId, extended_params, page_params, segment
from traktkit.models.comments import Comment
from traktkit.models.lists import TraktList
from traktkit.models.metadata import Certification, Genre, Language
from traktkit.models.movies import (
    Alias,
    AnticipatedMovie,
    BoxOfficeMovie,
    Movie,
    MovieRelease,
    MovieTranslation,
    MovieUpdate,
    People,
    PlayedMovie,
    Studio,
    TrendingMovie,
    Video,
    WatchedMovie,
)
from traktkit.models.shared import (
    CommentSort,
    ListSort,
    ListType,
    Period,
    RatingDistribution,
    Stats,
)
from traktkit.models.users import User


class MoviesModule(BaseModule):
    """Movie discovery, details, ratings, comments and related data.

    Example:
        movie = await trakt.movies.get("tron-legacy-2010", extended=True)
        trending = await trakt.movies.trending(limit=10)
    """

    async def get(self, id: ItemId, extended: bool = False) -> Movie:
        """Get a movie by Trakt id, slug or IMDb id.

        Args:
            id: Movie identifier
            extended: Request ``extended=full`` details (overview, runtime, ...)
        """
        return await self._get_one(Movie, f"/movies/{id}", extended_params(extended))

    # =========================================================================
    # Charts
    # =========================================================================

    async def trending(
        self, page: int | None = None, limit: int | None = None
    ) -> list[TrendingMovie]:
        """Movies being watched right now, with watcher counts."""
        return await self._get_many(TrendingMovie, "/movies/trending", page_params(page, limit))

    async def popular(self, page: int | None = None, limit: int | None = None) -> list[Movie]:
        return await self._get_many(Movie, "/movies/popular", page_params(page, limit))

    async def anticipated(
        self, page: int | None = None, limit: int | None = None
    ) -> list[AnticipatedMovie]:
        return await self._get_many(
            AnticipatedMovie, "/movies/anticipated", page_params(page, limit)
        )

    async def boxoffice(
        self, page: int | None = None, limit: int | None = None
    ) -> list[BoxOfficeMovie]:
        """Top 10 grossing movies in the U.S. box office last weekend."""
        return await self._get_many(BoxOfficeMovie, "/movies/boxoffice", page_params(page, limit))

    async def watched(
        self,
        period: Period | str = Period.WEEKLY,
        page: int | None = None,
        limit: int | None = None,
    ) -> list[WatchedMovie]:
        """Most watched movies (unique users) in a time period."""
        return await self._get_many(
            WatchedMovie, f"/movies/watched/{segment(period)}", page_params(page, limit)
        )

    async def played(
        self,
        period: Period | str = Period.WEEKLY,
        page: int | None = None,
        limit: int | None = None,
    ) -> list[PlayedMovie]:
        """Most played movies (total plays) in a time period."""
        return await self._get_many(
            PlayedMovie, f"/movies/played/{segment(period)}", page_params(page, limit)
        )

    async def updates(
        self,
        start_date: str,
        page: int | None = None,
        limit: int | None = None,
    ) -> list[MovieUpdate]:
        """Movies updated since ``start_date`` (YYYY-MM-DD)."""
        params = {"start_date": start_date, **page_params(page, limit)}
        return await self._get_many(MovieUpdate, "/movies/updates", params)

    # =========================================================================
    # Per-movie data
    # =========================================================================

    async def aliases(self, id: ItemId) -> list[Alias]:
        return await self._get_many(Alias, f"/movies/{id}/aliases")

    async def releases(self, id: ItemId, country: str | None = None) -> list[MovieRelease]:
        """Release dates, optionally for a single two-letter country code."""
        path = f"/movies/{id}/releases"
        if country:
            path += f"/{country}"
        return await self._get_many(MovieRelease, path)

    async def translations(self, id: ItemId, language: str | None = None) -> list[MovieTranslation]:
        path = f"/movies/{id}/translations"
        if language:
            path += f"/{language}"
        return await self._get_many(MovieTranslation, path)

    async def comments(
        self, id: ItemId, sort: CommentSort | str = CommentSort.NEWEST
    ) -> list[Comment]:
        return await self._get_many(Comment, f"/movies/{id}/comments/{segment(sort)}")

    async def lists(
        self,
        id: ItemId,
        type: ListType | str = ListType.PERSONAL,
        sort: ListSort | str = ListSort.POPULAR,
    ) -> list[TraktList]:
        """Lists that contain this movie."""
        return await self._get_many(
            TraktList, f"/movies/{id}/lists/{segment(type)}/{segment(sort)}"
        )

    async def people(self, id: ItemId) -> People:
        return await self._get_one(People, f"/movies/{id}/people")

    async def ratings(self, id: ItemId) -> RatingDistribution:
        return await self._get_one(RatingDistribution, f"/movies/{id}/ratings")

    async def related(self, id: ItemId) -> list[Movie]:
        return await self._get_many(Movie, f"/movies/{id}/related")

    async def similar(
        self, id: ItemId, page: int | None = None, limit: int | None = None
    ) -> list[Movie]:
        return await self._get_many(Movie, f"/movies/{id}/similar", page_params(page, limit))

    async def stats(self, id: ItemId) -> Stats:
        return await self._get_one(Stats, f"/movies/{id}/stats")

    async def studios(self, id: ItemId) -> list[Studio]:
        return await self._get_many(Studio, f"/movies/{id}/studios")

    async def watching(self, id: ItemId) -> list[User]:
        """Users watching this movie right now."""
        return await self._get_many(User, f"/movies/{id}/watching")

    async def videos(self, id: ItemId) -> list[Video]:
        return await self._get_many(Video, f"/movies/{id}/videos")

    async def certifications(self, id: ItemId) -> list[Certification]:
        return await self._get_many(Certification, f"/movies/{id}/certifications")

    async def languages(self, id: ItemId) -> list[Language]:
        return await self._get_many(Language, f"/movies/{id}/languages")

    async def genres(self, id: ItemId) -> list[Genre]:
        return await self._get_many(Genre, f"/movies/{id}/genres")
