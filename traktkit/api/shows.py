"""Shows endpoints, including seasons and episodes."""

from traktkit.api.base import BaseModule, ItemId, extended_params, page_params, segment
from traktkit.models.comments import Comment
from traktkit.models.lists import TraktList
from traktkit.models.movies import Alias, People
from traktkit.models.shared import CommentSort, ListSort, ListType, Period, RatingDistribution
from traktkit.models.shows import (
    AnticipatedShow,
    Episode,
    PlayedShow,
    Season,
    Show,
    ShowStats,
    ShowTranslation,
    ShowUpdate,
    TrendingShow,
    WatchedShow,
)
from traktkit.models.users import User


class ShowsModule(BaseModule):
    """Show discovery and details.

    Seasons are addressed by number, episodes by season and episode number.
    """

    async def get(self, id: ItemId, extended: bool = False) -> Show:
        return await self._get_one(Show, f"/shows/{id}", extended_params(extended))

    # =========================================================================
    # Charts
    # =========================================================================

    async def trending(
        self, page: int | None = None, limit: int | None = None
    ) -> list[TrendingShow]:
        return await self._get_many(TrendingShow, "/shows/trending", page_params(page, limit))

    async def popular(self, page: int | None = None, limit: int | None = None) -> list[Show]:
        return await self._get_many(Show, "/shows/popular", page_params(page, limit))

    async def anticipated(
        self, page: int | None = None, limit: int | None = None
    ) -> list[AnticipatedShow]:
        return await self._get_many(
            AnticipatedShow, "/shows/anticipated", page_params(page, limit)
        )

    async def watched(
        self,
        period: Period | str = Period.WEEKLY,
        page: int | None = None,
        limit: int | None = None,
    ) -> list[WatchedShow]:
        return await self._get_many(
            WatchedShow, f"/shows/watched/{segment(period)}", page_params(page, limit)
        )

    async def played(
        self,
        period: Period | str = Period.WEEKLY,
        page: int | None = None,
        limit: int | None = None,
    ) -> list[PlayedShow]:
        return await self._get_many(
            PlayedShow, f"/shows/played/{segment(period)}", page_params(page, limit)
        )

    async def updates(
        self,
        start_date: str,
        page: int | None = None,
        limit: int | None = None,
    ) -> list[ShowUpdate]:
        params = {"start_date": start_date, **page_params(page, limit)}
        return await self._get_many(ShowUpdate, "/shows/updates", params)

    # =========================================================================
    # Per-show data
    # =========================================================================

    async def aliases(self, id: ItemId) -> list[Alias]:
        return await self._get_many(Alias, f"/shows/{id}/aliases")

    async def translations(self, id: ItemId, language: str | None = None) -> list[ShowTranslation]:
        path = f"/shows/{id}/translations"
        if language:
            path += f"/{language}"
        return await self._get_many(ShowTranslation, path)

    async def comments(
        self, id: ItemId, sort: CommentSort | str = CommentSort.NEWEST
    ) -> list[Comment]:
        return await self._get_many(Comment, f"/shows/{id}/comments/{segment(sort)}")

    async def lists(
        self,
        id: ItemId,
        type: ListType | str = ListType.PERSONAL,
        sort: ListSort | str = ListSort.POPULAR,
    ) -> list[TraktList]:
        return await self._get_many(
            TraktList, f"/shows/{id}/lists/{segment(type)}/{segment(sort)}"
        )

    async def people(self, id: ItemId) -> People:
        return await self._get_one(People, f"/shows/{id}/people")

    async def ratings(self, id: ItemId) -> RatingDistribution:
        return await self._get_one(RatingDistribution, f"/shows/{id}/ratings")

    async def related(self, id: ItemId) -> list[Show]:
        return await self._get_many(Show, f"/shows/{id}/related")

    async def stats(self, id: ItemId) -> ShowStats:
        return await self._get_one(ShowStats, f"/shows/{id}/stats")

    async def watching(self, id: ItemId) -> list[User]:
        return await self._get_many(User, f"/shows/{id}/watching")

    # =========================================================================
    # Seasons and episodes
    # =========================================================================

    async def seasons(self, id: ItemId) -> list[Season]:
        """All seasons of a show, specials included as season 0."""
        return await self._get_many(Season, f"/shows/{id}/seasons")

    async def season(self, id: ItemId, season: int, extended: bool = False) -> Season:
        """Summary of a single season."""
        return await self._get_one(
            Season, f"/shows/{id}/seasons/{season}/info", extended_params(extended)
        )

    async def episodes(
        self,
        id: ItemId,
        season: int,
        translations: str | None = None,
    ) -> list[Episode]:
        """Episodes of a season.

        Args:
            id: Show identifier
            season: Season number
            translations: Two-letter language code, or ``all``, to include
                translated titles and overviews
        """
        return await self._get_many(
            Episode, f"/shows/{id}/seasons/{season}", {"translations": translations}
        )

    async def episode(
        self,
        id: ItemId,
        season: int,
        episode: int,
        extended: bool = False,
    ) -> Episode:
        return await self._get_one(
            Episode,
            f"/shows/{id}/seasons/{season}/episodes/{episode}",
            extended_params(extended),
        )
