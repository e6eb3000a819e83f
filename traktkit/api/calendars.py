"""Calendars of upcoming episodes and movie releases.

``my`` calendars need an authenticated user and only include watched or
collected items; ``all`` calendars cover everything on Trakt.
"""

from datetime import date

from traktkit.api.base import BaseModule
from traktkit.client import TraktClient
from traktkit.models.calendar import CalendarMovie, CalendarShow

DEFAULT_DAYS = 7


def format_start_date(start_date: date | str | None) -> str:
    """Render the calendar start date, defaulting to today (local time)."""
    if start_date is None:
        return date.today().strftime("%Y-%m-%d")
    if isinstance(start_date, str):
        return start_date
    return start_date.strftime("%Y-%m-%d")


class CalendarScope(BaseModule):
    """One calendar scope (``my`` or ``all``)."""

    def __init__(self, client: TraktClient, scope: str):
        super().__init__(client)
        self.scope = scope

    def _path(self, kind: str, start_date: date | str | None, days: int) -> str:
        return f"/calendars/{self.scope}/{kind}/{format_start_date(start_date)}/{days}"

    async def shows(
        self, start_date: date | str | None = None, days: int = DEFAULT_DAYS
    ) -> list[CalendarShow]:
        """Episodes airing from ``start_date`` over ``days`` days.

        Args:
            start_date: First day, ``date`` or YYYY-MM-DD (default: today)
            days: Number of days to cover
        """
        return await self._get_many(CalendarShow, self._path("shows", start_date, days))

    async def new_shows(
        self, start_date: date | str | None = None, days: int = DEFAULT_DAYS
    ) -> list[CalendarShow]:
        """Series premieres only."""
        return await self._get_many(CalendarShow, self._path("shows/new", start_date, days))

    async def season_premieres(
        self, start_date: date | str | None = None, days: int = DEFAULT_DAYS
    ) -> list[CalendarShow]:
        return await self._get_many(
            CalendarShow, self._path("shows/premieres", start_date, days)
        )

    async def finales(
        self, start_date: date | str | None = None, days: int = DEFAULT_DAYS
    ) -> list[CalendarShow]:
        return await self._get_many(CalendarShow, self._path("shows/finales", start_date, days))

    async def movies(
        self, start_date: date | str | None = None, days: int = DEFAULT_DAYS
    ) -> list[CalendarMovie]:
        return await self._get_many(CalendarMovie, self._path("movies", start_date, days))

    async def streaming(
        self, start_date: date | str | None = None, days: int = DEFAULT_DAYS
    ) -> list[CalendarMovie]:
        return await self._get_many(CalendarMovie, self._path("streaming", start_date, days))

    async def dvd(
        self, start_date: date | str | None = None, days: int = DEFAULT_DAYS
    ) -> list[CalendarMovie]:
        return await self._get_many(CalendarMovie, self._path("dvd", start_date, days))


class CalendarsModule:
    def __init__(self, client: TraktClient):
        self.my = CalendarScope(client, "my")
        self.all = CalendarScope(client, "all")
