"""Show, season and episode models."""

from datetime import datetime

from traktkit.models.shared import IDs, Stats, TraktModel


class Airs(TraktModel):
    """Regular air slot of a show."""

    day: str | None = None
    time: str | None = None
    timezone: str | None = None


class Show(TraktModel):
    """Show summary; extended fields are filled with ``extended=full``."""

    title: str
    year: int | None = None
    ids: IDs

    overview: str | None = None
    first_aired: datetime | None = None
    airs: Airs | None = None
    runtime: int | None = None
    certification: str | None = None
    network: str | None = None
    country: str | None = None
    trailer: str | None = None
    homepage: str | None = None
    status: str | None = None
    rating: float | None = None
    votes: int | None = None
    comment_count: int | None = None
    updated_at: datetime | None = None
    language: str | None = None
    available_translations: list[str] | None = None
    genres: list[str] | None = None
    aired_episodes: int | None = None


class Episode(TraktModel):
    season: int
    number: int
    title: str | None = None
    ids: IDs

    number_abs: int | None = None
    overview: str | None = None
    rating: float | None = None
    votes: int | None = None
    comment_count: int | None = None
    first_aired: datetime | None = None
    updated_at: datetime | None = None
    available_translations: list[str] | None = None
    runtime: int | None = None


class Season(TraktModel):
    number: int
    ids: IDs

    rating: float | None = None
    votes: int | None = None
    episode_count: int | None = None
    aired_episodes: int | None = None
    title: str | None = None
    overview: str | None = None
    first_aired: datetime | None = None
    network: str | None = None
    episodes: list[Episode] | None = None


class TrendingShow(TraktModel):
    watchers: int = 0
    show: Show


class AnticipatedShow(TraktModel):
    list_count: int = 0
    show: Show


class WatchedShow(TraktModel):
    """Entry of the most watched/played charts."""

    watcher_count: int = 0
    play_count: int = 0
    collected_count: int = 0
    collector_count: int | None = None
    show: Show


PlayedShow = WatchedShow


class ShowUpdate(TraktModel):
    updated_at: datetime
    show: Show


class ShowTranslation(TraktModel):
    title: str | None = None
    overview: str | None = None
    language: str
    country: str | None = None


class ShowStats(Stats):
    collected_episodes: int | None = None
