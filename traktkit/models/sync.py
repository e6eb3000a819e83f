"""Sync models: collection, watched, ratings, watchlist, history, playback."""

from datetime import datetime

from pydantic import Field

from traktkit.models.movies import Movie
from traktkit.models.shared import IDs, ItemRef, TraktModel
from traktkit.models.shows import Episode, Season, Show


# =============================================================================
# Request bodies
# =============================================================================


class SyncEpisode(TraktModel):
    number: int
    collected_at: datetime | None = None
    watched_at: datetime | None = None
    rated_at: datetime | None = None
    rating: int | None = None


class SyncSeason(TraktModel):
    number: int
    episodes: list[SyncEpisode] | None = None
    collected_at: datetime | None = None
    watched_at: datetime | None = None
    rated_at: datetime | None = None
    rating: int | None = None


class SyncItem(TraktModel):
    """Item sent to (or reported back by) a sync endpoint."""

    ids: IDs = Field(default_factory=IDs)
    title: str | None = None
    year: int | None = None
    collected_at: datetime | None = None
    watched_at: datetime | None = None
    rated_at: datetime | None = None
    rating: int | None = None
    seasons: list[SyncSeason] | None = None


class SyncParams(TraktModel):
    movies: list[SyncItem] | None = None
    shows: list[SyncItem] | None = None
    seasons: list[SyncItem] | None = None
    episodes: list[SyncItem] | None = None
    ids: list[int] | None = None


class PlaybackParams(TraktModel):
    progress: float
    movie: ItemRef | None = None
    episode: ItemRef | None = None


# =============================================================================
# Responses
# =============================================================================


class SyncCounts(TraktModel):
    movies: int = 0
    shows: int = 0
    seasons: int = 0
    episodes: int = 0


class SyncResponse(TraktModel):
    """Outcome of an add/remove sync call."""

    added: SyncCounts | None = None
    deleted: SyncCounts | None = None
    existing: SyncCounts | None = None
    updated: SyncCounts | None = None
    not_found: SyncParams | None = None


class CollectedEpisode(TraktModel):
    number: int
    collected_at: datetime | None = None
    metadata: dict | None = None


class CollectedSeason(TraktModel):
    number: int
    episodes: list[CollectedEpisode] = Field(default_factory=list)


class CollectionItem(TraktModel):
    collected_at: datetime | None = None
    updated_at: datetime | None = None
    last_collected_at: datetime | None = None
    last_updated_at: datetime | None = None
    movie: Movie | None = None
    show: Show | None = None
    seasons: list[CollectedSeason] | None = None


class WatchedEpisode(TraktModel):
    number: int
    plays: int = 0
    last_watched_at: datetime | None = None


class WatchedSeason(TraktModel):
    number: int
    episodes: list[WatchedEpisode] = Field(default_factory=list)


class WatchedItem(TraktModel):
    plays: int = 0
    last_watched_at: datetime | None = None
    last_updated_at: datetime | None = None
    reset_at: datetime | None = None
    movie: Movie | None = None
    show: Show | None = None
    seasons: list[WatchedSeason] | None = None


class RatedItem(TraktModel):
    rated_at: datetime
    rating: int
    type: str | None = None
    movie: Movie | None = None
    show: Show | None = None
    season: Season | None = None
    episode: Episode | None = None


class WatchlistItem(TraktModel):
    rank: int | None = None
    id: int | None = None
    listed_at: datetime
    notes: str | None = None
    type: str | None = None
    movie: Movie | None = None
    show: Show | None = None
    season: Season | None = None
    episode: Episode | None = None


class HistoryItem(TraktModel):
    id: int
    watched_at: datetime
    action: str
    type: str | None = None
    movie: Movie | None = None
    show: Show | None = None
    season: Season | None = None
    episode: Episode | None = None


class PlaybackProgress(TraktModel):
    id: int
    progress: float
    paused_at: datetime
    type: str | None = None
    movie: Movie | None = None
    show: Show | None = None
    episode: Episode | None = None
