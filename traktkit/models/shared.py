"""Shared Trakt types: identifiers, statistics, enums."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TraktModel(BaseModel):
    """Base for all Trakt payloads.

    Unknown fields are kept so ``extended=full`` data is never lost.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)


# =============================================================================
# Enums
# =============================================================================


class MediaType(str, Enum):
    """Collection-style media types used in paths."""

    MOVIES = "movies"
    SHOWS = "shows"
    SEASONS = "seasons"
    EPISODES = "episodes"


class Period(str, Enum):
    """Time period for watched/played charts."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    ALL = "all"


class CommentType(str, Enum):
    ALL = "all"
    REVIEWS = "reviews"
    SHOUTS = "shouts"


class CommentSort(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    LIKES = "likes"
    REPLIES = "replies"
    HIGHEST = "highest"
    LOWEST = "lowest"
    PLAYS = "plays"


class ListType(str, Enum):
    ALL = "all"
    PERSONAL = "personal"
    OFFICIAL = "official"
    WATCHLISTS = "watchlists"
    FAVORITES = "favorites"


class ListSort(str, Enum):
    POPULAR = "popular"
    LIKES = "likes"
    COMMENTS = "comments"
    ITEMS = "items"
    ADDED = "added"
    UPDATED = "updated"


class PrivacyLevel(str, Enum):
    PRIVATE = "private"
    FRIENDS = "friends"
    PUBLIC = "public"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


# =============================================================================
# Common models
# =============================================================================


class IDs(TraktModel):
    """Identifiers of an item across Trakt and external databases."""

    trakt: int | None = None
    slug: str | None = None
    imdb: str | None = None
    tmdb: int | None = None
    tvdb: int | None = None


class ItemRef(TraktModel):
    """Reference to an item by its ids, as sent in request bodies."""

    ids: IDs


class Stats(TraktModel):
    """Community statistics for an item."""

    watchers: int | None = None
    plays: int | None = None
    collectors: int | None = None
    comments: int | None = None
    lists: int | None = None
    votes: int | None = None
    favorited: int | None = None
    recommended: int | None = None


class RatingDistribution(TraktModel):
    """Average rating, vote count and per-score distribution (1-10)."""

    rating: float = 0.0
    votes: int = 0
    distribution: dict[int, int] = Field(default_factory=dict)
