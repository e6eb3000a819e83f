"""User models."""

from datetime import datetime
from typing import Any

from traktkit.models.movies import Movie
from traktkit.models.shared import TraktModel
from traktkit.models.shows import Season, Show


class UserIDs(TraktModel):
    slug: str
    uuid: str | None = None


class User(TraktModel):
    username: str
    private: bool = False
    name: str | None = None
    vip: bool | None = None
    vip_ep: bool | None = None
    deleted: bool | None = None
    ids: UserIDs


class UserProfile(User):
    """User with ``extended=full`` profile fields."""

    joined_at: datetime | None = None
    location: str | None = None
    about: str | None = None
    gender: str | None = None
    age: int | None = None
    images: dict[str, Any] | None = None


class UserSettings(TraktModel):
    user: UserProfile
    account: dict[str, Any] | None = None
    connections: dict[str, Any] | None = None
    sharing_text: dict[str, Any] | None = None
    limits: dict[str, Any] | None = None


class FollowRequest(TraktModel):
    id: int
    requested_at: datetime
    user: User


class FollowResponse(TraktModel):
    """Result of following a user or approving a follow request."""

    approved_at: datetime | None = None
    followed_at: datetime | None = None
    user: User


class Friend(TraktModel):
    """Entry of followers, following and friends lists."""

    followed_at: datetime | None = None
    friends_at: datetime | None = None
    user: User


class HiddenItem(TraktModel):
    """Item hidden from a section (calendar, progress, recommendations)."""

    hidden_at: datetime
    type: str
    movie: Movie | None = None
    show: Show | None = None
    season: Season | None = None


class UserStats(TraktModel):
    """Per-type counters of a user's activity (plays, minutes, ratings)."""

    movies: dict[str, Any] | None = None
    shows: dict[str, Any] | None = None
    seasons: dict[str, Any] | None = None
    episodes: dict[str, Any] | None = None
    network: dict[str, Any] | None = None
    ratings: dict[str, Any] | None = None
