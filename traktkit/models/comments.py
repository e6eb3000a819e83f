"""Comment models and comment request bodies."""

from datetime import datetime

from pydantic import Field

from traktkit.models.lists import TraktList
from traktkit.models.movies import Movie
from traktkit.models.shared import ItemRef, TraktModel
from traktkit.models.shows import Episode, Season, Show
from traktkit.models.users import User


class Comment(TraktModel):
    id: int
    parent_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    comment: str
    spoiler: bool = False
    review: bool = False
    replies: int = 0
    likes: int = 0
    user_rating: int | None = None
    user: User | None = None


class CommentItem(TraktModel):
    """Comment together with the item it was posted on.

    Returned by the trending/recent/updates feeds and user comment lists.
    """

    type: str
    comment: Comment
    movie: Movie | None = None
    show: Show | None = None
    season: Season | None = None
    episode: Episode | None = None
    list_: TraktList | None = Field(default=None, alias="list")


class CommentPostParams(TraktModel):
    """Body of a new comment; exactly one item reference should be set."""

    comment: str
    spoiler: bool | None = None
    movie: ItemRef | None = None
    show: ItemRef | None = None
    season: ItemRef | None = None
    episode: ItemRef | None = None
    list_: ItemRef | None = Field(default=None, alias="list")


class CommentUpdateParams(TraktModel):
    comment: str
    spoiler: bool | None = None


class CommentReplyParams(TraktModel):
    comment: str
    spoiler: bool | None = None


class Like(TraktModel):
    """Comment or list liked by the current user."""

    liked_at: datetime
    type: str
    comment: Comment | None = None
    list_: TraktList | None = Field(default=None, alias="list")
