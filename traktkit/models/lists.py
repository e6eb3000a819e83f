"""Personal list models and list request bodies."""

from datetime import date, datetime

from pydantic import Field

from traktkit.models.movies import Movie
from traktkit.models.shared import IDs, PrivacyLevel, SortDirection, TraktModel
from traktkit.models.shows import Episode, Season, Show
from traktkit.models.users import User


class ListIDs(TraktModel):
    trakt: int
    slug: str | None = None


class TraktList(TraktModel):
    name: str
    description: str | None = None
    privacy: PrivacyLevel | None = None
    share_link: str | None = None
    type: str | None = None
    display_numbers: bool | None = None
    allow_comments: bool | None = None
    sort_by: str | None = None
    sort_how: SortDirection | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    item_count: int = 0
    comment_count: int = 0
    likes: int | None = None
    like_count: int | None = None
    ids: ListIDs
    user: User | None = None


class TrendingList(TraktModel):
    """Entry of the trending and popular list charts."""

    like_count: int = 0
    comment_count: int = 0
    list_: TraktList = Field(alias="list")


class ListPerson(TraktModel):
    name: str
    ids: IDs
    biography: str | None = None
    birthday: date | None = None
    death: date | None = None
    birthplace: str | None = None
    homepage: str | None = None


class ListItem(TraktModel):
    rank: int | None = None
    id: int | None = None
    listed_at: datetime | None = None
    notes: str | None = None
    type: str | None = None
    movie: Movie | None = None
    show: Show | None = None
    season: Season | None = None
    episode: Episode | None = None
    person: ListPerson | None = None


# =============================================================================
# Request bodies
# =============================================================================


class CreateListParams(TraktModel):
    name: str
    description: str | None = None
    privacy: PrivacyLevel | None = None
    display_numbers: bool | None = None
    allow_comments: bool | None = None
    sort_by: str | None = None
    sort_how: SortDirection | None = None


class UpdateListParams(TraktModel):
    name: str | None = None
    description: str | None = None
    privacy: PrivacyLevel | None = None
    display_numbers: bool | None = None
    allow_comments: bool | None = None
    sort_by: str | None = None
    sort_how: SortDirection | None = None


class ListItemEntry(TraktModel):
    """Item to add, remove or reorder; ``rank`` is only used for reorder."""

    ids: IDs
    notes: str | None = None
    rank: int | None = None


class ListItemsParams(TraktModel):
    movies: list[ListItemEntry] | None = None
    shows: list[ListItemEntry] | None = None
    seasons: list[ListItemEntry] | None = None
    episodes: list[ListItemEntry] | None = None
    people: list[ListItemEntry] | None = None


class ListItemCounts(TraktModel):
    movies: int = 0
    shows: int = 0
    seasons: int = 0
    episodes: int = 0
    people: int = 0


class ListItemResponse(TraktModel):
    added: ListItemCounts | None = None
    existing: ListItemCounts | None = None
    deleted: ListItemCounts | None = None
    updated: int | None = None
    not_found: ListItemsParams | None = None
