"""Typed Trakt API payloads.

Response models keep unknown fields; request models are serialized by alias
without None values.
"""

from traktkit.models.calendar import CalendarMovie, CalendarShow
from traktkit.models.comments import (
    Comment,
    CommentItem,
    CommentPostParams,
    CommentReplyParams,
    CommentUpdateParams,
    Like,
)
from traktkit.models.lists import (
    CreateListParams,
    ListItem,
    ListItemEntry,
    ListItemResponse,
    ListItemsParams,
    TraktList,
    TrendingList,
    UpdateListParams,
)
from traktkit.models.metadata import Certification, Country, Genre, Language, Network
from traktkit.models.movies import (
    Alias,
    AnticipatedMovie,
    BoxOfficeMovie,
    CastMember,
    CrewMember,
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
from traktkit.models.search import IdType, Person, SearchResult, SearchType
from traktkit.models.shared import (
    CommentSort,
    CommentType,
    IDs,
    ItemRef,
    ListSort,
    ListType,
    MediaType,
    Period,
    PrivacyLevel,
    RatingDistribution,
    SortDirection,
    Stats,
    TraktModel,
)
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
from traktkit.models.sync import (
    CollectionItem,
    HistoryItem,
    PlaybackParams,
    PlaybackProgress,
    RatedItem,
    SyncItem,
    SyncParams,
    SyncResponse,
    WatchedItem,
    WatchlistItem,
)
from traktkit.models.users import (
    FollowRequest,
    FollowResponse,
    Friend,
    HiddenItem,
    User,
    UserProfile,
    UserSettings,
    UserStats,
)

__all__ = [
    # Shared
    "TraktModel",
    "IDs",
    "ItemRef",
    "Stats",
    "RatingDistribution",
    "MediaType",
    "Period",
    "CommentType",
    "CommentSort",
    "ListType",
    "ListSort",
    "PrivacyLevel",
    "SortDirection",
    # Movies
    "Movie",
    "TrendingMovie",
    "AnticipatedMovie",
    "WatchedMovie",
    "PlayedMovie",
    "BoxOfficeMovie",
    "MovieUpdate",
    "Alias",
    "MovieRelease",
    "MovieTranslation",
    "Studio",
    "Video",
    "People",
    "CastMember",
    "CrewMember",
    # Shows
    "Show",
    "Season",
    "Episode",
    "TrendingShow",
    "AnticipatedShow",
    "WatchedShow",
    "PlayedShow",
    "ShowUpdate",
    "ShowTranslation",
    "ShowStats",
    # Search
    "SearchResult",
    "SearchType",
    "IdType",
    "Person",
    # Calendar
    "CalendarShow",
    "CalendarMovie",
    # Sync
    "SyncItem",
    "SyncParams",
    "SyncResponse",
    "PlaybackParams",
    "PlaybackProgress",
    "CollectionItem",
    "WatchedItem",
    "RatedItem",
    "WatchlistItem",
    "HistoryItem",
    # Lists
    "TraktList",
    "TrendingList",
    "ListItem",
    "ListItemEntry",
    "ListItemsParams",
    "ListItemResponse",
    "CreateListParams",
    "UpdateListParams",
    # Comments
    "Comment",
    "CommentItem",
    "CommentPostParams",
    "CommentUpdateParams",
    "CommentReplyParams",
    "Like",
    # Users
    "User",
    "UserProfile",
    "UserSettings",
    "FollowRequest",
    "FollowResponse",
    "Friend",
    "HiddenItem",
    "UserStats",
    # Metadata
    "Genre",
    "Certification",
    "Country",
    "Language",
    "Network",
]
