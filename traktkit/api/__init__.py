"""Trakt API resource modules."""

from traktkit.api.calendars import CalendarScope, CalendarsModule
from traktkit.api.comments import CommentsModule
from traktkit.api.lists import ListItemManagement, ListsModule
from traktkit.api.metadata import (
    CertificationsModule,
    CountriesModule,
    GenresModule,
    LanguagesModule,
    NetworksModule,
)
from traktkit.api.movies import MoviesModule
from traktkit.api.recommendations import (
    HiddenRecommendations,
    RecommendationFeed,
    RecommendationsModule,
)
from traktkit.api.search import SearchModule
from traktkit.api.shows import ShowsModule
from traktkit.api.sync import SyncModule
from traktkit.api.users import UsersModule

__all__ = [
    "CalendarScope",
    "CalendarsModule",
    "CertificationsModule",
    "CommentsModule",
    "CountriesModule",
    "GenresModule",
    "HiddenRecommendations",
    "LanguagesModule",
    "ListItemManagement",
    "ListsModule",
    "MoviesModule",
    "NetworksModule",
    "RecommendationFeed",
    "RecommendationsModule",
    "SearchModule",
    "ShowsModule",
    "SyncModule",
    "UsersModule",
]
