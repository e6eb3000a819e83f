"""Search models."""

from enum import Enum

from pydantic import Field

from traktkit.models.lists import ListPerson, TraktList
from traktkit.models.movies import Movie
from traktkit.models.shared import TraktModel
from traktkit.models.shows import Episode, Show


class SearchType(str, Enum):
    MOVIE = "movie"
    SHOW = "show"
    EPISODE = "episode"
    PERSON = "person"
    LIST = "list"


class IdType(str, Enum):
    TRAKT = "trakt"
    IMDB = "imdb"
    TMDB = "tmdb"
    TVDB = "tvdb"


Person = ListPerson


class SearchResult(TraktModel):
    """Search hit; the field matching ``type`` is set."""

    type: SearchType
    score: float | None = None
    movie: Movie | None = None
    show: Show | None = None
    episode: Episode | None = None
    person: Person | None = None
    list_: TraktList | None = Field(default=None, alias="list")

    def get_title(self) -> str | None:
        """Title or name of whichever item the hit refers to."""
        item = self.movie or self.show or self.episode or self.person or self.list_
        if item is None:
            return None
        return getattr(item, "title", None) or getattr(item, "name", None)
