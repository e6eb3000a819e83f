"""Movie models."""

from datetime import date, datetime

from pydantic import Field

from traktkit.models.shared import IDs, TraktModel


class Movie(TraktModel):
    """Movie summary; extended fields are filled with ``extended=full``."""

    title: str
    year: int | None = None
    ids: IDs

    tagline: str | None = None
    overview: str | None = None
    released: date | None = None
    runtime: int | None = None
    country: str | None = None
    trailer: str | None = None
    homepage: str | None = None
    status: str | None = None
    rating: float | None = None
    votes: int | None = None
    comment_count: int | None = None
    updated_at: datetime | None = None
    language: str | None = None
    languages: list[str] | None = None
    available_translations: list[str] | None = None
    genres: list[str] | None = None
    certification: str | None = None

    def get_imdb_url(self) -> str | None:
        """Get IMDb URL when the movie has an IMDb id."""
        if not self.ids.imdb:
            return None
        return f"https://www.imdb.com/title/{self.ids.imdb}/"


class TrendingMovie(TraktModel):
    watchers: int = 0
    movie: Movie


class AnticipatedMovie(TraktModel):
    list_count: int = 0
    movie: Movie


class WatchedMovie(TraktModel):
    """Entry of the most watched/played charts."""

    watcher_count: int = 0
    play_count: int = 0
    collected_count: int = 0
    movie: Movie


PlayedMovie = WatchedMovie


class BoxOfficeMovie(TraktModel):
    revenue: int = 0
    movie: Movie


class MovieUpdate(TraktModel):
    updated_at: datetime
    movie: Movie


class Alias(TraktModel):
    """Alternative title in a country."""

    title: str
    country: str | None = None


class MovieRelease(TraktModel):
    country: str
    certification: str | None = None
    release_date: date | None = None
    release_type: str | None = None
    note: str | None = None


class MovieTranslation(TraktModel):
    title: str | None = None
    overview: str | None = None
    tagline: str | None = None
    language: str
    country: str | None = None


class Studio(TraktModel):
    name: str
    country: str | None = None
    ids: IDs


class Video(TraktModel):
    """Trailer, clip or featurette."""

    title: str
    url: str
    site: str | None = None
    type: str | None = None
    size: int | None = None
    official: bool = False
    published_at: datetime | None = None
    country: str | None = None
    language: str | None = None


# =============================================================================
# Cast and crew
# =============================================================================


class PersonRef(TraktModel):
    name: str
    ids: IDs


class CastMember(TraktModel):
    characters: list[str] = Field(default_factory=list)
    person: PersonRef


class CrewMember(TraktModel):
    jobs: list[str] = Field(default_factory=list)
    person: PersonRef


class People(TraktModel):
    """Cast and crew of a movie or show.

    Crew is keyed by department: production, art, crew, costume & make-up,
    directing, writing, sound, camera, visual effects, lighting, editing.
    """

    cast: list[CastMember] = Field(default_factory=list)
    crew: dict[str, list[CrewMember]] = Field(default_factory=dict)

    def get_directors(self) -> list[CrewMember]:
        """Get all crew members credited in the directing department."""
        return list(self.crew.get("directing", []))

    def get_writers(self) -> list[CrewMember]:
        """Get all crew members credited in the writing department."""
        return list(self.crew.get("writing", []))

    def get_top_cast(self, limit: int = 10) -> list[CastMember]:
        """Get top billed cast members."""
        return self.cast[:limit]
