"""Calendar models."""

from datetime import date, datetime

from traktkit.models.movies import Movie
from traktkit.models.shared import TraktModel
from traktkit.models.shows import Episode, Show


class CalendarShow(TraktModel):
    first_aired: datetime
    episode: Episode
    show: Show


class CalendarMovie(TraktModel):
    released: date
    movie: Movie
