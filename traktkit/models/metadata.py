"""Lookup tables: genres, certifications, countries, languages, networks."""

from traktkit.models.shared import IDs, TraktModel


class Genre(TraktModel):
    name: str
    slug: str


class Certification(TraktModel):
    name: str
    slug: str
    description: str | None = None


class Country(TraktModel):
    name: str
    code: str


class Language(TraktModel):
    name: str
    code: str


class Network(TraktModel):
    name: str
    country: str | None = None
    ids: IDs | None = None
