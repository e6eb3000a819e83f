"""Lookup tables: genres, certifications, countries, languages, networks."""

from typing import Any

from traktkit.api.base import BaseModule
from traktkit.models.metadata import Certification, Country, Genre, Language, Network


class GenresModule(BaseModule):
    async def movies(self) -> list[Genre]:
        return await self._get_many(Genre, "/genres/movies")

    async def shows(self) -> list[Genre]:
        return await self._get_many(Genre, "/genres/shows")


class CertificationsModule(BaseModule):
    """U.S. content certifications (G, PG, TV-MA, ...)."""

    @staticmethod
    def _unwrap(data: Any) -> list[Any]:
        # Trakt nests the list under the country code: {"us": [...]}
        if isinstance(data, dict):
            return data.get("us", [])
        return data or []

    async def movies(self) -> list[Certification]:
        data = await self._call("get", "/certifications/movies")
        return [Certification.model_validate(item) for item in self._unwrap(data)]

    async def shows(self) -> list[Certification]:
        data = await self._call("get", "/certifications/shows")
        return [Certification.model_validate(item) for item in self._unwrap(data)]


class CountriesModule(BaseModule):
    async def movies(self) -> list[Country]:
        return await self._get_many(Country, "/countries/movies")

    async def shows(self) -> list[Country]:
        return await self._get_many(Country, "/countries/shows")


class LanguagesModule(BaseModule):
    async def movies(self) -> list[Language]:
        return await self._get_many(Language, "/languages/movies")

    async def shows(self) -> list[Language]:
        return await self._get_many(Language, "/languages/shows")


class NetworksModule(BaseModule):
    async def get(self) -> list[Network]:
        """All TV networks known to Trakt."""
        return await self._get_many(Network, "/networks")
