"""Shared plumbing for resource modules.

A module only builds a path and parameters, hands them to the client's
request sender, and validates the JSON into models.
"""

from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel

from traktkit.client import TraktClient

ModelT = TypeVar("ModelT", bound=BaseModel)

# Trakt id, slug or IMDb id
ItemId = str | int


def segment(value: Any) -> str:
    """Render a path segment from a plain value or an enum member."""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def page_params(page: int | None = None, limit: int | None = None) -> dict[str, Any]:
    """Pagination query parameters; unset values are dropped by the sender."""
    return {"page": page, "limit": limit}


def extended_params(extended: bool) -> dict[str, str]:
    return {"extended": "full"} if extended else {}


class BaseModule:
    """Base class for resource modules."""

    def __init__(self, client: TraktClient):
        self._client = client

    async def _call(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | BaseModel | None = None,
    ) -> Any:
        return await self._client._call(method, path, params)

    async def _get_one(
        self,
        model: type[ModelT],
        path: str,
        params: dict[str, Any] | None = None,
    ) -> ModelT:
        data = await self._call("get", path, params)
        return model.model_validate(data)

    async def _get_many(
        self,
        model: type[ModelT],
        path: str,
        params: dict[str, Any] | None = None,
    ) -> list[ModelT]:
        data = await self._call("get", path, params)
        return [model.model_validate(item) for item in data or []]

    async def _send(
        self,
        model: type[ModelT],
        method: str,
        path: str,
        body: dict[str, Any] | BaseModel | None = None,
    ) -> ModelT:
        data = await self._call(method, path, body)
        return model.model_validate(data)
