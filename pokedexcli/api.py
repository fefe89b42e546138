"""HTTP client for the Pokemon API, with responses kept in a :class:`Cache`."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from typing import Any, Callable, TypeVar

from .cache import Cache
from .types import LocationArea, LocationAreaDetail, Pokemon

BASE_URL = "https://pokeapi.co/api/v2"
FIRST_LOCATIONS_PAGE = BASE_URL + "/location-area?offset=0&limit=20"

Fetch = Callable[[str, float], "tuple[int, bytes]"]
_T = TypeVar("_T")


class ApiError(Exception):
    """Raised when a request fails or its response cannot be understood."""


def _urllib_fetch(url: str, timeout: float) -> tuple[int, bytes]:
    request = urllib.request.Request(url, method="GET")
    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:
            return response.status, response.read()
    except urllib.error.HTTPError as err:
        return err.code, err.read()


class Client:
    """Fetches location and pokemon data.

    ``fetch`` takes a URL and a timeout and returns ``(status, body)``;
    it defaults to a plain GET request over the network.
    """

    def __init__(self, timeout: float = 5.0, fetch: Fetch | None = None) -> None:
        self.timeout = float(timeout)
        self._fetch = fetch if fetch is not None else _urllib_fetch

    def _get(self, url: str, transport_message: str | None = None) -> bytes:
        try:
            status, body = self._fetch(url, self.timeout)
        except OSError as err:
            raise ApiError(transport_message or str(err)) from err
        if status > 299:
            raise ApiError("there was an issue with the request")
        return body

    @staticmethod
    def _decode(data: bytes, parse: Callable[[Any], _T]) -> _T:
        try:
            return parse(json.loads(data))
        except ValueError as err:
            raise ApiError(f"invalid response: {err}") from err

    def _cached_get(self, url: str, cache: Cache) -> bytes:
        data = cache.get(url)
        if data is None:
            data = self._get(url)
            cache.add(url, data)
        return data

    def list_locations(self, page_url: str | None, cache: Cache) -> LocationArea:
        """Return one page of location areas; the first page when ``page_url`` is None."""
        url = page_url if page_url is not None else FIRST_LOCATIONS_PAGE
        return self._decode(self._cached_get(url, cache), LocationArea.from_dict)

    def list_pokemons(self, location: str, cache: Cache) -> LocationAreaDetail:
        """Return the details of a location area, including its pokemon encounters."""
        url = f"{BASE_URL}/location-area/{location}"
        return self._decode(self._cached_get(url, cache), LocationAreaDetail.from_dict)

    def pokemon_details(self, name: str) -> Pokemon:
        """Return the details of the named pokemon; these are never cached."""
        url = f"{BASE_URL}/pokemon/{name}"
        data = self._get(url, transport_message="No pokemon with that name")
        return self._decode(data, Pokemon.from_dict)