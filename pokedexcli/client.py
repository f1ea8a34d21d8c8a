"""HTTP client for the Pokémon API with a response cache."""

from __future__ import annotations

import json
import urllib.request
from typing import Any, Callable, TypeVar

from .cache import Cache
from .models import Location, LocationPage, Pokemon

BASE_URL = "https://pokeapi.co/api/v2"

Fetcher = Callable[[str, float], bytes]

_M = TypeVar("_M")


def _urllib_fetch(url: str, timeout: float) -> bytes:
    request = urllib.request.Request(url, method="GET")
    with urllib.request.urlopen(request, timeout=timeout) as response:
        return response.read()


class PokeApiError(Exception):
    """A request to the API failed or its answer could not be decoded."""


class PokeApiClient:
    """Fetches locations and Pokémon, keeping raw responses in a cache.

    ``timeout`` bounds each request and ``cache_interval`` is how long, in
    seconds, a cached response is kept. ``fetch`` is called as
    ``fetch(url, timeout)`` and must return the response body.
    """

    def __init__(
        self,
        timeout: float = 5.0,
        cache_interval: float = 300.0,
        *,
        base_url: str = BASE_URL,
        fetch: Fetcher | None = None,
    ) -> None:
        self._timeout = timeout
        self._base_url = base_url.rstrip("/")
        self._fetch = fetch if fetch is not None else _urllib_fetch
        self._cache = Cache(cache_interval)

    def get_location(self, location_name: str) -> Location:
        """Return the location area called ``location_name``."""
        url = f"{self._base_url}/location-area/{location_name}"
        cached = self._cache.get(url)
        if cached is not None:
            return self._decode(cached, Location.from_dict, url)
        data = self._download(url)
        location = self._decode(data, Location.from_dict, url)
        self._cache.add(url, data)
        return location

    def list_locations(self, page_url: str | None = None) -> LocationPage:
        """Return the page of location areas at ``page_url``, or the first page."""
        url = f"{self._base_url}/location-area" if page_url is None else page_url
        cached = self._cache.get(url)
        if cached is not None:
            return self._decode(cached, LocationPage.from_dict, url)
        data = self._download(url)
        return self._decode(data, LocationPage.from_dict, url)

    def get_pokemon(self, pokemon_name: str) -> Pokemon:
        """Return the Pokémon called ``pokemon_name``."""
        url = f"{self._base_url}/pokemon/{pokemon_name}"
        cached = self._cache.get(url)
        if cached is not None:
            return self._decode(cached, Pokemon.from_dict, url)
        data = self._download(url)
        pokemon = self._decode(data, Pokemon.from_dict, url)
        self._cache.add(url, data)
        return pokemon

    def close(self) -> None:
        """Stop the cache's background work."""
        self._cache.close()

    def __enter__(self) -> PokeApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _download(self, url: str) -> bytes:
        try:
            return self._fetch(url, self._timeout)
        except (OSError, ValueError) as exc:
            raise PokeApiError(f"request to {url} failed: {exc}") from exc

    @staticmethod
    def _decode(data: bytes, build: Callable[[Any], _M], url: str) -> _M:
        try:
            return build(json.loads(data))
        except (ValueError, TypeError) as exc:
            raise PokeApiError(f"invalid response from {url}: {exc}") from exc