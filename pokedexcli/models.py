"""Records decoded from the location and Pokémon API responses."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

_T = TypeVar("_T")


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise TypeError(f"{what} must be an object, got {type(data).__name__}")
    return data


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"field {key!r} must be an integer, got {value!r}")
    return value


def _bool(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise TypeError(f"field {key!r} must be a boolean, got {value!r}")
    return value


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"field {key!r} must be a string, got {value!r}")
    return value


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise TypeError(f"field {key!r} must be a string or null, got {value!r}")
    return value


def _list(
    data: Mapping[str, Any], key: str, build: Callable[[Any], _T]
) -> tuple[_T, ...]:
    value = data.get(key)
    if value is None:
        return ()
    if not isinstance(value, list):
        raise TypeError(f"field {key!r} must be an array, got {type(value).__name__}")
    return tuple(build(item) for item in value)


@dataclass(frozen=True)
class NamedResource:
    """A name together with the URL of the full resource."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> NamedResource:
        data = _mapping(data, "named resource")
        return cls(name=_str(data, "name"), url=_str(data, "url"))


@dataclass(frozen=True)
class PokemonStat:
    """One base stat of a Pokémon."""

    base_stat: int = 0
    effort: int = 0
    stat: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonStat:
        data = _mapping(data, "stat")
        return cls(
            base_stat=_int(data, "base_stat"),
            effort=_int(data, "effort"),
            stat=NamedResource.from_dict(data.get("stat")),
        )


@dataclass(frozen=True)
class PokemonTypeSlot:
    """A type of a Pokémon and the slot it occupies."""

    slot: int = 0
    type: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonTypeSlot:
        data = _mapping(data, "type slot")
        return cls(slot=_int(data, "slot"), type=NamedResource.from_dict(data.get("type")))


@dataclass(frozen=True)
class Pokemon:
    """A Pokémon as returned by the pokemon endpoint."""

    name: str = ""
    id: int = 0
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    order: int = 0
    is_default: bool = False
    location_area_encounters: str = ""
    species: NamedResource = field(default_factory=NamedResource)
    stats: tuple[PokemonStat, ...] = ()
    types: tuple[PokemonTypeSlot, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> Pokemon:
        data = _mapping(data, "pokemon")
        return cls(
            name=_str(data, "name"),
            id=_int(data, "id"),
            base_experience=_int(data, "base_experience"),
            height=_int(data, "height"),
            weight=_int(data, "weight"),
            order=_int(data, "order"),
            is_default=_bool(data, "is_default"),
            location_area_encounters=_str(data, "location_area_encounters"),
            species=NamedResource.from_dict(data.get("species")),
            stats=_list(data, "stats", PokemonStat.from_dict),
            types=_list(data, "types", PokemonTypeSlot.from_dict),
        )


@dataclass(frozen=True)
class PokemonEncounter:
    """A Pokémon that can be met in a location area."""

    pokemon: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonEncounter:
        data = _mapping(data, "encounter")
        return cls(pokemon=NamedResource.from_dict(data.get("pokemon")))


@dataclass(frozen=True)
class Location:
    """A location area and the Pokémon that can be met there."""

    name: str = ""
    id: int = 0
    game_index: int = 0
    location: NamedResource = field(default_factory=NamedResource)
    pokemon_encounters: tuple[PokemonEncounter, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> Location:
        data = _mapping(data, "location")
        return cls(
            name=_str(data, "name"),
            id=_int(data, "id"),
            game_index=_int(data, "game_index"),
            location=NamedResource.from_dict(data.get("location")),
            pokemon_encounters=_list(data, "pokemon_encounters", PokemonEncounter.from_dict),
        )


@dataclass(frozen=True)
class LocationPage:
    """One page of the location-area listing."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: tuple[NamedResource, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> LocationPage:
        data = _mapping(data, "location page")
        return cls(
            count=_int(data, "count"),
            next=_optional_str(data, "next"),
            previous=_optional_str(data, "previous"),
            results=_list(data, "results", NamedResource.from_dict),
        )