"""Data records for the parts of API responses the command line uses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _require_dict(data: Any, what: str) -> dict:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{what}: expected an object, got {type(data).__name__}")
    return data


def _list(data: dict, key: str) -> list:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{key}: expected an array, got {type(value).__name__}")
    return value


def _int(data: dict, key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key}: expected an integer, got {value!r}")
    return value


def _str(data: dict, key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{key}: expected a string, got {value!r}")
    return value


def _opt_str(data: dict, key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{key}: expected a string or null, got {value!r}")
    return value


def _bool(data: dict, key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"{key}: expected a boolean, got {value!r}")
    return value


@dataclass(frozen=True)
class NamedResource:
    """A name paired with the URL of the resource it names."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> NamedResource:
        data = _require_dict(data, "resource")
        return cls(name=_str(data, "name"), url=_str(data, "url"))


@dataclass
class LocationArea:
    """One page of the location-area listing."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> LocationArea:
        data = _require_dict(data, "location area page")
        return cls(
            count=_int(data, "count"),
            next=_opt_str(data, "next"),
            previous=_opt_str(data, "previous"),
            results=[NamedResource.from_dict(r) for r in _list(data, "results")],
        )


@dataclass
class LocationAreaDetail:
    """A single location area with the pokemon that can be met there."""

    id: int = 0
    name: str = ""
    game_index: int = 0
    location: NamedResource = field(default_factory=NamedResource)
    pokemon_encounters: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> LocationAreaDetail:
        data = _require_dict(data, "location area")
        encounters = [
            NamedResource.from_dict(_require_dict(e, "encounter").get("pokemon"))
            for e in _list(data, "pokemon_encounters")
        ]
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            game_index=_int(data, "game_index"),
            location=NamedResource.from_dict(data.get("location")),
            pokemon_encounters=encounters,
        )

    def pokemon_names(self) -> list[str]:
        """Names of the encountered pokemon, in the order the API lists them."""
        return [p.name for p in self.pokemon_encounters]


@dataclass(frozen=True)
class MoveLearned:
    """A move with the level at which its first version group learns it."""

    move: NamedResource
    level_learned_at: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> MoveLearned:
        data = _require_dict(data, "move")
        details = _list(data, "version_group_details")
        level = _int(_require_dict(details[0], "version group"), "level_learned_at") if details else 0
        return cls(move=NamedResource.from_dict(data.get("move")), level_learned_at=level)


@dataclass(frozen=True)
class BaseStat:
    """A named stat and its base value."""

    stat: NamedResource
    base_stat: int = 0
    effort: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> BaseStat:
        data = _require_dict(data, "stat")
        return cls(
            stat=NamedResource.from_dict(data.get("stat")),
            base_stat=_int(data, "base_stat"),
            effort=_int(data, "effort"),
        )


@dataclass
class Pokemon:
    """The details of one pokemon that the command line shows."""

    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    is_default: bool = False
    order: int = 0
    abilities: list[str] = field(default_factory=list)
    forms: list[str] = field(default_factory=list)
    moves: list[MoveLearned] = field(default_factory=list)
    stats: list[BaseStat] = field(default_factory=list)
    types: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Pokemon:
        data = _require_dict(data, "pokemon")
        abilities = [
            NamedResource.from_dict(_require_dict(a, "ability").get("ability")).name
            for a in _list(data, "abilities")
        ]
        types = [
            NamedResource.from_dict(_require_dict(t, "type").get("type")).name
            for t in _list(data, "types")
        ]
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            base_experience=_int(data, "base_experience"),
            height=_int(data, "height"),
            weight=_int(data, "weight"),
            is_default=_bool(data, "is_default"),
            order=_int(data, "order"),
            abilities=abilities,
            forms=[NamedResource.from_dict(f).name for f in _list(data, "forms")],
            moves=[MoveLearned.from_dict(m) for m in _list(data, "moves")],
            stats=[BaseStat.from_dict(s) for s in _list(data, "stats")],
            types=types,
        )