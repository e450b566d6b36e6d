"""Records returned by the FACEIT data API and their JSON decoding."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

JsonInput = str | bytes | bytearray | Mapping[str, Any] | None


@dataclass
class Game:
    """A player's standing in a single game."""

    level: int = 0
    elo: int = 0


@dataclass
class Player:
    """A FACEIT player profile."""

    id: str = ""
    name: str = ""
    steam_id: str = ""
    games: dict[str, Game] = field(default_factory=dict)


@dataclass
class Match:
    """A single match with the links to its demos."""

    id: str = ""
    demo: list[str] = field(default_factory=list)


@dataclass
class MatchTab:
    """A page of a player's match history."""

    matches: list[Match] = field(default_factory=list)


def _load(data: JsonInput) -> Mapping[str, Any]:
    if isinstance(data, (str, bytes, bytearray)):
        data = json.loads(data)
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _int(obj: Mapping[str, Any], key: str) -> int:
    value = obj.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer, got {value!r}")
    return value


def _str(obj: Mapping[str, Any], key: str) -> str:
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, got {value!r}")
    return value


def _str_list(obj: Mapping[str, Any], key: str) -> list[str]:
    value = obj.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"field {key!r} must be a list of strings, got {value!r}")
    return list(value)


def _game(data: Any) -> Game:
    obj = _load(data)
    return Game(level=_int(obj, "skill_level"), elo=_int(obj, "faceit_elo"))


def parse_player(data: JsonInput) -> Player:
    """Decode a player profile from JSON text or an already decoded mapping."""
    obj = _load(data)
    raw_games = obj.get("games")
    if raw_games is None:
        raw_games = {}
    if not isinstance(raw_games, Mapping):
        raise ValueError(f"field 'games' must be an object, got {raw_games!r}")
    return Player(
        id=_str(obj, "player_id"),
        name=_str(obj, "nickname"),
        steam_id=_str(obj, "steam_id_64"),
        games={name: _game(game) for name, game in raw_games.items()},
    )


def parse_match(data: JsonInput) -> Match:
    """Decode a match from JSON text or an already decoded mapping."""
    obj = _load(data)
    return Match(id=_str(obj, "match_id"), demo=_str_list(obj, "demo_url"))


def parse_match_tab(data: JsonInput) -> MatchTab:
    """Decode a match-history page from JSON text or a decoded mapping."""
    obj = _load(data)
    items = obj.get("items")
    if items is None:
        items = []
    if not isinstance(items, list):
        raise ValueError(f"field 'items' must be a list, got {items!r}")
    return MatchTab(matches=[parse_match(item) for item in items])