"""Per-player kill and flash statistics gathered from demo events."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any


class Team(enum.Enum):
    """The side a player is on."""

    UNASSIGNED = 0
    SPECTATORS = 1
    TERRORISTS = 2
    COUNTER_TERRORISTS = 3


@dataclass(frozen=True)
class Weapon:
    """The weapon used in an event, named by its type."""

    type: str


@dataclass(frozen=True)
class EventPlayer:
    """A participant of an event; position is None when unknown."""

    name: str
    team: Team = Team.UNASSIGNED
    position: tuple[float, float] | None = None


@dataclass(frozen=True)
class KillEvent:
    """One player killing another."""

    killer: EventPlayer | None
    weapon: Weapon | None = None
    is_headshot: bool = False
    victim: EventPlayer | None = None


@dataclass(frozen=True)
class FlashEvent:
    """A player being blinded by another player's flashbang."""

    attacker: EventPlayer | None
    player: EventPlayer | None


@dataclass
class KillCounter:
    """Counts kills and how many of them were headshots."""

    count: int = 0
    headshot_count: int = 0

    def add(self, event: KillEvent) -> None:
        self.count += 1
        if event.is_headshot:
            self.headshot_count += 1

    def to_dict(self) -> dict[str, int]:
        return {"count": self.count, "headshot_count": self.headshot_count}


@dataclass
class PositionsManager:
    """Collects the killer's position for each kill."""

    all: list[tuple[float, float]] = field(default_factory=list)

    def add(self, event: KillEvent) -> None:
        killer = event.killer
        if killer is None or killer.position is None:
            return
        x, y = killer.position
        self.all.append((x, y))

    def to_list(self) -> list[dict[str, float]]:
        return [{"x": x, "y": y} for x, y in self.all]


def _counter_dict(counter: KillCounter | None) -> dict[str, int] | None:
    return None if counter is None else counter.to_dict()


@dataclass
class Kill:
    """A player's kills, overall, per side and per weapon type."""

    overall: KillCounter | None = None
    terrorists: KillCounter | None = None
    counter_terrorists: KillCounter | None = None
    guns: dict[str, KillCounter] = field(default_factory=dict)
    positions: PositionsManager | None = None

    def add(self, event: KillEvent) -> None:
        killer = event.killer
        if killer is None:
            raise ValueError("kill event has no killer")

        if self.overall is None:
            self.overall = KillCounter()
        self.overall.add(event)

        if killer.team is Team.COUNTER_TERRORISTS:
            if self.counter_terrorists is None:
                self.counter_terrorists = KillCounter()
            self.counter_terrorists.add(event)
        elif killer.team is Team.TERRORISTS:
            if self.terrorists is None:
                self.terrorists = KillCounter()
            self.terrorists.add(event)

        if event.weapon is not None:
            self.guns.setdefault(event.weapon.type, KillCounter()).add(event)

        if self.positions is None:
            self.positions = PositionsManager()
        self.positions.add(event)

    def to_dict(self) -> dict[str, Any]:
        return {
            "overall": _counter_dict(self.overall),
            "terrorists": _counter_dict(self.terrorists),
            "counter_terrorists": _counter_dict(self.counter_terrorists),
            "weapons": {gun: counter.to_dict() for gun, counter in self.guns.items()},
            "kill_positions": self.positions.to_list() if self.positions else [],
        }


@dataclass
class Flash:
    """How many enemies a player has flashed."""

    enemies_flashed: int = 0


@dataclass
class GameStats:
    """Kills and flashes of every player, keyed by nickname."""

    kills: dict[str, Kill] = field(default_factory=dict)
    flashes: dict[str, Flash] = field(default_factory=dict)

    def add(self, event: Any) -> None:
        """Record an event; events of other kinds are ignored."""
        if isinstance(event, KillEvent):
            self._add_kill(event)
        elif isinstance(event, FlashEvent):
            self._add_flash(event)

    def _add_kill(self, event: KillEvent) -> None:
        if event.killer is None:
            raise ValueError("kill event has no killer")
        self.kills.setdefault(event.killer.name, Kill()).add(event)

    def _add_flash(self, event: FlashEvent) -> None:
        if event.attacker is None or event.player is None:
            return
        self.flashes.setdefault(event.attacker.name, Flash()).enemies_flashed += 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "kills": {name: kill.to_dict() for name, kill in self.kills.items()},
            "flashes": {
                name: {"enemies_flashed": flash.enemies_flashed}
                for name, flash in self.flashes.items()
            },
        }