"""Demo summaries and the processing that enriches them with FACEIT data."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

import requests

from csstats.faceit_models import Player
from csstats.game import GameStats

logger = logging.getLogger(__name__)


class _PlayerFinder(Protocol):
    def find_player(self, nickname: str) -> Player: ...


@dataclass
class DemoConfig:
    """Options for reading a demo: the player to follow and where to log."""

    player: str = ""
    logger: logging.Logger = field(default_factory=lambda: logger)


@dataclass
class DemoInfo:
    """What was learned from one demo."""

    player: str = ""
    map: str = ""
    players: list[str] = field(default_factory=list)
    game: GameStats = field(default_factory=GameStats)


class StatsProcessor:
    """Combines demo information with player data from the FACEIT API."""

    def __init__(self, client: _PlayerFinder, log: logging.Logger | None = None) -> None:
        self.client = client
        self.logger = log if log is not None else logger

    def get_players(self, info: DemoInfo) -> list[Player]:
        """Look up every player of the demo, skipping those that fail."""
        found: list[Player] = []
        for name in info.players:
            try:
                player = self.client.find_player(name)
            except (requests.RequestException, ValueError) as exc:
                self.logger.error("error while searching for a player %s: %s", name, exc)
                continue
            found.append(player)
        return found

    def process_demo_info(self, info: DemoInfo) -> None:
        """Report the followed player's kills and flashes."""
        self.logger.debug("player kills: %r", info.game.kills.get(info.player))
        self.logger.debug("player flashes: %r", info.game.flashes.get(info.player))