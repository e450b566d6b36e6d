"""A small client for the FACEIT data API."""

from __future__ import annotations

import logging
import posixpath
from urllib.parse import quote, urlsplit, urlunsplit

import requests

from csstats.faceit_models import Match, MatchTab, Player, parse_match, parse_match_tab, parse_player

logger = logging.getLogger(__name__)


class AuthKeyError(ValueError):
    """Raised when no usable authorization key is given."""


class FaceitClient:
    """Issues authorized GET requests against a FACEIT API base URL."""

    def __init__(self, base: str, key: str | None) -> None:
        if not isinstance(key, str) or not key:
            raise AuthKeyError("auth key not found")
        self.base = base
        self._key = key
        self.session = requests.Session()

    def _url(self, *elements: str) -> str:
        parts = urlsplit(self.base)
        joined = "/".join([parts.path, *(quote(e, safe="/") for e in elements)])
        path = "/" + posixpath.normpath("/" + joined).lstrip("/")
        if elements and elements[-1].endswith("/") and not path.endswith("/"):
            path += "/"
        return urlunsplit((parts.scheme, parts.netloc, path, parts.query, parts.fragment))

    def _get(self, url: str) -> requests.Response:
        return self.session.get(url, headers={"Authorization": self._key})

    def get_cs(self) -> str:
        """Return the raw description of the cs2 game."""
        return self._get(self._url("games", "cs2")).text

    def find_player(self, nickname: str) -> Player:
        """Look a player up by nickname."""
        url = self._url("players") + "?nickname=" + nickname
        return parse_player(self._get(url).content)

    def get_player(self, player_id: str) -> str:
        """Return the raw profile of a player."""
        return self._get(self._url("players", player_id)).text

    def get_stats(self, player_id: str) -> str:
        """Return the raw cs2 statistics of a player."""
        url = self._url("players", player_id, "stats", "cs2")
        logger.debug("requesting %s", url)
        return self._get(url).text

    def get_matches(self, player_id: str) -> MatchTab:
        """Return a player's match history."""
        url = self._url("players", player_id, "history")
        logger.debug("requesting %s", url)
        return parse_match_tab(self._get(url).content)

    def get_match(self, match_id: str) -> Match:
        """Return one match."""
        url = self._url("matches", match_id)
        logger.debug("requesting %s", url)
        return parse_match(self._get(url).content)