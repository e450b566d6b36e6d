import logging

import pytest
import requests
import responses
from responses import matchers

from csstats.faceit import FaceitClient
from csstats.faceit_models import Player
from csstats.game import EventPlayer, FlashEvent, GameStats, KillEvent, Team
from csstats.stats import DemoInfo, StatsProcessor

BASE = "https://api.example.com/data/v4"


class FakeFinder:
    def __init__(self, failing):
        self.failing = failing
        self.asked = []

    def find_player(self, nickname):
        self.asked.append(nickname)
        if nickname in self.failing:
            raise requests.ConnectionError("unreachable")
        return Player(id="id-" + nickname, name=nickname)


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def test_get_players_keeps_order_and_skips_failures(caplog):
    finder = FakeFinder({"bob"})
    processor = StatsProcessor(finder)
    info = DemoInfo(players=["alice", "bob", "carol"])
    with caplog.at_level(logging.ERROR, logger="csstats.stats"):
        players = processor.get_players(info)
    assert [p.name for p in players] == ["alice", "carol"]
    assert finder.asked == ["alice", "bob", "carol"]
    assert any("bob" in r.getMessage() for r in caplog.records)


def test_get_players_empty():
    processor = StatsProcessor(FakeFinder(set()))
    assert processor.get_players(DemoInfo()) == []


def test_get_players_unexpected_error_propagates():
    class Broken:
        def find_player(self, nickname):
            raise RuntimeError("boom")

    processor = StatsProcessor(Broken())
    with pytest.raises(RuntimeError):
        processor.get_players(DemoInfo(players=["alice"]))


def test_get_players_with_faceit_client(mocked):
    mocked.add(
        responses.GET,
        BASE + "/players",
        json={"player_id": "p1", "nickname": "alice", "steam_id_64": "s1"},
        match=[matchers.query_param_matcher({"nickname": "alice"})],
    )
    mocked.add(
        responses.GET,
        BASE + "/players",
        body="not json",
        match=[matchers.query_param_matcher({"nickname": "bob"})],
    )
    processor = StatsProcessor(FaceitClient(BASE, "token"))
    players = processor.get_players(DemoInfo(players=["alice", "bob", "dave"]))
    assert players == [Player(id="p1", name="alice", steam_id="s1")]


def test_process_demo_info_logs_player_stats(caplog):
    game = GameStats()
    shooter = EventPlayer("alice", Team.TERRORISTS, (1.0, 2.0))
    game.add(KillEvent(killer=shooter, is_headshot=True))
    game.add(FlashEvent(attacker=shooter, player=EventPlayer("bob")))
    info = DemoInfo(player="alice", map="de_ancient", game=game)
    processor = StatsProcessor(FakeFinder(set()))
    with caplog.at_level(logging.DEBUG, logger="csstats.stats"):
        processor.process_demo_info(info)
    messages = [r.getMessage() for r in caplog.records]
    kills = [m for m in messages if m.startswith("player kills")]
    flashes = [m for m in messages if m.startswith("player flashes")]
    assert len(kills) == 1 and "headshot_count=1" in kills[0]
    assert len(flashes) == 1 and "enemies_flashed=1" in flashes[0]


def test_process_demo_info_unknown_player_logs_none(caplog):
    processor = StatsProcessor(FakeFinder(set()), logging.getLogger("custom.stats"))
    with caplog.at_level(logging.DEBUG, logger="custom.stats"):
        processor.process_demo_info(DemoInfo(player="ghost"))
    messages = [r.getMessage() for r in caplog.records if r.name == "custom.stats"]
    assert messages == ["player kills: None", "player flashes: None"]


def test_demo_info_instances_do_not_share_state():
    first = DemoInfo()
    second = DemoInfo()
    first.players.append("alice")
    first.game.add(KillEvent(killer=EventPlayer("alice")))
    assert second.players == []
    assert second.game.kills == {}