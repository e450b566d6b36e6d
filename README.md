# csstats

A library for collecting Counter-Strike match statistics, querying the FACEIT
data API and drawing player positions on map images.

## Modules

- `csstats.game`: accumulate per-player kill and flash statistics from match
  events. Events are described with `KillEvent` and `FlashEvent`, whose
  participants are `EventPlayer` values (name, `Team`, optional `(x, y)`
  position) and whose weapon is a `Weapon`. `GameStats.add()` records an
  event under the killer's or attacker's nickname; events of other kinds are
  ignored. A `Kill` keeps an overall `KillCounter`, one per side, one per
  weapon type, and the killer's positions in a `PositionsManager`. Everything
  can be turned into plain dictionaries with `to_dict()`.
- `csstats.stats`: `DemoInfo` (followed player, map name, participants and
  their `GameStats`), `DemoConfig`, and `StatsProcessor`, which logs the
  followed player's kills and flashes (`process_demo_info`) and looks every
  participant up on FACEIT (`get_players`), skipping and logging those whose
  lookup fails.
- `csstats.faceit`: `FaceitClient(base, key)` sends the key as the
  `Authorization` header on every request. An empty or missing key raises
  `AuthKeyError`. It offers `find_player`, `get_match` and `get_matches`,
  which return typed results, and `get_cs`, `get_player` and `get_stats`,
  which return the raw response text.
- `csstats.faceit_models`: the result types `Player`, `Game`, `Match` and
  `MatchTab`, and `parse_player`, `parse_match` and `parse_match_tab`, which
  accept JSON text or an already decoded mapping and raise `ValueError` on
  fields of the wrong type.
- `csstats.frames`: `load_map_image`, `draw_dot` (a red dot of radius 10,
  clipped to the image, on an RGBA image) and `create_frame`, which writes
  `frame_NNN.png` into an existing directory and returns its path.

## Installation

```
pip install .
```

Install the test requirements with `pip install .[test]`.

## Examples

Counting kills:

```python
from csstats.game import EventPlayer, GameStats, KillEvent, Team, Weapon

stats = GameStats()
killer = EventPlayer(name="alice", team=Team.TERRORISTS, position=(120.0, -40.0))
stats.add(KillEvent(killer=killer, weapon=Weapon("AK-47"), is_headshot=True))

print(stats.to_dict()["kills"]["alice"]["overall"])
# {'count': 1, 'headshot_count': 1}
```

Querying FACEIT:

```python
from csstats.faceit import FaceitClient

client = FaceitClient("https://api.example.com/data/v4", "placeholder")
player = client.find_player("alice")
print(player.id, player.name, player.games)
```

Rendering a frame:

```python
from csstats.frames import create_frame, load_map_image

img = load_map_image("static/de_ancient.png")
create_frame(img, "output_frames", 0, 512.0, 300.0)  # writes output_frames/frame_000.png
```

## What this package does not do

- It does not read demo files. `DemoInfo` and the events in `csstats.game`
  have to be filled in by the caller.
- It has no server, no network service for replaying a demo and no command
  line program; it is used as a library only.