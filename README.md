# peril

Game logic and message-broker helpers for **Peril**, a small multiplayer war
game. Players spawn units on six continents, move them, and go to war when
their armies meet. Moves, pauses and game logs are exchanged as JSON
messages through RabbitMQ.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `peril.routing`

Exchange names (`EXCHANGE_PERIL_DIRECT`, `EXCHANGE_PERIL_TOPIC`) and routing
keys (`ARMY_MOVES_PREFIX`, `WAR_RECOGNITIONS_PREFIX`, `PAUSE_KEY`,
`GAME_LOG_SLUG`), plus two message types:

- `PlayingState(is_paused)`: whether the game is paused.
- `GameLog(current_time, message, username)`: a player's log entry.
  `to_dict()` gives its wire form (`CurrentTime` as an ISO 8601 timestamp,
  `Message`, `Username`). `GameLog.from_dict(data)` reads it back. A missing
  field or a bad timestamp raises `ValueError`.

### `peril.gamedata`

- `UnitRank`: `INFANTRY`, `CAVALRY` and `ARTILLERY`.
- `Unit(id, rank, location)`, `Player(username, units)`,
  `ArmyMove(player, units, to_location)` and
  `RecognitionOfWar(attacker, defender)`.
- `all_ranks()` and `all_locations()`. The locations are americas, europe,
  africa, asia, australia and antarctica.
- `overlapping_location(p1, p2)` returns a location where both players have
  units, or `None`.
- `units_to_power_level(units)` adds up fighting power: artillery 10,
  cavalry 5, infantry 1.

### `peril.gamestate`

`GameState(username)` holds the local player's units and the pause flag,
behind a lock.

- `command_spawn(words)` handles `spawn <location> <rank>`. It returns the new
  `Unit`. Ids count up from 1.
- `command_move(words)` handles `move <location> <unitID>...`. It returns an
  `ArmyMove`. Moving is refused while the game is paused.
- `command_status()` prints the pause state and the player's units.
- `handle_move(move)` returns a `MoveOutcome`: `SAME_PLAYER`, `SAFE` or
  `MAKE_WAR`.
- `handle_pause(state)` pauses or resumes from a `PlayingState`.
- `handle_war(recognition)` returns `(WarOutcome, winner, loser)`. A player
  who loses or draws has their units in the contested location removed.

Invalid commands raise `GameError`. Lower-level accessors are `pause`,
`resume`, `is_paused`, `add_unit`, `update_unit`, `get_unit`,
`remove_units_in_location`, `units_snapshot` and `player_snapshot`.

### `peril.console`

Prompts and help text for a text client and server:

- `client_welcome()` asks for a username. It raises `GameError` if none is
  given.
- `get_input()` reads one line after a `> ` prompt and returns its words. It
  returns an empty list at end of input.
- `print_client_help()`, `print_server_help()` and `print_quit()`.
- `get_malicious_log()` returns a random quote for spam logs.

### `peril.logs`

- `format_log_line(gamelog)` returns the line `<RFC 3339 time> <username>: <message>`.
- `write_log(gamelog, path="game.log", delay=1.0)` waits `delay` seconds,
  then appends that line to `path`. A failure raises `OSError`.

### `peril.pubsub`

Helpers on top of `pika`:

- `declare_and_bind(conn, exchange, queue_name, key, queue_type)` opens a
  channel, declares a queue and binds it. It returns
  `(channel, queue_name)`. The queue type is a `SimpleQueueType`:
  - `DURABLE` declares a durable queue.
  - `TRANSIENT` declares an auto-deleting, exclusive queue.
- `publish_json(channel, exchange, key, value)` publishes `value` as JSON.
  Dataclasses are written with capitalised field names (`Username`, `Units`,
  `ToLocation`, `ID`, ...).

## Example

```python
from peril.gamestate import GameState

state = GameState("alice")
state.command_spawn(["spawn", "europe", "infantry"])
state.command_spawn(["spawn", "europe", "cavalry"])
move = state.command_move(["move", "asia", "1"])
state.command_status()
```

Publishing the move to the broker:

```python
import pika
from peril import routing
from peril.pubsub import publish_json

connection = pika.BlockingConnection(pika.ConnectionParameters("localhost"))
channel = connection.channel()
publish_json(channel, routing.EXCHANGE_PERIL_TOPIC, f"{routing.ARMY_MOVES_PREFIX}.alice", move)
```

## What this package does not do

The package gives you the building blocks only. It has none of the following:

- **No programs to run.** There is no client or server command, and no
  interactive loop that reads commands and dispatches them.
- **No message consumers.** Nothing subscribes to queues or decodes incoming
  messages back into moves or declarations of war.
- **No broker connection management.** You must open the connection yourself,
  for example with `pika.BlockingConnection`.