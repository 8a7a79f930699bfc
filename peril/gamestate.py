"""A player's view of the game and the commands that change it."""

from __future__ import annotations

import re
import threading
from dataclasses import replace
from enum import Enum, auto
from typing import Optional, Sequence

from peril.gamedata import (
    ArmyMove,
    Player,
    RecognitionOfWar,
    Unit,
    UnitRank,
    all_locations,
    all_ranks,
    overlapping_location,
    units_to_power_level,
)
from peril.routing import PlayingState

_SEPARATOR = "------------------------"
_INTEGER = re.compile(r"[+-]?[0-9]+")


class MoveOutcome(Enum):
    SAME_PLAYER = auto()
    SAFE = auto()
    MAKE_WAR = auto()


class WarOutcome(Enum):
    NOT_INVOLVED = auto()
    NO_UNITS = auto()
    YOU_WON = auto()
    OPPONENT_WON = auto()
    DRAW = auto()


class GameError(Exception):
    """A command could not be carried out."""


class GameState:
    """Thread-safe state of the local player."""

    def __init__(self, username: str) -> None:
        self._player = Player(username=username, units={})
        self._paused = False
        self._lock = threading.RLock()

    @property
    def username(self) -> str:
        return self._player.username

    @property
    def is_paused(self) -> bool:
        with self._lock:
            return self._paused

    def pause(self) -> None:
        with self._lock:
            self._paused = True

    def resume(self) -> None:
        with self._lock:
            self._paused = False

    def add_unit(self, unit: Unit) -> None:
        with self._lock:
            self._player.units[unit.id] = unit

    def update_unit(self, unit: Unit) -> None:
        with self._lock:
            self._player.units[unit.id] = unit

    def get_unit(self, unit_id: int) -> Optional[Unit]:
        with self._lock:
            return self._player.units.get(unit_id)

    def remove_units_in_location(self, location: str) -> None:
        with self._lock:
            self._player.units = {
                uid: unit
                for uid, unit in self._player.units.items()
                if unit.location != location
            }

    def units_snapshot(self) -> list[Unit]:
        with self._lock:
            return list(self._player.units.values())

    def player_snapshot(self) -> Player:
        with self._lock:
            return Player(username=self._player.username, units=dict(self._player.units))

    def command_status(self) -> None:
        """Print whether the game is paused and, if not, the player's units."""
        if self.is_paused:
            print("The game is paused.")
            return
        print("The game is not paused.")
        player = self.player_snapshot()
        print(f"You are {player.username}, and you have {len(player.units)} units.")
        for unit in player.units.values():
            print(f"* {unit.id}: {unit.location}, {unit.rank}")

    def command_spawn(self, words: Sequence[str]) -> Unit:
        """Spawn a unit from a `spawn <location> <rank>` command."""
        if len(words) < 3:
            raise GameError("usage: spawn <location> <rank>")
        location, rank = words[1], words[2]
        if location not in all_locations():
            raise GameError(f"error: {location} is not a valid location")
        if rank not in all_ranks():
            raise GameError(f"error: {rank} is not a valid unit")
        with self._lock:
            unit = Unit(id=len(self._player.units) + 1, rank=UnitRank(rank), location=location)
            self.add_unit(unit)
        print(f"Spawned a(n) {rank} in {location} with id {unit.id}")
        return unit

    def command_move(self, words: Sequence[str]) -> ArmyMove:
        """Move units from a `move <location> <unitID>...` command."""
        if self.is_paused:
            raise GameError("the game is paused, you can not move units")
        if len(words) < 3:
            raise GameError("usage: move <location> <unitID> <unitID> <unitID> etc")
        location = words[1]
        if location not in all_locations():
            raise GameError(f"error: {location} is not a valid location")
        unit_ids = []
        for word in words[2:]:
            if not _INTEGER.fullmatch(word):
                raise GameError(f"error: {word} is not a valid unit ID")
            unit_ids.append(int(word))
        for unit_id in unit_ids:
            unit = self.get_unit(unit_id)
            if unit is None:
                raise GameError(f"error: unit with ID {unit_id} not found")
            self.update_unit(replace(unit, location=location))
        move = ArmyMove(
            player=self.player_snapshot(),
            units=self.units_snapshot(),
            to_location=location,
        )
        print(f"Moved {len(move.units)} units to {move.to_location}")
        return move

    def handle_move(self, move: ArmyMove) -> MoveOutcome:
        """React to another player's army move."""
        try:
            player = self.player_snapshot()
            print()
            print("==== Move Detected ====")
            print(
                f"{move.player.username} is moving {len(move.units)} unit(s) "
                f"to {move.to_location}"
            )
            for unit in move.units:
                print(f"* {unit.rank}")
            if player.username == move.player.username:
                return MoveOutcome.SAME_PLAYER
            location = overlapping_location(player, move.player)
            if location is not None:
                print(
                    f"You have units in {location}! "
                    f"You are at war with {move.player.username}!"
                )
                return MoveOutcome.MAKE_WAR
            print(f"You are safe from {move.player.username}'s units.")
            return MoveOutcome.SAFE
        finally:
            print(_SEPARATOR)

    def handle_pause(self, state: PlayingState) -> None:
        """Pause or resume the game as the server says."""
        try:
            print()
            if state.is_paused:
                print("==== Pause Detected ====")
                self.pause()
            else:
                print("==== Resume Detected ====")
                self.resume()
        finally:
            print(_SEPARATOR)

    def handle_war(
        self, recognition: RecognitionOfWar
    ) -> tuple[WarOutcome, str, str]:
        """Fight a declared war; return the outcome, winner and loser."""
        try:
            return self._fight(recognition)
        finally:
            print(_SEPARATOR)

    def _fight(self, rw: RecognitionOfWar) -> tuple[WarOutcome, str, str]:
        attacker, defender = rw.attacker, rw.defender
        print()
        print("==== War Declared ====")
        print(f"{attacker.username} has declared war on {defender.username}!")

        player = self.player_snapshot()
        if player.username == defender.username:
            print(f"{player.username}, you published the war.")
            return WarOutcome.NOT_INVOLVED, "", ""
        if player.username != attacker.username:
            print(f"{player.username}, you are not involved in this war.")
            return WarOutcome.NOT_INVOLVED, "", ""

        location = overlapping_location(attacker, defender)
        if location is None:
            print("Error! No units are in the same location. No war will be fought.")
            return WarOutcome.NO_UNITS, "", ""

        attacker_units = [u for u in attacker.units.values() if u.location == location]
        defender_units = [u for u in defender.units.values() if u.location == location]
        for side, units in ((attacker, attacker_units), (defender, defender_units)):
            print(f"{side.username}'s units:")
            for unit in units:
                print(f"  * {unit.rank}")

        attacker_power = units_to_power_level(attacker_units)
        defender_power = units_to_power_level(defender_units)
        print(f"Attacker has a power level of {attacker_power}")
        print(f"Defender has a power level of {defender_power}")

        if attacker_power > defender_power:
            print(f"{attacker.username} has won the war!")
            return WarOutcome.YOU_WON, attacker.username, defender.username
        if defender_power > attacker_power:
            print(f"{defender.username} has won the war!")
            print("You have lost the war!")
            self.remove_units_in_location(location)
            print(f"Your units in {location} have been killed.")
            return WarOutcome.OPPONENT_WON, defender.username, attacker.username
        print("The war ended in a draw!")
        print(f"Your units in {location} have been killed.")
        self.remove_units_in_location(location)
        return WarOutcome.DRAW, attacker.username, defender.username