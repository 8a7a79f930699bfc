"""Players, units and the messages describing their actions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional


class UnitRank(str, Enum):
    """The kinds of unit a player can spawn."""

    INFANTRY = "infantry"
    CAVALRY = "cavalry"
    ARTILLERY = "artillery"

    def __str__(self) -> str:
        return self.value


_POWER = {
    UnitRank.ARTILLERY: 10,
    UnitRank.CAVALRY: 5,
    UnitRank.INFANTRY: 1,
}

_LOCATIONS = frozenset(
    {"americas", "europe", "africa", "asia", "australia", "antarctica"}
)


@dataclass(frozen=True)
class Unit:
    """A single unit on the board."""

    id: int
    rank: UnitRank
    location: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "rank", UnitRank(self.rank))


@dataclass
class Player:
    """A player and the units it owns, keyed by unit id."""

    username: str
    units: dict[int, Unit] = field(default_factory=dict)


@dataclass
class ArmyMove:
    """A player moving units to a location."""

    player: Player
    units: list[Unit]
    to_location: str


@dataclass
class RecognitionOfWar:
    """An attacker declaring war on a defender."""

    attacker: Player
    defender: Player


def all_ranks() -> frozenset[UnitRank]:
    """Return every valid unit rank."""
    return frozenset(UnitRank)


def all_locations() -> frozenset[str]:
    """Return every valid location."""
    return _LOCATIONS


def overlapping_location(p1: Player, p2: Player) -> Optional[str]:
    """Return a location where both players have units, or None."""
    return next(
        (
            u1.location
            for u1 in p1.units.values()
            for u2 in p2.units.values()
            if u1.location == u2.location
        ),
        None,
    )


def units_to_power_level(units: Iterable[Unit]) -> int:
    """Return the combined fighting power of the units."""
    return sum(_POWER.get(unit.rank, 0) for unit in units)