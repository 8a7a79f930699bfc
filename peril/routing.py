"""Exchange names, routing keys and the messages passed between server and clients."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

ARMY_MOVES_PREFIX = "army_moves"
WAR_RECOGNITIONS_PREFIX = "war"
PAUSE_KEY = "pause"
GAME_LOG_SLUG = "game_logs"

EXCHANGE_PERIL_DIRECT = "peril_direct"
EXCHANGE_PERIL_TOPIC = "peril_topic"

_TIMESTAMP = re.compile(r"^(.*T\d{2}:\d{2}:\d{2})(?:\.(\d+))?(.*)$")


def _format_time(moment: datetime) -> str:
    text = moment.isoformat()
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text


def _parse_time(text: str) -> datetime:
    match = _TIMESTAMP.match(text.strip())
    if match is None:
        raise ValueError(f"invalid timestamp: {text!r}")
    base, fraction, offset = match.groups()
    if offset in ("Z", "z"):
        offset = "+00:00"
    normalised = base
    if fraction:
        normalised += "." + (fraction + "000000")[:6]
    return datetime.fromisoformat(normalised + offset)


@dataclass(frozen=True)
class PlayingState:
    """Whether the game is currently paused."""

    is_paused: bool


@dataclass(frozen=True)
class GameLog:
    """A log line produced by a player."""

    current_time: datetime
    message: str
    username: str

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation of the log entry."""
        return {
            "CurrentTime": _format_time(self.current_time),
            "Message": self.message,
            "Username": self.username,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GameLog":
        """Build a log entry from its wire representation."""
        try:
            return cls(
                current_time=_parse_time(data["CurrentTime"]),
                message=data["Message"],
                username=data["Username"],
            )
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r}") from exc