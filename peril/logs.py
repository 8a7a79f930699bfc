"""Appending players' game logs to the log file on disk."""

from __future__ import annotations

import logging
import os
import time
from datetime import datetime

from peril.routing import GameLog

LOGS_FILE = "game.log"
WRITE_TO_DISK_SLEEP = 1.0

_logger = logging.getLogger(__name__)


def _rfc3339(moment: datetime) -> str:
    if moment.tzinfo is None or moment.utcoffset() is None:
        moment = moment.astimezone()
    text = moment.replace(microsecond=0).isoformat()
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text


def format_log_line(gamelog: GameLog) -> str:
    """Return the line written to disk for a log entry, newline included."""
    return f"{_rfc3339(gamelog.current_time)} {gamelog.username}: {gamelog.message}\n"


def write_log(
    gamelog: GameLog,
    path: str | os.PathLike[str] = LOGS_FILE,
    delay: float = WRITE_TO_DISK_SLEEP,
) -> None:
    """Wait for the simulated disk delay, then append the entry to the file."""
    _logger.info("received game log...")
    time.sleep(delay)
    try:
        handle = open(path, "a", encoding="utf-8")
    except OSError as exc:
        raise OSError(f"could not open logs file: {exc}") from exc
    with handle:
        try:
            handle.write(format_log_line(gamelog))
        except OSError as exc:
            raise OSError(f"could not write to logs file: {exc}") from exc