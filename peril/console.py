"""Console prompts and messages shown to players and the server operator."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterable

from peril.gamestate import GameError

MALICIOUS_LOGS = (
    "Never interrupt your enemy when he is making a mistake.",
    "The hardest thing of all for a soldier is to retreat.",
    "A soldier will fight long and hard for a bit of colored ribbon.",
    "It is well that war is so terrible, otherwise we should grow too fond of it.",
    "The art of war is simple enough. Find out where your enemy is. Get at him as "
    "soon as you can. Strike him as hard as you can, and keep moving on.",
    "All warfare is based on deception.",
)

QUIT_MESSAGE = "I hate this game! (╯°□°)╯︵ ┻━┻"

# Each entry is a command's usage and, where there is one, an example call.
_CLIENT_COMMANDS: tuple[tuple[str, str | None], ...] = (
    ("move <location> <unitID> <unitID> <unitID>...", "move asia 1"),
    ("spawn <location> <rank>", "spawn europe infantry"),
    ("status", None),
    ("spam <n>", "spam 5"),
    ("quit", None),
    ("help", None),
)

_SERVER_COMMANDS: tuple[tuple[str, str | None], ...] = (
    ("pause", None),
    ("resume", None),
    ("quit", None),
    ("help", None),
)


def _format_help(commands: Iterable[tuple[str, str | None]]) -> str:
    lines = ["Possible commands:"]
    for usage, example in commands:
        lines.append(f"* {usage}")
        if example is not None:
            lines.append("    example:")
            lines.append(f"    {example}")
    return "\n".join(lines)


def _emit(text: str) -> str:
    sys.stdout.write(text + "\n")
    return text


def print_client_help() -> str:
    """Show the client's commands and return the text shown."""
    return _emit(_format_help(_CLIENT_COMMANDS))


def print_server_help() -> str:
    """Show the server's commands and return the text shown."""
    return _emit(_format_help(_SERVER_COMMANDS))


def get_input() -> list[str]:
    """Prompt for a line and return its words; empty at end of input."""
    try:
        line = input("> ")
    except EOFError:
        return []
    return line.split()


def client_welcome() -> str:
    """Greet the player and ask for a username."""
    print("Welcome to the Peril client!")
    print("Please enter your username:")
    words = get_input()
    if not words:
        raise GameError("you must enter a username. goodbye")
    username = words[0]
    print(f"Welcome, {username}!")
    print_client_help()
    return username


def get_malicious_log() -> str:
    """Return a random quote for spam logs."""
    return random.choice(MALICIOUS_LOGS)


def print_quit() -> str:
    """Show the farewell message and return it."""
    return _emit(QUIT_MESSAGE)