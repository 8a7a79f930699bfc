import io

import pytest

from peril import console
from peril.gamestate import GameError


def test_client_help(capsys):
    console.print_client_help()
    out = capsys.readouterr().out
    assert out.startswith("Possible commands:")
    assert "* spawn <location> <rank>" in out
    assert "    spawn europe infantry" in out
    assert out.rstrip().endswith("* help")


def test_server_help(capsys):
    console.print_server_help()
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Possible commands:", "* pause", "* resume", "* quit", "* help"]


def test_get_input_splits_words(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("  move   asia 1  \n"))
    assert console.get_input() == ["move", "asia", "1"]


def test_get_input_end_of_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert console.get_input() == []


def test_client_welcome(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("alice extra\n"))
    assert console.client_welcome() == "alice"
    out = capsys.readouterr().out
    assert "Welcome to the Peril client!" in out
    assert "Welcome, alice!" in out


@pytest.mark.parametrize("text", ["", "   \n"])
def test_client_welcome_without_name(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    with pytest.raises(GameError, match="you must enter a username"):
        console.client_welcome()


def test_malicious_log_is_known():
    for _ in range(20):
        assert console.get_malicious_log() in console.MALICIOUS_LOGS


def test_print_quit(capsys):
    console.print_quit()
    assert capsys.readouterr().out == "I hate this game! (╯°□°)╯︵ ┻━┻\n"