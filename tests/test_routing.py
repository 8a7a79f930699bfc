from datetime import datetime, timedelta, timezone

import pytest

from peril.routing import GameLog, PlayingState


def test_playing_state_equality():
    assert PlayingState(is_paused=True) == PlayingState(True)
    assert PlayingState(True) != PlayingState(False)


def test_game_log_to_dict_uses_z_for_utc():
    log = GameLog(datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc), "hello", "alice")
    data = log.to_dict()
    assert data == {
        "CurrentTime": "2024-01-02T03:04:05Z",
        "Message": "hello",
        "Username": "alice",
    }


@pytest.mark.parametrize(
    "moment",
    [
        datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        datetime(2023, 6, 7, 8, 9, 10, 123456, tzinfo=timezone.utc),
        datetime(2022, 12, 31, 23, 59, 59, 5, tzinfo=timezone(timedelta(hours=-5))),
    ],
)
def test_game_log_round_trip(moment):
    log = GameLog(moment, "all warfare is based on deception", "bob")
    assert GameLog.from_dict(log.to_dict()) == log


def test_from_dict_truncates_nanoseconds():
    log = GameLog.from_dict(
        {"CurrentTime": "2024-01-02T03:04:05.123456789Z", "Message": "m", "Username": "u"}
    )
    assert log.current_time.microsecond == 123456
    assert log.current_time.tzinfo is not None
    assert log.current_time.utcoffset() == timedelta(0)


def test_from_dict_short_fraction():
    log = GameLog.from_dict(
        {"CurrentTime": "2024-01-02T03:04:05.5+02:00", "Message": "m", "Username": "u"}
    )
    assert log.current_time.microsecond == 500000
    assert log.current_time.utcoffset() == timedelta(hours=2)


def test_from_dict_missing_field():
    with pytest.raises(ValueError):
        GameLog.from_dict({"CurrentTime": "2024-01-02T03:04:05Z", "Message": "m"})


def test_from_dict_bad_time():
    with pytest.raises(ValueError):
        GameLog.from_dict({"CurrentTime": "yesterday", "Message": "m", "Username": "u"})