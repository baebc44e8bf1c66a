"""Tests for the text file output."""

import logging

from betterscore.core.state import GameState
from betterscore.output.files import (
    FileSync,
    ALL_FILES,
    HOME_SCORE_FILE,
    AWAY_SCORE_FILE,
    PERIOD_FILE,
    TIME_FILE,
    POWER_PLAY_FILE,
    POWER_PLAY_TIME_FILE,
)


def test_sync_writes_all_six_files(files, output_dir):
    game = GameState(home=3, away=1, period=2, seconds=754,
                     power_play="PP: AWAY", power_play_seconds=65)

    assert files.sync(game) is True

    assert sorted(p.name for p in output_dir.iterdir()) == sorted(ALL_FILES)
    assert files.read(HOME_SCORE_FILE) == "3"
    assert files.read(AWAY_SCORE_FILE) == "1"
    assert files.read(PERIOD_FILE) == "2nd"
    assert files.read(TIME_FILE) == "12:34"
    assert files.read(POWER_PLAY_FILE) == "PP: AWAY"
    assert files.read(POWER_PLAY_TIME_FILE) == "1:05"


def test_default_state_files(files):
    files.sync(GameState())

    assert files.read(PERIOD_FILE) == "1st"
    assert files.read(TIME_FILE) == "20:00"
    assert files.read(POWER_PLAY_FILE) == ""
    assert files.read(POWER_PLAY_TIME_FILE) == "0:00"


def test_write_overwrites_previous_content(files):
    files.write(TIME_FILE, "20:00")
    files.write(TIME_FILE, "9:59")

    assert files.read(TIME_FILE) == "9:59"


def test_prepare_creates_nested_directory(tmp_path, caplog):
    target = tmp_path / "Documents" / "BetterScore"
    files = FileSync(target)

    with caplog.at_level(logging.INFO):
        assert files.prepare() is True

    assert target.is_dir()
    assert "Created BetterScore folder" in caplog.text


def test_prepare_existing_directory_is_quiet(files, caplog):
    with caplog.at_level(logging.INFO):
        assert files.prepare() is True
    assert "Created" not in caplog.text


def test_write_retries_after_directory_removed(tmp_path):
    target = tmp_path / "gone"
    files = FileSync(target)

    assert files.write(HOME_SCORE_FILE, "4") is True
    assert files.read(HOME_SCORE_FILE) == "4"


def test_write_failure_is_reported_not_raised(tmp_path, caplog):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x")
    files = FileSync(blocker)

    with caplog.at_level(logging.WARNING):
        assert files.write(TIME_FILE, "1:00") is False
        assert files.sync(GameState()) is False

    assert "Giving up on time.txt" in caplog.text


def test_read_missing_file_is_empty(files):
    assert files.read(TIME_FILE) == ""
