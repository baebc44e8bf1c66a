"""
Text File Output

Mirrors the game state into one small text file per field. Overlay tools
(OBS text sources, vMix titles, ...) poll these files.
"""

import logging
from pathlib import Path
from typing import Union

from ..core.formatting import format_time, format_ordinal

logger = logging.getLogger(__name__)

HOME_SCORE_FILE = "home_score.txt"
AWAY_SCORE_FILE = "away_score.txt"
PERIOD_FILE = "period.txt"
TIME_FILE = "time.txt"
POWER_PLAY_FILE = "pp.txt"
POWER_PLAY_TIME_FILE = "pp_time.txt"

ALL_FILES = (
    HOME_SCORE_FILE,
    AWAY_SCORE_FILE,
    PERIOD_FILE,
    TIME_FILE,
    POWER_PLAY_FILE,
    POWER_PLAY_TIME_FILE,
)


class FileSync:
    """
    Writes game fields to text files in a fixed output directory.

    Every write replaces the whole file. The six files are written one
    after another, so a reader polling mid-sync can see a mix of old and
    new values across files.
    """

    def __init__(self, directory: Union[str, Path]):
        """
        Initialize the writer.

        Args:
            directory: Output directory for the text files
        """
        self.directory = Path(directory).expanduser()

    def path(self, name: str) -> Path:
        """Get the full path of an output file."""
        return self.directory / name

    def prepare(self) -> bool:
        """
        Make sure the output directory exists.

        Returns:
            True if the directory exists or was created
        """
        if self.directory.is_dir():
            return True
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Failed to create output folder {self.directory}: {e}")
            return False
        logger.info(f"Created BetterScore folder: {self.directory}")
        return True

    def write(self, name: str, content: str) -> bool:
        """
        Overwrite one output file.

        A failed write re-creates the directory and is retried once. A
        second failure is logged and reported, never raised.

        Returns:
            True if the file was written
        """
        path = self.path(name)
        try:
            path.write_text(content, encoding="utf-8")
            return True
        except OSError as e:
            logger.error(f"Failed to write {name}: {e}")

        self.prepare()
        try:
            path.write_text(content, encoding="utf-8")
            return True
        except OSError as e:
            logger.warning(f"Giving up on {name} after retry: {e}")
            return False

    def write_time(self, seconds: int) -> bool:
        return self.write(TIME_FILE, format_time(seconds))

    def write_power_play(self, label: str) -> bool:
        return self.write(POWER_PLAY_FILE, label)

    def write_power_play_time(self, seconds: int) -> bool:
        return self.write(POWER_PLAY_TIME_FILE, format_time(seconds))

    def sync(self, game) -> bool:
        """
        Write every display field of a game state.

        Args:
            game: GameState to mirror

        Returns:
            True if all six files were written
        """
        results = [
            self.write(HOME_SCORE_FILE, str(game.home)),
            self.write(AWAY_SCORE_FILE, str(game.away)),
            self.write(PERIOD_FILE, format_ordinal(game.period)),
            self.write_time(game.seconds),
            self.write_power_play(game.power_play),
            self.write_power_play_time(game.power_play_seconds),
        ]
        return all(results)

    def read(self, name: str) -> str:
        """Read back an output file (empty string if missing)."""
        try:
            return self.path(name).read_text(encoding="utf-8")
        except FileNotFoundError:
            return ""
