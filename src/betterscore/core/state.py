"""
BetterScore State Management

A single game record, owned by the Scoreboard controller. The clock and
every HTTP handler mutate it through the controller.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Optional, List, Callable

from .clock import GameClock
from .formatting import power_play_label

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    """Current game state."""
    home: int = 0
    away: int = 0
    period: int = 1
    seconds: int = 1200
    power_play: str = ""  # "PP: HOME", "PP: AWAY" or ""
    power_play_seconds: int = 0

    @property
    def power_play_active(self) -> bool:
        return bool(self.power_play)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "home": self.home,
            "away": self.away,
            "period": self.period,
            "powerPlay": self.power_play,
            "seconds": self.seconds,
            "powerPlaySeconds": self.power_play_seconds,
        }


def _valid_int(value, minimum: int, name: str) -> Optional[int]:
    """Return value if it is a whole number >= minimum, else None."""
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        logger.debug(f"Ignoring invalid {name}: {value!r}")
        return None
    return value


class Scoreboard:
    """
    Game state controller.

    Holds the one GameState, the text file writer and the game clock.
    Every mutation runs under one re-entrant lock and is followed by a
    full file sync before the lock is released, so request threads and
    the clock thread never interleave a change with its sync.
    """

    def __init__(
        self,
        output,
        period_seconds: int = 1200,
        power_play_seconds: int = 120,
        tick_interval: float = 1.0
    ):
        """
        Initialize the controller.

        Args:
            output: FileSync that mirrors the state to disk
            period_seconds: Game clock length restored by a clock reset
            power_play_seconds: Countdown started by a new power play
            tick_interval: Seconds between clock ticks
        """
        self.lock = threading.RLock()
        self.output = output
        self.period_seconds = period_seconds
        self.power_play_seconds = power_play_seconds
        self._game = GameState(seconds=period_seconds)
        self._listeners: List[Callable[[], None]] = []
        self.clock = GameClock(self, interval=tick_interval)

    @property
    def game(self) -> GameState:
        """Get current game state."""
        with self.lock:
            return self._game

    def snapshot(self) -> dict:
        """Get a consistent copy of the game state as a dictionary."""
        with self.lock:
            return self._game.to_dict()

    def to_dict(self) -> dict:
        """Get game state plus clock status, as pushed to live clients."""
        with self.lock:
            return {
                "game": self._game.to_dict(),
                "clock_running": self.clock.running,
            }

    # ============ Listeners ============

    def add_listener(self, callback: Callable[[], None]) -> None:
        """Add a state change listener."""
        with self.lock:
            if callback not in self._listeners:
                self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[], None]) -> None:
        """Remove a state change listener."""
        with self.lock:
            if callback in self._listeners:
                self._listeners.remove(callback)

    def notify_listeners(self) -> None:
        """Notify all listeners of state change."""
        with self.lock:
            listeners = self._listeners.copy()
        for callback in listeners:
            try:
                callback()
            except Exception as e:
                logger.error(f"State listener error: {e}")

    # ============ Sync ============

    def sync(self) -> bool:
        """Write every field to its output file."""
        with self.lock:
            return self.output.sync(self._game)

    def _commit(self) -> None:
        # Caller holds the lock
        self.output.sync(self._game)

    # ============ Score ============

    def score_home(self) -> None:
        with self.lock:
            self._game.home += 1
            logger.debug(f"Home scores ({self._game.home}-{self._game.away})")
            self._commit()
        self.notify_listeners()

    def score_away(self) -> None:
        with self.lock:
            self._game.away += 1
            logger.debug(f"Away scores ({self._game.home}-{self._game.away})")
            self._commit()
        self.notify_listeners()

    def reset_score(self) -> None:
        with self.lock:
            self._game.home = 0
            self._game.away = 0
            self._commit()
        self.notify_listeners()

    def set_score(self, home=None, away=None) -> None:
        """
        Overwrite the scores.

        Args:
            home: New home score; None or invalid keeps the current value
            away: New away score; None or invalid keeps the current value
        """
        with self.lock:
            home = _valid_int(home, 0, "home score")
            away = _valid_int(away, 0, "away score")
            if home is not None:
                self._game.home = home
            if away is not None:
                self._game.away = away
            logger.debug(f"Score set to {self._game.home}-{self._game.away}")
            self._commit()
        self.notify_listeners()

    # ============ Period ============

    def next_period(self) -> None:
        with self.lock:
            self._game.period += 1
            logger.debug(f"Period advanced to {self._game.period}")
            self._commit()
        self.notify_listeners()

    def reset_period(self) -> None:
        with self.lock:
            self._game.period = 1
            self._commit()
        self.notify_listeners()

    def set_period(self, period=None) -> None:
        """Overwrite the period; None or anything below 1 is ignored."""
        with self.lock:
            period = _valid_int(period, 1, "period")
            if period is not None:
                self._game.period = period
            self._commit()
        self.notify_listeners()

    # ============ Power play ============

    def set_power_play(self, side: str) -> None:
        """
        Give a side the power play.

        A new countdown only starts when none is running; switching or
        repeating the side keeps the remaining time.

        Args:
            side: "home" or "away"

        Raises:
            ValueError: If side is not home or away
        """
        label = power_play_label(side)
        with self.lock:
            self._game.power_play = label
            if self._game.power_play_seconds == 0:
                self._game.power_play_seconds = self.power_play_seconds
            logger.debug(f"{label} ({self._game.power_play_seconds}s)")
            self._commit()
        self.notify_listeners()

    def clear_power_play(self) -> None:
        with self.lock:
            self._game.power_play = ""
            self._game.power_play_seconds = 0
            self._commit()
        self.notify_listeners()

    def set_power_play_time(self, seconds=None) -> None:
        """Overwrite the power play countdown; 0 also ends the power play."""
        with self.lock:
            seconds = _valid_int(seconds, 0, "power play seconds")
            if seconds is not None:
                self._game.power_play_seconds = seconds
            if self._game.power_play_seconds == 0:
                self._game.power_play = ""
            self._commit()
        self.notify_listeners()

    # ============ Clock ============

    def start_clock(self) -> None:
        self.clock.start()
        self.notify_listeners()

    def stop_clock(self) -> None:
        self.clock.stop()
        self.notify_listeners()

    def reset_clock(self) -> None:
        self.clock.reset()
        self.notify_listeners()

    def set_time(self, seconds=None) -> None:
        """
        Overwrite the game clock.

        The clock is stopped first so a pending tick cannot decrement the
        new value.
        """
        self.clock.stop()
        with self.lock:
            seconds = _valid_int(seconds, 0, "seconds")
            if seconds is not None:
                self._game.seconds = seconds
            logger.debug(f"Time set to {self._game.seconds}s")
            self._commit()
        self.notify_listeners()
