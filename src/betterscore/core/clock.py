"""
Game Clock

Counts the period clock and the power play clock down once per second.
"""

import logging
import threading
import time
from typing import Optional

logger = logging.getLogger(__name__)


class GameClock:
    """
    Stopped/Running state machine around a background tick thread.

    Each run gets its own stop event. A tick belonging to a run that has
    since been stopped is dropped, so nothing is decremented after stop()
    returns. The scoreboard lock guards all state changes.
    """

    def __init__(self, board, interval: float = 1.0):
        """
        Initialize the clock.

        Args:
            board: Scoreboard that owns the game state, lock and output
            interval: Seconds between ticks
        """
        self._board = board
        self.interval = interval
        self._stop_event: Optional[threading.Event] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        with self._board.lock:
            return self._stop_event is not None

    def start(self) -> None:
        """Start ticking. Does nothing if already running."""
        with self._board.lock:
            if self._stop_event is not None:
                return
            stop_event = threading.Event()
            self._stop_event = stop_event
            self._thread = threading.Thread(
                target=self._run_loop,
                args=(stop_event,),
                name="game-clock",
                daemon=True
            )
            self._thread.start()
        logger.info("Clock started")

    def stop(self) -> None:
        """Stop ticking. Does nothing if already stopped."""
        with self._board.lock:
            if self._stop_event is None:
                return
            thread = self._halt()

        if thread and thread is not threading.current_thread():
            thread.join(timeout=2.0)
        logger.info("Clock stopped")

    def _halt(self) -> Optional[threading.Thread]:
        # Caller holds the lock; the thread is left to exit on its own
        self._stop_event.set()
        self._stop_event = None
        thread, self._thread = self._thread, None
        return thread

    def reset(self) -> None:
        """Stop and put the full period length back on the clock."""
        self.stop()
        with self._board.lock:
            game = self._board.game
            game.seconds = self._board.period_seconds
            self._board.output.sync(game)
        logger.info(f"Clock reset to {self._board.period_seconds}s")

    def tick(self) -> bool:
        """
        Advance one second if running.

        Returns:
            True if the tick was applied, False if the clock is stopped
        """
        with self._board.lock:
            applied = self._tick(self._stop_event)
        if applied:
            self._board.notify_listeners()
        return applied

    def _tick(self, stop_event: Optional[threading.Event]) -> bool:
        # Caller holds the lock
        if stop_event is None or stop_event is not self._stop_event:
            return False

        game = self._board.game
        output = self._board.output

        if game.seconds > 0:
            game.seconds -= 1
            output.write_time(game.seconds)
        if game.seconds <= 0:
            game.seconds = 0
            logger.info("Period clock expired, clock stopped")
            self._halt()

        if game.power_play_active and game.power_play_seconds > 0:
            game.power_play_seconds -= 1
            output.write_power_play_time(game.power_play_seconds)
            if game.power_play_seconds == 0:
                logger.info(f"{game.power_play} expired")
                game.power_play = ""
                output.write_power_play("")

        return True

    def _run_loop(self, stop_event: threading.Event) -> None:
        """Tick every interval until this run's stop event is set."""
        # Fixed-step deadlines; time spent in a tick does not shift the schedule
        deadline = time.monotonic()
        while True:
            deadline += self.interval
            if stop_event.wait(max(0.0, deadline - time.monotonic())):
                break
            with self._board.lock:
                applied = self._tick(stop_event)
            if not applied:
                break
            self._board.notify_listeners()
