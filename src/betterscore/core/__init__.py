"""BetterScore Core Components"""

from .state import GameState, Scoreboard
from .clock import GameClock
from .formatting import format_time, format_ordinal

__all__ = ["GameState", "Scoreboard", "GameClock", "format_time", "format_ordinal"]
