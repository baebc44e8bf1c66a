"""
Display Formatting

Turns raw game values into the strings the overlay shows.
"""

POWER_PLAY_LABELS = {
    "home": "PP: HOME",
    "away": "PP: AWAY",
}


def format_time(seconds: int) -> str:
    """Format a second count as M:SS (minutes are not padded)."""
    seconds = max(0, seconds)
    minutes = seconds // 60
    return f"{minutes}:{seconds % 60:02d}"


def format_ordinal(n: int) -> str:
    """
    Format a period number as an English ordinal.

    11th, 12th and 13th override the last-digit rule, so 111 is "111th"
    while 121 is "121st".
    """
    if 11 <= n % 100 <= 13:
        return f"{n}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def power_play_label(side: str) -> str:
    """Get the overlay label for a power play side ("home" or "away")."""
    try:
        return POWER_PLAY_LABELS[side.lower()]
    except KeyError:
        raise ValueError(f"Invalid side {side!r}, must be home or away") from None
