"""
BetterScore - Broadcast Scoreboard Controller

Keeps a hockey game state in memory, mirrors it to plain text files for
an overlay tool to poll, and exposes an HTTP control surface for a
control device such as a Stream Deck.
"""

__version__ = "1.0.0"
__author__ = "BetterScore Contributors"
