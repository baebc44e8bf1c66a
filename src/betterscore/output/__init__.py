"""BetterScore Output Modules"""

from .files import FileSync

__all__ = ["FileSync"]
