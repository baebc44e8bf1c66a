"""BetterScore Web Interface"""

from .app import create_app, socketio

__all__ = ["create_app", "socketio"]
