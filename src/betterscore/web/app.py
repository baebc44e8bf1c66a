"""
BetterScore Web Application

Flask HTTP control surface for Stream Deck style controllers, with
WebSocket pushes of every state change.
"""

import logging
from typing import Optional

from flask import Flask, jsonify, request
from flask_socketio import SocketIO, emit

from ..config import get_config
from ..core.state import Scoreboard
from ..output.files import FileSync

logger = logging.getLogger(__name__)

socketio = SocketIO(cors_allowed_origins="*")

ACK = "OK"

# Active controller (set by main app or create_app)
_scoreboard: Optional[Scoreboard] = None


def set_scoreboard(board: Scoreboard) -> None:
    """Set the scoreboard instance driven by the API."""
    global _scoreboard
    _scoreboard = board


def get_scoreboard() -> Optional[Scoreboard]:
    """Get the scoreboard instance driven by the API."""
    return _scoreboard


def build_scoreboard(config=None) -> Scoreboard:
    """Create a scoreboard from configuration."""
    config = config or get_config()
    return Scoreboard(
        FileSync(config.output.directory),
        period_seconds=config.clock.period_seconds,
        power_play_seconds=config.clock.power_play_seconds,
        tick_interval=config.clock.tick_interval
    )


def _push_state() -> None:
    """Emit the active scoreboard state to live clients."""
    board = get_scoreboard()
    if board is not None:
        socketio.emit("state_update", board.to_dict())


def _ack():
    return ACK, 200, {"Content-Type": "text/plain; charset=utf-8"}


def _payload() -> dict:
    """Request JSON body; anything missing or malformed counts as empty."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return {}
    return data


def create_app(board: Optional[Scoreboard] = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        board: Scoreboard to control (default: built from config)

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)

    config = get_config()
    app.config["SECRET_KEY"] = "betterscore-secret-key"
    app.config["DEBUG"] = config.web.debug

    if board is None:
        board = build_scoreboard(config)

    # Only the active scoreboard pushes updates
    previous = get_scoreboard()
    if previous is not None and previous is not board:
        previous.remove_listener(_push_state)
    set_scoreboard(board)
    board.add_listener(_push_state)

    # Initialize SocketIO
    socketio.init_app(app)

    # ============ State ============

    @app.route("/state", methods=["GET"])
    def get_state():
        """Get current game state."""
        return jsonify(board.snapshot())

    # ============ Score ============

    @app.route("/score/home", methods=["POST"])
    def score_home():
        board.score_home()
        return _ack()

    @app.route("/score/away", methods=["POST"])
    def score_away():
        board.score_away()
        return _ack()

    @app.route("/score/reset", methods=["POST"])
    def reset_score():
        board.reset_score()
        return _ack()

    # ============ Period ============

    @app.route("/period/next", methods=["POST"])
    def next_period():
        board.next_period()
        return _ack()

    @app.route("/period/reset", methods=["POST"])
    def reset_period():
        board.reset_period()
        return _ack()

    # ============ Power Play ============

    @app.route("/pp/home", methods=["POST"])
    def power_play_home():
        board.set_power_play("home")
        return _ack()

    @app.route("/pp/away", methods=["POST"])
    def power_play_away():
        board.set_power_play("away")
        return _ack()

    @app.route("/pp/clear", methods=["POST"])
    def clear_power_play():
        board.clear_power_play()
        return _ack()

    # ============ Clock ============

    @app.route("/clock/start", methods=["POST"])
    def start_clock():
        board.start_clock()
        return _ack()

    @app.route("/clock/stop", methods=["POST"])
    def stop_clock():
        board.stop_clock()
        return _ack()

    @app.route("/clock/reset", methods=["POST"])
    def reset_clock():
        board.reset_clock()
        return _ack()

    # ============ Direct Setters ============

    @app.route("/set/score", methods=["POST"])
    def set_score():
        """Set scores: {"home": int, "away": int}, both optional."""
        data = _payload()
        board.set_score(home=data.get("home"), away=data.get("away"))
        return _ack()

    @app.route("/set/period", methods=["POST"])
    def set_period():
        """Set period: {"period": int}."""
        board.set_period(_payload().get("period"))
        return _ack()

    @app.route("/set/time", methods=["POST"])
    def set_time():
        """Stop the clock and set it: {"seconds": int}."""
        board.set_time(_payload().get("seconds"))
        return _ack()

    @app.route("/set/pp/time", methods=["POST"])
    def set_power_play_time():
        """Set power play countdown: {"seconds": int}. 0 ends the power play."""
        board.set_power_play_time(_payload().get("seconds"))
        return _ack()

    # ============ WebSocket Events ============

    @socketio.on("connect")
    def handle_connect():
        """Handle client connection."""
        logger.info("WebSocket client connected")
        emit("state_update", board.to_dict())

    @socketio.on("disconnect")
    def handle_disconnect(reason=None):
        """Handle client disconnection."""
        logger.info("WebSocket client disconnected")

    @socketio.on("request_state")
    def handle_request_state():
        """Handle state request from client."""
        emit("state_update", board.to_dict())

    return app
