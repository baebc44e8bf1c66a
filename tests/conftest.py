"""
Pytest configuration and shared fixtures.

Provides:
- Temporary output folder for the overlay text files
- Scoreboard wired to that folder
- Flask app and HTTP test client
"""

import sys
from pathlib import Path

import pytest

# Make the src/ layout importable without installing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from betterscore.config import Config, set_config
from betterscore.core.state import Scoreboard
from betterscore.output.files import FileSync
from betterscore.web.app import create_app


# ============================================================================
# CONFIG FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def default_config(tmp_path):
    """Use built-in defaults so a local config file cannot leak into tests."""
    config = Config()
    config.output.directory = tmp_path / "BetterScore"
    set_config(config)
    yield config
    set_config(None)


# ============================================================================
# SCOREBOARD FIXTURES
# ============================================================================

@pytest.fixture
def output_dir(tmp_path) -> Path:
    """Output folder for the text files (created by the fixture)."""
    directory = tmp_path / "overlay"
    directory.mkdir()
    return directory


@pytest.fixture
def files(output_dir) -> FileSync:
    return FileSync(output_dir)


@pytest.fixture
def board(files):
    """
    Scoreboard whose background thread never ticks on its own.

    Tests drive the clock with board.clock.tick().
    """
    scoreboard = Scoreboard(files, tick_interval=3600)
    yield scoreboard
    scoreboard.stop_clock()


# ============================================================================
# WEB FIXTURES
# ============================================================================

@pytest.fixture
def app(board):
    application = create_app(board)
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    return app.test_client()
