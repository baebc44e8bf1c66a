"""
BetterScore - Broadcast Scoreboard Controller

Main entry point. Prepares the output folder, writes the initial files
and serves the control API.
"""

import argparse
import logging

from .config import load_config, set_config
from .web.app import build_scoreboard, create_app, get_scoreboard, socketio


def setup_logging(debug: bool = False):
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="BetterScore - Broadcast Scoreboard Controller"
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to config file",
        default=None
    )
    parser.add_argument(
        "--output-dir", "-o",
        help="Folder for the overlay text files (default: ~/Documents/BetterScore)",
        default=None
    )
    parser.add_argument(
        "--host",
        help="Control API bind address (default: 127.0.0.1)",
        default=None
    )
    parser.add_argument(
        "--port", "-p",
        type=int,
        help="Control API port (default: 3000)",
        default=None
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    # Load configuration
    config = load_config(args.config)

    # Apply command line overrides
    if args.output_dir:
        config.output.directory = args.output_dir
    if args.host:
        config.web.host = args.host
    if args.port:
        config.web.port = args.port
    if args.debug:
        config.debug = True

    set_config(config)

    # Setup logging
    setup_logging(config.debug)
    logger = logging.getLogger("betterscore")

    logger.info("=" * 50)
    logger.info("BetterScore - Broadcast Scoreboard Controller")
    logger.info("=" * 50)

    board = build_scoreboard(config)
    board.output.prepare()
    if not board.sync():
        logger.warning(f"Initial files could not all be written to {board.output.directory}")
    logger.info(f"Writing overlay files to {board.output.directory}")

    app = create_app(board)

    logger.info(f"Control API running at http://{config.web.host}:{config.web.port}")
    logger.info("Press Ctrl+C to stop")

    try:
        socketio.run(
            app,
            host=config.web.host,
            port=config.web.port,
            debug=False,
            use_reloader=False,
            allow_unsafe_werkzeug=True
        )
    except KeyboardInterrupt:
        logger.info("Shutting down...")
    finally:
        active = get_scoreboard()
        if active:
            active.stop_clock()

    logger.info("BetterScore stopped")


if __name__ == "__main__":
    main()
