#!/usr/bin/env python3
"""
Shape Gallery - Web Application
===============================
Draw a shape, label and grade it, and browse the saved drawings.

Run with: python -m shapegallery
Or: python -m shapegallery.app

Options:
    -q, --quiet     Quiet mode - suppress all output except errors
    -v, --verbose   Verbose mode - show debug logs and Flask request logs
    -p, --port      Port to run on (default from config, 5000)
    --host          Interface to bind (default from config, 127.0.0.1)
    --root          Public directory holding the shapes folder
    --no-browser    Don't auto-open browser
"""

import argparse
import logging
import os
import threading
import webbrowser
from typing import Optional

from flask import Flask

from .api import api
from .storage import ImageStore, get_store
from .user_config import get_user_config


# Logging levels
LOG_QUIET = 0    # No output except errors
LOG_MINIMAL = 1  # Startup info only (default)
LOG_VERBOSE = 2  # Debug output and all Flask request logs


def setup_logging(log_level: int = LOG_MINIMAL, level_name: str = 'INFO') -> logging.Logger:
    """Configure logging."""
    if log_level == LOG_QUIET:
        level = logging.ERROR
    elif log_level == LOG_VERBOSE:
        level = logging.DEBUG
    else:
        level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    return logging.getLogger(__name__)


def create_app(store: Optional[ImageStore] = None, log_level: int = LOG_MINIMAL) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        store: Image store the routes operate on. Uses the application
               store rooted at the configured public directory if None.
        log_level: Logging verbosity level

    Returns:
        Configured Flask app instance
    """
    package_dir = os.path.dirname(os.path.abspath(__file__))
    template_dir = os.path.join(package_dir, 'templates')

    app = Flask(__name__, template_folder=template_dir)

    if store is None:
        store = get_store(get_user_config().public_dir)
    app.extensions['shapegallery.store'] = store

    if log_level < LOG_VERBOSE:
        # Suppress Flask's default request logging
        log = logging.getLogger('werkzeug')
        log.setLevel(logging.ERROR if log_level == LOG_QUIET else logging.WARNING)

    app.register_blueprint(api)

    return app


def suppress_flask_banner():
    """Suppress Flask's development server banner and startup messages."""
    try:
        import flask.cli
        flask.cli.show_server_banner = lambda *args, **kwargs: None
    except (ImportError, AttributeError):
        pass

    logging.getLogger('werkzeug').setLevel(logging.ERROR)


def create_parser() -> argparse.ArgumentParser:
    config = get_user_config()

    parser = argparse.ArgumentParser(
        description='Shape Gallery - draw, label and browse shapes',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        '-q', '--quiet',
        action='store_true',
        help='Quiet mode - suppress all output except errors'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Verbose mode - show debug logs and Flask request logs'
    )
    parser.add_argument(
        '-p', '--port',
        type=int,
        default=config.port,
        help=f'Port to run the server on (default: {config.port})'
    )
    parser.add_argument(
        '--host',
        default=config.host,
        help=f'Interface to bind (default: {config.host})'
    )
    parser.add_argument(
        '--root',
        default=config.public_dir,
        help=f'Public directory holding the shapes folder (default: {config.public_dir})'
    )
    parser.add_argument(
        '--no-browser',
        action='store_true',
        help='Do not automatically open browser'
    )
    return parser


def main(argv: Optional[list] = None):
    """Main entry point for the web application."""
    args = create_parser().parse_args(argv)

    if args.quiet:
        log_level = LOG_QUIET
    elif args.verbose:
        log_level = LOG_VERBOSE
    else:
        log_level = LOG_MINIMAL

    logger = setup_logging(log_level, get_user_config().log_level)

    store = ImageStore(args.root)
    store.load()

    url = f'http://{args.host}:{args.port}'

    if log_level >= LOG_MINIMAL:
        print()
        print("  SHAPE GALLERY")
        print()
        print(f"  Images directory: {store.shapes_dir}")
        print(f"     -> {len(store)} images loaded")
        print(f"  Server running at: {url}")
        if not args.no_browser:
            print("     -> Opening in browser...")
        print()
        print("  Press Ctrl+C to stop")
        print()

    if log_level < LOG_VERBOSE:
        suppress_flask_banner()

    app = create_app(store, log_level)

    if not args.no_browser:
        threading.Timer(1.5, lambda: webbrowser.open(url)).start()

    try:
        app.run(
            host=args.host,
            port=args.port,
            debug=False,
            threaded=True,
            use_reloader=False
        )
    except KeyboardInterrupt:
        logger.info("Server stopped")


if __name__ == '__main__':
    main()
