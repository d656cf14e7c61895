"""Provides an app factory for a demo page behind the waiting room."""

import logging
from typing import Any, Mapping, Optional

from flask import Flask, jsonify

from .app_logging import setup_logger
from .config import is_truthy
from .ext import WaitingRoom, exempt


def create_web_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    """Initialize a Flask app whose index page is protected."""
    app = Flask('roomq')
    app.config.from_object('roomq.config')
    if config:
        app.config.update(config)

    setup_logger(logging.DEBUG if is_truthy(app.config['ROOMQ_DEBUG'])
                 else logging.INFO)
    WaitingRoom(app)

    @app.route('/', methods=['GET'])
    def index() -> Any:
        return jsonify({'admitted': True})

    @app.route('/health', methods=['GET'])
    @exempt
    def health() -> Any:
        return jsonify({'status': 'ok'})

    return app
