"""
Main application module for the word guessing game API.

This module sets up the Flask application, registers the game and player
Blueprints, and defines the root route, error handlers and CLI commands.

Routes:
- /: Welcome message for the word guessing game API.

Error Handlers:
- 404 Not Found: Handles requests for non-existent routes and unknown game or player IDs.
- 500 Internal Server Error: Handles internal server errors.

CLI:
- flask --app word_guesser.app init-db: Creates the database tables.
"""

import logging

import click
from flask import Flask

from . import config
from .models.models import db
from .blueprints.games.routes import games_bp
from .blueprints.players.routes import players_bp
from .game.game import GameNotFoundError
from .game.players import PlayerNotFoundError
from .services.utils import create_response

logger = logging.getLogger(__name__)


def create_app(test_config=None):
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    app = Flask(__name__)
    app.config["SQLALCHEMY_DATABASE_URI"] = config.DATABASE_URL
    if test_config is not None:
        app.config.update(test_config)

    db.init_app(app)  # Bind the app with the SQLAlchemy instance
    app.register_blueprint(games_bp, url_prefix="/games")
    app.register_blueprint(players_bp, url_prefix="/players")

    with app.app_context():
        db.create_all()

    @app.route("/")
    def index():
        return create_response(data={"message": "Welcome to the word guessing game API!"})

    @app.errorhandler(404)
    def not_found(error):
        return create_response(error="Not Found", status_code=404)

    @app.errorhandler(GameNotFoundError)
    @app.errorhandler(PlayerNotFoundError)
    def id_not_found(error):
        return create_response(error=str(error), status_code=404)

    @app.errorhandler(500)
    def internal_server_error(error):
        logger.error("Unhandled error: %s", getattr(error, "original_exception", error))
        return create_response(error="Internal Server Error", status_code=500)

    @app.cli.command("init-db")
    def init_db_command():
        """Create the database tables."""
        db.create_all()
        click.echo("Initialized the database.")

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(debug=True)
