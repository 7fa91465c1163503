from flask import Flask, current_app
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from config import Config

socketio = SocketIO(async_mode=None)


def get_engine():
    """Return the GameEngine bound to the current app."""
    return current_app.extensions['game_engine']


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    allowed_origins = flask_app.config.get('CORS_ORIGINS', [])

    CORS(flask_app, supports_credentials=True, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One in-memory session per app
    from tracker.services.game import GameEngine
    from tracker.services.game.clock import time_formatter
    flask_app.extensions['game_engine'] = GameEngine(
        time_format=time_formatter(flask_app.config.get('LOG_TIME_FORMAT', '%I:%M:%S %p')),
        initial_players=int(flask_app.config.get('DEFAULT_ROSTER_SIZE', 2)),
    )

    # Import and register blueprints here
    from tracker.main import main
    flask_app.register_blueprint(main)

    from tracker.api.session import session
    flask_app.register_blueprint(session, url_prefix='/api/session')

    from tracker.socketio_events import register_socketio_handlers
    register_socketio_handlers(testing=flask_app.config.get('TESTING', False))

    @click.command('session-reset')
    def session_reset_command():
        """Resets the in-memory session to its starting roster."""
        with flask_app.app_context():
            players = get_engine().reset()
            print(f'Session has been reset with {len(players)} players!')

    @click.command('stat-types')
    def stat_types_command():
        """Prints the recordable stat labels."""
        from tracker.services.game import STAT_TYPES
        for label in STAT_TYPES:
            print(label)

    flask_app.cli.add_command(session_reset_command)
    flask_app.cli.add_command(stat_types_command)

    return flask_app
