import os
import sys
import pytest

# Ensure the backend root (containing the `tracker` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from tracker import create_app, socketio
from tracker.services.game import GameEngine


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    DEFAULT_ROSTER_SIZE = 2
    LOG_TIME_FORMAT = '%H:%M:%S'
    CORS_ORIGINS = ['http://localhost:5173']


class ManualClock:
    """Clock test double: returns a fixed epoch-ms reading until moved."""

    def __init__(self, start=0.0):
        self.now = float(start)

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms

    def set(self, ms):
        self.now = float(ms)


def fixed_format(timestamp_ms):
    return f"t={int(timestamp_ms)}"


@pytest.fixture()
def clock():
    return ManualClock(start=1_000_000)


@pytest.fixture()
def engine(clock):
    return GameEngine(clock=clock, time_format=fixed_format, initial_players=2)


@pytest.fixture()
def flask_app(clock):
    application = create_app(TestConfig)
    application.extensions['game_engine'].clock = clock
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    if test_client.is_connected('/ws'):
        test_client.disconnect(namespace='/ws')
