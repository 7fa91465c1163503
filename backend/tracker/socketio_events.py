from flask_socketio import join_room, leave_room, emit
from tracker import socketio, get_engine
from tracker.presenters import render_state

SESSION_ROOM = 'session'


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def handle_join_session(data=None):
    if data is not None and not isinstance(data, dict):
        emit('error', {'message': 'join_session payload must be an object'})
        return
    join_room(SESSION_ROOM)
    emit('joined', {'room': SESSION_ROOM})
    # Late joiners get the current state right away
    emit('state_update', render_state(get_engine()))


def handle_leave_session(data=None):
    if data is not None and not isinstance(data, dict):
        emit('error', {'message': 'leave_session payload must be an object'})
        return
    leave_room(SESSION_ROOM)
    emit('left', {'room': SESSION_ROOM})


def handle_ping(data=None):
    if data is not None and not isinstance(data, dict):
        emit('error', {'message': 'ping payload must be an object'})
        return
    emit('pong', data or {})


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    namespaces = ['/ws', '/'] if testing else ['/ws']
    for ns in namespaces:
        socketio.on_event('connect', handle_connect, namespace=ns)
        socketio.on_event('join_session', handle_join_session, namespace=ns)
        socketio.on_event('leave_session', handle_leave_session, namespace=ns)
        socketio.on_event('ping', handle_ping, namespace=ns)
