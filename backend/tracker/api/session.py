from flask import Blueprint, jsonify, request, current_app
from tracker import socketio, get_engine
from tracker.presenters import render_log, render_players, render_state
from tracker.services.game import STAT_TYPES
from tracker.socketio_events import SESSION_ROOM

session = Blueprint('session', __name__)


def _broadcast_state() -> None:
    socketio.emit('state_update', render_state(get_engine()), to=SESSION_ROOM, namespace='/ws')


def _roster_response(snapshot, status=200):
    _broadcast_state()
    return jsonify({'players': render_players(snapshot)}), status


@session.route('/state', methods=['GET'])
def get_state():
    return jsonify(render_state(get_engine()))


@session.route('/log', methods=['GET'])
def get_log():
    return jsonify(render_log(get_engine().get_log()))


@session.route('/stat-types', methods=['GET'])
def get_stat_types():
    return jsonify(list(STAT_TYPES))


@session.route('/players', methods=['POST'])
def add_player():
    snapshot = get_engine().add_player()
    return _roster_response(snapshot, 201)


@session.route('/players/<int:index>', methods=['DELETE'])
def remove_player(index):
    engine = get_engine()
    before = len(engine.state.players)
    snapshot = engine.remove_player(index)
    if len(snapshot) == before:
        current_app.logger.debug(f"[remove-skip] index={index} roster_size={before}")
    return _roster_response(snapshot)


@session.route('/players/<int:index>', methods=['PATCH'])
def rename_player(index):
    data = request.get_json(silent=True) or {}
    name = data.get('name')
    if not isinstance(name, str):
        return jsonify({'error': 'Player name is required'}), 400
    snapshot = get_engine().rename_player(index, name)
    return _roster_response(snapshot)


@session.route('/players/<int:index>/stats', methods=['POST'])
def record_stat(index):
    data = request.get_json(silent=True) or {}
    stat = data.get('stat')
    if not isinstance(stat, str) or not stat.strip():
        return jsonify({'error': 'Stat kind is required'}), 400
    snapshot = get_engine().record_stat(index, stat)
    return _roster_response(snapshot)


@session.route('/players/<int:index>/sub-in', methods=['POST'])
def sub_in(index):
    snapshot = get_engine().sub_in(index)
    return _roster_response(snapshot)


@session.route('/players/<int:index>/sub-out', methods=['POST'])
def sub_out(index):
    snapshot = get_engine().sub_out(index)
    return _roster_response(snapshot)


@session.route('/reset', methods=['POST'])
def reset_session():
    snapshot = get_engine().reset()
    current_app.logger.info(f"[reset] players={len(snapshot)}")
    return _roster_response(snapshot)
