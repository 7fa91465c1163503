from flask import Blueprint, jsonify
from tracker import get_engine

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the basketball stat tracker!'})

@main.route('/health')
def health():
    engine = get_engine()
    return jsonify({
        'status': 'ok',
        'players': len(engine.state.players),
        'log_entries': len(engine.get_log()),
    })
