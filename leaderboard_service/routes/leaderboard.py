from flask import Blueprint, request, jsonify, current_app, url_for

from leaderboard_service.errors import EntryNotFound
from leaderboard_service.schemas import validate_entry_input

bp = Blueprint('leaderboard', __name__, url_prefix='/api/leaderboard')


def get_service():
    return current_app.leaderboard


@bp.route('', methods=['GET'])
def list_entries():
    """Ranked leaderboard, paginated with ?page=&pageSize=."""
    entries = get_service().list_entries(
        page=request.args.get('page', type=int),
        page_size=request.args.get('pageSize', type=int)
    )
    return jsonify([e.to_dict() for e in entries])


@bp.route('/<int:entry_id>', methods=['GET'])
def get_entry(entry_id: int):
    entry = get_service().get_entry(entry_id)
    if not entry:
        raise EntryNotFound(entry_id)
    return jsonify(entry.to_dict())


@bp.route('', methods=['POST'])
def create_entry():
    """Record a new score. Validation happens before any database access."""
    entry_input = validate_entry_input(request.get_json(silent=True))
    entry = get_service().create_entry(entry_input)
    
    response = jsonify(entry.to_dict())
    response.status_code = 201
    response.headers['Location'] = url_for('leaderboard.get_entry', entry_id=entry.id)
    return response


@bp.route('/<int:entry_id>', methods=['DELETE'])
def delete_entry(entry_id: int):
    if not get_service().delete_entry(entry_id):
        raise EntryNotFound(entry_id)
    return '', 204


@bp.route('/top', defaults={'count': None}, methods=['GET'])
@bp.route('/top/<int(signed=True):count>', methods=['GET'])
def top_scores(count):
    """Best `count` entries (default from DEFAULT_TOP_COUNT)."""
    entries = get_service().top_scores(count)
    return jsonify([e.to_dict() for e in entries])


@bp.route('/player/<player_name>', methods=['GET'])
def player_scores(player_name: str):
    entries = get_service().player_scores(player_name)
    return jsonify([e.to_dict() for e in entries])
