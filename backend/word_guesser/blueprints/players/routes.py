"""
Player endpoints for the word guessing game API.

- POST /players: Creates a player from a JSON payload with a name.
- GET /players: Lists all players.
- GET /players/<id>: Returns one player with the IDs of their games.
"""

from flask import Blueprint
from ...game.players import (
    create_player,
    get_all_players_data,
    get_player,
    validate_player_id,
)
from ...services.utils import create_response, parse_and_validate_request

players_bp = Blueprint("players", __name__)


@players_bp.route("", methods=["POST"])
def add_new_player():
    required_fields = ["name"]
    data, error = parse_and_validate_request(required_fields)
    if error:
        return create_response(error=error, status_code=400)

    name = data["name"]
    if not isinstance(name, str) or not name.strip():
        return create_response(error="Player name must be a non-empty string.", status_code=400)

    player = create_player(name)
    return create_response(data=player.to_state(), status_code=201)


@players_bp.route("", methods=["GET"])
def get_all_players():
    return create_response(data={"players": get_all_players_data()})


@players_bp.route("/<int:player_id>", methods=["GET"])
def get_player_by_id(player_id):
    """
    Returns the player with the given ID, or 404 if there is none.
    """
    if not validate_player_id(player_id):
        return create_response(error="Invalid player ID.", status_code=404)

    return create_response(data=get_player(player_id).to_state())
