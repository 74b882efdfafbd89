"""
This module, 'routes.py', defines the game endpoints of the word guessing game API.

Detailed Endpoint Descriptions:
- POST /games: Starts a new game with a random secret word, optionally owned by a player.
- GET /games: Returns the display word and status of the most recently started game.
- GET /games/all: Retrieves the public state of all games.
- GET /games/<id>: Returns the display word and status of one game.
- PATCH|POST /games/<id>: Submits a single letter guess for one game.
- GET /games/guessed: Returns the letters guessed in the most recently started game.
- GET /games/<id>/guessed: Returns the letters guessed in one game.


Associated Functions:
- start_new_game(): Creates a game and returns the masked word.
- latest_game_status(): Status of the most recent game.
- get_all_game_data(): Retrieves data for all games.
- game_status(): Status of one game.
- submit_guess(): Processes a letter guess.
- latest_guessed_letters(): Guessed letters of the most recent game.
- guessed_letters(): Guessed letters of one game.
"""

from flask import Blueprint, request
from ...game.game import (
    create_new_game,
    get_all_games_data,
    get_game_status,
    get_guessed_letters,
    get_latest_game_status,
    get_latest_guessed_letters,
    process_guess,
    validate_id,
)
from ...game.players import validate_player_id
from ...services.utils import create_response, is_single_letter, parse_and_validate_request

games_bp = Blueprint("games", __name__)


@games_bp.route("", methods=["POST"])
def start_new_game():
    """
    Starts a new game with a randomly selected secret word.

    An optional playerId may be given in the JSON body or the query string;
    the game is then attached to that player.

    :return: 201 with the game ID, the fully masked word and a start message.
    """
    payload = request.get_json(force=True, silent=True)
    if not isinstance(payload, dict):
        payload = {}
    player_id = payload.get("playerId", request.args.get("playerId"))

    if player_id is not None:
        try:
            player_id = int(player_id)
        except (TypeError, ValueError):
            return create_response(error="Invalid player ID.", status_code=400)
        if not validate_player_id(player_id):
            return create_response(error="Invalid player ID.", status_code=404)

    game, reply = create_new_game(player_id=player_id)

    data = {"gameId": game.id}
    data.update(reply.to_state())
    return create_response(data=data, status_code=201)


@games_bp.route("", methods=["GET"])
def latest_game_status():
    """
    Returns the display word and status of the most recently started game,
    or "game not started" when there are no games yet.
    """
    display_word, status = get_latest_game_status()
    return create_response(data={"displayWord": display_word, "status": status})


@games_bp.route("/all", methods=["GET"])
def get_all_game_data():
    """
    Returns the public state of every game in the database.
    """
    return create_response(data={"games": get_all_games_data()})


@games_bp.route("/<int:game_id>", methods=["GET"])
def game_status(game_id):
    """
    Returns the display word and status of the game.
    """
    if not validate_id(game_id):
        return create_response(error="Invalid game ID.", status_code=404)

    display_word, status = get_game_status(game_id)
    return create_response(data={"gameId": game_id, "displayWord": display_word, "status": status})


@games_bp.route("/<int:game_id>", methods=["PATCH", "POST"])
def submit_guess(game_id):
    """
    Receives a letter guess and applies it to the game.
    Requires JSON payload with letter.

    :return: A JSON response with whether the letter is in the word,
             the updated display word and a message.
    """
    required_fields = ["letter"]
    data, error = parse_and_validate_request(required_fields)
    if error:
        return create_response(error=error, status_code=400)

    letter = data["letter"]

    # Validate the guess format (must be exactly one letter)
    if not is_single_letter(letter):
        return create_response(
            error="Invalid guess format. A guess should be a single letter.", status_code=400
        )

    # Validate the game id
    if not validate_id(game_id):
        return create_response(error="Invalid game ID.", status_code=404)

    reply = process_guess(game_id, letter)
    return create_response(data=reply.to_state())


@games_bp.route("/guessed", methods=["GET"])
def latest_guessed_letters():
    """
    Returns the letters guessed in the most recently started game.
    """
    return create_response(data={"letters": get_latest_guessed_letters()})


@games_bp.route("/<int:game_id>/guessed", methods=["GET"])
def guessed_letters(game_id):
    """
    Returns the letters guessed in the game, in the order they were guessed.
    """
    if not validate_id(game_id):
        return create_response(error="Invalid game ID.", status_code=404)

    return create_response(data={"gameId": game_id, "letters": get_guessed_letters(game_id)})
