"""
Player logic for the word guessing game API.

Functions:
- validate_player_id(player_id): Validates if a player ID exists.
- create_player(name): Creates a player and returns it.
- get_player(player_id): Retrieves a player or raises PlayerNotFoundError.
- get_all_players_data(): Retrieves the public state of all players.
"""

import logging

from ..dal.dal import (
    add_new_player,
    check_player_exists,
    get_all_players,
    get_player_from_db,
)

logger = logging.getLogger(__name__)


class PlayerNotFoundError(ValueError):
    """Raised when no player exists with the requested ID."""
    pass


def validate_player_id(player_id):
    return check_player_exists(player_id)


def create_player(name: str):
    """
    Creates a new player with the given display name.

    :param name: Display name; surrounding whitespace is stripped.
    :return: The newly created Player object.
    """
    player_id = add_new_player(name.strip())
    logger.info("Created player %s", player_id)
    return get_player_from_db(player_id)


def get_player(player_id):
    """
    Retrieves the player for the specified ID.

    :raises PlayerNotFoundError: If the player does not exist.
    """
    player = get_player_from_db(player_id)
    if player is None:
        logger.warning("Unknown player %s", player_id)
        raise PlayerNotFoundError("No player found with the provided ID.")
    return player


def get_all_players_data() -> "list[dict]":
    return [player.to_state() for player in get_all_players()]
