"""
Data Access Layer (DAL) module for the word guessing game API.

This module provides the functions that talk to the database. It creates game and player records, looks them up by ID, lists them, and writes back game state after a guess. The game rules themselves live in game.py; nothing here decides the outcome of a guess.

Functions:
- add_new_game(word, display_word, player_id): Adds a new game to the database and returns its ID.
- check_game_exists(game_id): Checks if a game with the specified ID exists in the database.
- get_game_from_db(game_id, for_update): Retrieves a game by ID, optionally locking the row for update.
- save_game(game): Writes the full state of a game back to the database.
- get_all_games(): Retrieves all games ordered by ID.
- get_latest_game(): Retrieves the most recently created game.
- add_new_player(name): Adds a new player to the database and returns its ID.
- check_player_exists(player_id): Checks if a player with the specified ID exists.
- get_player_from_db(player_id): Retrieves a player by ID.
- get_all_players(): Retrieves all players ordered by ID.
"""

from ..models.models import db, Game, Player


def add_new_game(word, display_word, player_id=None):
    """
    Adds a new game to the database with the specified secret word.
    Initializes the game with no guesses, an empty list of guessed letters,
    and marks it as not complete.

    Args:
        word (str): The secret word for the game.
        display_word (str): The fully masked word shown before any guess.
        player_id (int, optional): The player who owns the game.

    Returns:
        int: The identifier of the newly created game.
    """
    new_game = Game(
        word=word,
        guesses=0,
        complete=False,
        guessed_letters=[],
        display_word=display_word,
        player_id=player_id,
    )
    db.session.add(new_game)
    db.session.commit()
    return new_game.id


def check_game_exists(game_id):
    """
    Determines if a game with the specified ID is present in the database.

    Args:
        game_id (int): The identifier of the game to check.

    Returns:
        bool: True if the game exists, False otherwise.
    """
    return Game.query.filter_by(id=game_id).first() is not None


def get_game_from_db(game_id, for_update=False):
    """
    Retrieves a game from the database using the game ID.

    :param game_id: The ID of the game to retrieve.
    :param for_update: When True, the row is selected FOR UPDATE so the
                       caller holds it until the next commit.
    :return: The Game object if found, None otherwise.
    """
    query = Game.query.filter_by(id=game_id)
    if for_update:
        query = query.with_for_update()
    return query.first()


def save_game(game):
    """
    Writes the full state of the game to the database.

    Saving an unchanged game is harmless; the session simply has nothing to flush.

    :param game: The game object to persist.
    """
    db.session.add(game)
    db.session.commit()


def get_all_games():
    """
    Retrieves all games from the database.

    :return: A list of all game objects, oldest first.
    """
    return Game.query.order_by(Game.id).all()


def get_latest_game():
    """
    Retrieves the most recently created game.

    :return: The Game object with the highest ID, or None when there are no games.
    """
    return Game.query.order_by(Game.id.desc()).first()


def add_new_player(name):
    """
    Adds a new player to the database.

    Args:
        name (str): Display name of the player.

    Returns:
        int: The identifier of the newly created player.
    """
    new_player = Player(name=name)
    db.session.add(new_player)
    db.session.commit()
    return new_player.id


def check_player_exists(player_id):
    """Returns True if a player with this ID exists."""
    return Player.query.filter_by(id=player_id).first() is not None


def get_player_from_db(player_id):
    """
    Retrieves a player from the database using the player ID.

    :return: The Player object if found, None otherwise.
    """
    return Player.query.filter_by(id=player_id).first()


def get_all_players():
    """Retrieves all players from the database, oldest first."""
    return Player.query.order_by(Player.id).all()
