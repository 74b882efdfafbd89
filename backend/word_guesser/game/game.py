"""
Game logic module for the word guessing game API.

This module holds the rules of the game: starting a game with a masked secret
word and applying a letter guess to it. The rules are plain functions over an
explicit Game object (apply_guess, compute_display_word, game_status); the
id-based wrappers load the game through dal.py, apply the rules and write the
result back.

Functions:
- validate_id(game_id): Validates if a game ID exists.
- mask_word(word): Returns the fully masked rendering of a word.
- compute_display_word(word, guessed_letters): Recomputes the display word from the guessed letters.
- apply_guess(game, letter): Applies one guess to a game and returns the Reply.
- game_status(game): Returns the display word and status message of a game.
- create_new_game(player_id, word): Creates a new game and returns it with the opening Reply.
- process_guess(game_id, letter): Applies a guess to a stored game, one guess per game at a time.
- get_game_state(game_id): Retrieves a game or raises GameNotFoundError.
- get_game_status(game_id): Retrieves the status of a stored game.
- get_latest_game_status(): Retrieves the status of the most recently created game.
- get_guessed_letters(game_id): Retrieves the letters guessed so far, in guess order.
- get_latest_guessed_letters(): Retrieves the guessed letters of the most recent game.
- get_all_games_data(): Retrieves the public state of all games.
"""

import logging
import threading

from ..models.models import MASK_CHARACTER, GameStatus, Reply
from ..dal.dal import (
    add_new_game,
    check_game_exists,
    get_all_games,
    get_game_from_db,
    get_latest_game,
    save_game,
)
from ..services.word_service import get_random_word
from .players import get_player

logger = logging.getLogger(__name__)

# One lock per game id: a guess is read, decided and written as a unit.
_game_locks = {}
_game_locks_guard = threading.Lock()


class GameNotFoundError(ValueError):
    """Raised when no game exists with the requested ID."""
    pass


def _lock_for(game_id):
    with _game_locks_guard:
        return _game_locks.setdefault(game_id, threading.Lock())


def validate_id(game_id):
    """
    Validates if a game ID exists in the database.

    :param game_id: The ID of the game to validate.
    :return: True if the game exists, False otherwise.
    """
    return check_game_exists(game_id)


def mask_word(word: str) -> str:
    return MASK_CHARACTER * len(word)


def compute_display_word(word: str, guessed_letters) -> str:
    """
    Builds the display word from scratch: each position shows the secret
    letter if that letter has been guessed, otherwise the mask character.

    :param word: The secret word.
    :param guessed_letters: Iterable of letters guessed so far.
    :return: A string the same length as word.
    """
    revealed = set(guessed_letters)
    return "".join(letter if letter in revealed else MASK_CHARACTER for letter in word)


def apply_guess(game, letter: str) -> Reply:
    """
    Applies a single letter guess to the game and returns the outcome.

    Checks run in order and the first match wins:
      1. finished game: nothing changes
      2. letter already guessed: nothing changes
      3. otherwise the letter is recorded and the guess count goes up by one,
         then the display word is recomputed and the game is checked for a win.

    Letters are compared case-sensitively. The caller is expected to pass a
    single character.

    :param game: The Game to update in place.
    :param letter: The guessed letter.
    :return: The Reply describing the outcome.
    """
    if game.complete:
        return Reply(False, game.display_word, f"already finished game {game.id}")

    if letter in game.guessed_letters:
        return Reply(False, game.display_word, f"already guessed {letter}")

    game.guessed_letters.append(letter)
    game.guesses += 1
    game.display_word = compute_display_word(game.word, game.guessed_letters)

    if letter not in game.word:
        return Reply(False, game.display_word, f"{letter} is not in the word")

    if game.display_word == game.word:
        game.complete = True
        logger.info("Game %s won after %d guesses", game.id, game.guesses)
        return Reply(True, game.display_word, "You win!")

    return Reply(True, game.display_word, f"{letter} is in the word")


def game_status(game) -> "tuple[str, str]":
    """
    Read-only snapshot of a game.

    :param game: The Game, or None when no game has been started.
    :return: A tuple of (display word, status message).
    """
    if game is None:
        return "", GameStatus.NOT_STARTED.value
    return game.display_word, game.status.value


def create_new_game(player_id=None, word=None):
    """
    Creates a new game with a random secret word and stores it in the database.

    :param player_id: Optional ID of the player who owns the game.
    :param word: Optional secret word; a random word is drawn when omitted.
    :return: A tuple of (Game, Reply) where the Reply carries the masked word.
    :raises PlayerNotFoundError: If player_id is given but does not exist.
    """
    if player_id is not None:
        get_player(player_id)

    if word is None:
        word = get_random_word()

    game_id = add_new_game(word, mask_word(word), player_id)
    game = get_game_from_db(game_id)
    logger.info("Started game %s (player_id=%s, length=%d)", game_id, player_id, len(word))

    return game, Reply(False, game.display_word, f"Started new game with id {game_id}")


def process_guess(game_id, letter: str) -> Reply:
    """
    Applies a guess to the stored game and saves the result.

    The whole load, decide and save sequence runs under the game's lock, and
    the row is selected for update, so concurrent guesses on the same game
    cannot lose an increment or slip past the duplicate check.

    :param game_id: The ID of the game being played.
    :param letter: The guessed letter.
    :return: The Reply describing the outcome.
    :raises GameNotFoundError: If the game does not exist.
    """
    with _lock_for(game_id):
        game = get_game_from_db(game_id, for_update=True)
        if game is None:
            logger.warning("Guess submitted for unknown game %s", game_id)
            raise GameNotFoundError("No game found with the provided ID.")

        reply = apply_guess(game, letter)
        save_game(game)

    logger.debug("Game %s guess=%r -> %s", game_id, letter, reply.message)
    return reply


def get_game_state(game_id):
    """
    Retrieves the game for the specified game ID.

    :param game_id: The ID of the game.
    :return: The Game object.
    :raises GameNotFoundError: If the game does not exist.
    """
    game = get_game_from_db(game_id)
    if game is None:
        raise GameNotFoundError("No game found with the provided ID.")
    return game


def get_game_status(game_id) -> "tuple[str, str]":
    return game_status(get_game_state(game_id))


def get_latest_game_status() -> "tuple[str, str]":
    return game_status(get_latest_game())


def get_guessed_letters(game_id) -> "list[str]":
    """
    Returns the letters guessed so far for the game, in the order they were accepted.
    """
    return list(get_game_state(game_id).guessed_letters)


def get_latest_guessed_letters() -> "list[str]":
    game = get_latest_game()
    if game is None:
        return []
    return list(game.guessed_letters)


def get_all_games_data() -> "list[dict]":
    """
    Retrieves the public state of all games in the database.

    :return: A list of game state dictionaries, oldest first.
    """
    return [game.to_state() for game in get_all_games()]
