"""
This module defines the database models for the word guessing game using SQLAlchemy. It includes the `Game` model, which stores the secret word together with the guessed letters and the masked display word, and the `Player` model, which owns games. It also defines the `GameStatus` enum and the `Reply` value returned for every guess.

Classes:
- GameStatus: Enum defining the lifecycle states of a game.
- Player: SQLAlchemy model representing a named player.
- Game: SQLAlchemy model representing one play-through.
- Reply: Outcome of starting a game or submitting a guess.
"""

import enum
from dataclasses import dataclass

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.ext.mutable import MutableList

db = SQLAlchemy()

MASK_CHARACTER = "*"


class GameStatus(enum.Enum):
    NOT_STARTED = "game not started"
    IN_PROGRESS = "game in progress"
    COMPLETE = "game complete"


class Player(db.Model):
    """
    A player who can own any number of games.

    Attributes:
        id (int): Primary key, generated by the database.
        name (str): Display name of the player.
        games (list): Games started by this player.
    """

    __tablename__ = "players"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(64), nullable=False)
    games = db.relationship("Game", back_populates="player", order_by="Game.id")

    def to_state(self):
        return {
            "id": self.id,
            "name": self.name,
            "games": [game.id for game in self.games],
        }

    def __repr__(self):
        return "<Player %r>" % self.id


class Game(db.Model):
    """
    Represents a game session in the database.

    Attributes:
        id (int): Primary key, generated by the database in increasing order.
        word (str): The secret word. Never sent to the client while the game is in progress.
        guesses (int): Number of distinct letters accepted so far.
        complete (bool): True once every letter of the word has been revealed.
        guessed_letters (JSON): Letters accepted so far, in the order they were guessed.
        display_word (str): The secret word with unguessed positions masked.
        player_id (int): Optional owner of the game.
    """

    __tablename__ = "games"

    id = db.Column(db.Integer, primary_key=True)
    word = db.Column(db.String(64), nullable=False)
    guesses = db.Column(db.Integer, nullable=False, default=0)
    complete = db.Column(db.Boolean, nullable=False, default=False)
    guessed_letters = db.Column(
        MutableList.as_mutable(db.JSON), nullable=False, default=list
    )
    display_word = db.Column(db.String(64), nullable=False)
    player_id = db.Column(db.Integer, db.ForeignKey("players.id"), nullable=True)
    player = db.relationship("Player", back_populates="games")

    @property
    def status(self) -> GameStatus:
        return GameStatus.COMPLETE if self.complete else GameStatus.IN_PROGRESS

    def to_state(self):
        """
        Retrieves the public state of the game.

        The secret word is only included once the game is complete.

        Returns:
            dict: The game's ID, display word, guess count, guessed letters, status and owner.
        """
        return {
            "gameId": self.id,
            "displayWord": self.display_word,
            "guesses": self.guesses,
            "guessedLetters": list(self.guessed_letters or []),
            "complete": self.complete,
            "status": self.status.value,
            "playerId": self.player_id,
            "word": self.word if self.complete else None,
        }

    def __repr__(self):
        return "<Game %r>" % self.id


@dataclass
class Reply:
    """Outcome of a start or guess request."""

    correct: bool
    display_word: str
    message: str

    def to_state(self):
        return {
            "correct": self.correct,
            "displayWord": self.display_word,
            "message": self.message,
        }
