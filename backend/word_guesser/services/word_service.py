"""
Word Service for the word guessing game.

Supplies secret words for new games. Words come from a JSON array on disk:
the file named by the WORD_LIST_PATH setting, or the bundled
schemas/words.json when that is unset.

Public API
----------
load_words(json_path)  → list[str]  - read and normalise the candidate list
get_random_word(words) → str        - uniform random choice from the list
"""

import json
import logging
import random
from os import path

from .. import config

logger = logging.getLogger(__name__)

DEFAULT_WORDS_PATH = path.join(path.dirname(__file__), "../schemas/words.json")


class WordListEmptyError(Exception):
    """Raised when there are no candidate words to choose from."""
    pass


def load_words(json_path: "str | None" = None) -> "list[str]":
    """
    Reads the candidate word list.

    Entries are stripped and lowercased; anything that is not purely
    alphabetic after that is skipped with a warning.

    :param json_path: Path to a JSON array of strings. Falls back to
                      config.WORD_LIST_PATH, then the bundled list.
    :return: The normalised list of words (may be empty).
    """
    json_path = json_path or config.WORD_LIST_PATH or DEFAULT_WORDS_PATH

    with open(json_path, "r", encoding="utf-8") as file:
        data = json.load(file)

    words = []
    for entry in data:
        word = str(entry).strip().lower()
        if not word.isalpha():
            logger.warning("Skipping invalid word list entry %r in %s", entry, json_path)
            continue
        words.append(word)

    logger.debug("Loaded %d words from %s", len(words), json_path)
    return words


def get_random_word(words: "list[str] | None" = None) -> str:
    """
    Picks a secret word uniformly at random.

    :param words: Candidate list; loaded with load_words() when omitted.
    :return: One word from the list.
    :raises WordListEmptyError: If the candidate list is empty.
    """
    if words is None:
        words = load_words()
    if not words:
        raise WordListEmptyError("The word list is empty; configure WORD_LIST_PATH.")
    return random.choice(words)
