"""Heuristic noun check used to tell "her book" from "told her"."""
from pronomacro.lexicon import COMMON_ADJECTIVES, DETERMINERS, NOUN_SUFFIXES


def looks_like_noun(word: str) -> bool:
    """
    Guess whether a word is acting as a noun.

    Determiners and a handful of common adjectives are never nouns. After
    that a word counts as a noun when it ends in a noun-forming suffix
    (-ness, -tion, -er, ...) or looks like a plural (longer than three
    letters and ending in "s"). Short bare nouns like "book" are missed;
    that is accepted.
    """
    lower_word = word.lower()
    if lower_word in DETERMINERS or lower_word in COMMON_ADJECTIVES:
        return False
    if lower_word.endswith(NOUN_SUFFIXES):
        return True
    return len(lower_word) > 3 and lower_word.endswith("s")
