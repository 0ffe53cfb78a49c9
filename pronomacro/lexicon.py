"""
Fixed vocabulary for pronoun-to-macro conversion.

Everything the converter knows about English lives here: the sigil, the macro
names, the pronoun tables and the word lists behind the noun heuristic. Like
any closed lexicon it is deliberately small; words outside it are left alone.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# -----------------------------------------------------------------------------
# --- Markup
# -----------------------------------------------------------------------------

SIGIL = "~"
MACRO_OPEN = "{{"
MACRO_CLOSE = "}}"
CAP_SUFFIX = "Cap"

# How many non-word tokens the her/his lookahead may skip before giving up.
MAX_LOOKAHEAD_STEPS = 6


class PronounCategory(Enum):
    """Pronoun slot; the value is the macro name the template engine expects."""
    SUBJECTIVE = "pronounSubjective"
    OBJECTIVE = "pronounObjective"
    POSSESSIVE_DETERMINER = "pronounPosDet"
    POSSESSIVE_PRONOUN = "pronounPosPro"
    REFLEXIVE = "pronounReflexive"

    @property
    def macro_name(self) -> str:
        return self.value


@dataclass(frozen=True)
class MacroReference:
    """A category plus capitalization; renders as ``{{name}}`` or ``{{nameCap}}``."""

    category: PronounCategory
    capitalized: bool = False

    def render(self) -> str:
        name = self.category.macro_name
        if self.capitalized:
            name += CAP_SUFFIX
        return f"{MACRO_OPEN}{name}{MACRO_CLOSE}"

    def __str__(self) -> str:
        return self.render()


# -----------------------------------------------------------------------------
# --- Pronoun tables
# -----------------------------------------------------------------------------

# Lemmas that take a contracted verb ("they're", "he'd", "you'll")
CONTRACTION_LEMMAS = {"they", "he", "she", "it", "you"}

CONTRACTION_SUFFIXES = ("re", "ve", "d", "ll", "s")

# Unambiguous forms. "his" and "her" are absent on purpose; see AMBIGUOUS_LEMMAS.
DIRECT_PRONOUNS = {
    # Subjective
    "he": PronounCategory.SUBJECTIVE,
    "she": PronounCategory.SUBJECTIVE,
    "it": PronounCategory.SUBJECTIVE,
    "they": PronounCategory.SUBJECTIVE,
    "you": PronounCategory.SUBJECTIVE,
    # Objective
    "him": PronounCategory.OBJECTIVE,
    "them": PronounCategory.OBJECTIVE,
    # Possessive determiner
    "their": PronounCategory.POSSESSIVE_DETERMINER,
    "your": PronounCategory.POSSESSIVE_DETERMINER,
    "its": PronounCategory.POSSESSIVE_DETERMINER,
    # Possessive pronoun
    "theirs": PronounCategory.POSSESSIVE_PRONOUN,
    "yours": PronounCategory.POSSESSIVE_PRONOUN,
    # Reflexive
    "themselves": PronounCategory.REFLEXIVE,
    "themself": PronounCategory.REFLEXIVE,
    "himself": PronounCategory.REFLEXIVE,
    "herself": PronounCategory.REFLEXIVE,
    "itself": PronounCategory.REFLEXIVE,
    "yourself": PronounCategory.REFLEXIVE,
    "yourselves": PronounCategory.REFLEXIVE,
}

# her/his: (category when a noun follows, category otherwise)
AMBIGUOUS_LEMMAS = {
    "her": (PronounCategory.POSSESSIVE_DETERMINER, PronounCategory.OBJECTIVE),
    "his": (PronounCategory.POSSESSIVE_DETERMINER, PronounCategory.POSSESSIVE_PRONOUN),
}

# -----------------------------------------------------------------------------
# --- Noun heuristic word lists
# -----------------------------------------------------------------------------

DETERMINERS = {
    "a", "an", "the",
    "this", "that", "these", "those",
    "my", "your", "our", "his", "her", "its", "their",
}

COMMON_ADJECTIVES = {
    "new", "old", "other", "own", "first", "last",
    "great", "small", "big", "entire", "whole", "unbelievably",
}

NOUN_SUFFIXES = (
    "ment",  # agreement
    "tion",  # attention
    "ness",  # kindness
    "ship",  # friendship
    "ity",   # ability
    "age",   # courage
    "ance",  # performance
    "ence",  # patience
    "ing",   # painting
    "er",    # writer
    "or",    # doctor
)
