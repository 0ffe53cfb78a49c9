"""
The Resolver (Candidate token -> Macro).

Decides which pronoun macro a marked word stands for. Rules are tried in
order and the first hit wins:

1. Contraction: "they're", "he'd", "you'll" ... become the subjective macro
   with the contracted verb kept after it.
2. Direct table: unambiguous forms such as "them" or "yourselves".
3. Ambiguous "her"/"his": peek at the next word. A noun-like word means the
   pronoun is a determiner ("her kindness"); anything else falls back to
   objective for "her" and possessive pronoun for "his".

Anything else is unresolved and the caller keeps the bare word.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from itertools import islice
from typing import Iterable, Optional, Sequence

from pronomacro.lexer import Token
from pronomacro.lexicon import (
    AMBIGUOUS_LEMMAS,
    CONTRACTION_LEMMAS,
    CONTRACTION_SUFFIXES,
    DIRECT_PRONOUNS,
    MAX_LOOKAHEAD_STEPS,
    MacroReference,
    PronounCategory,
)
from pronomacro.nouns import looks_like_noun

logger = logging.getLogger(__name__)

CONTRACTION = re.compile(
    r"^([A-Za-z]+)('?)(" + "|".join(CONTRACTION_SUFFIXES) + r")$"
)
CAPITALIZED = re.compile(r"^[A-Z]")


class Rule(Enum):
    CONTRACTION = "contraction"
    DIRECT = "direct"
    AMBIGUOUS = "ambiguous"


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving one candidate: the macro, which rule fired, and any
    contraction tail ("'re", "'s") that follows the macro."""

    reference: MacroReference
    rule: Rule
    tail: str = ""

    @property
    def text(self) -> str:
        return self.reference.render() + self.tail


def is_capitalized(body: str) -> bool:
    return bool(CAPITALIZED.match(body))


def resolve_contraction(body: str, capitalized: bool) -> Optional[Resolution]:
    m = CONTRACTION.match(body)
    if not m:
        return None
    lemma, apostrophe, suffix = m.groups()
    if lemma.lower() not in CONTRACTION_LEMMAS:
        return None
    reference = MacroReference(PronounCategory.SUBJECTIVE, capitalized)
    return Resolution(reference, Rule.CONTRACTION, (apostrophe or "'") + suffix)


def resolve_direct(body: str, capitalized: bool) -> Optional[Resolution]:
    category = DIRECT_PRONOUNS.get(body.lower())
    if category is None:
        return None
    return Resolution(MacroReference(category, capitalized), Rule.DIRECT)


def next_word(following: Iterable[Token], max_steps: int = MAX_LOOKAHEAD_STEPS) -> Optional[str]:
    """
    Find the word that follows an ambiguous pronoun.

    Non-word tokens (spaces, punctuation, other candidates) are skipped, each
    costing one step. The scan stops at a macro or once ``max_steps`` tokens
    have been skipped, so the word has to be among the first ``max_steps``
    tokens.

    Args:
        following: Tokens after the pronoun, in order.
        max_steps: Skip budget.

    Returns:
        The first word reached, or None.
    """
    steps = 0
    for token in following:
        if steps >= max_steps or token.is_macro:
            return None
        if token.is_word:
            return token.text
        steps += 1
    return None


def resolve_ambiguous(
    lemma: str,
    following: Iterable[Token],
    capitalized: bool,
) -> Resolution:
    noun_category, default_category = AMBIGUOUS_LEMMAS[lemma]
    word = next_word(following)
    if word is not None and looks_like_noun(word):
        category = noun_category
    else:
        category = default_category
    logger.debug("Ambiguous '%s' followed by %r -> %s", lemma, word, category.macro_name)
    return Resolution(MacroReference(category, capitalized), Rule.AMBIGUOUS)


def resolve(tokens: Sequence[Token], index: int) -> Optional[Resolution]:
    """
    Resolve the candidate token at ``tokens[index]``.

    Args:
        tokens: Full token list for the text being converted.
        index: Position of a candidate token.

    Returns:
        A Resolution, or None when no rule matches.
    """
    token = tokens[index]
    if not token.is_candidate:
        raise ValueError(f"Token at {index} is not a marked candidate: {token.text!r}")

    body = token.body
    capitalized = is_capitalized(body)

    resolution = resolve_contraction(body, capitalized)
    if resolution:
        return resolution

    resolution = resolve_direct(body, capitalized)
    if resolution:
        return resolution

    lemma = body.lower()
    if lemma in AMBIGUOUS_LEMMAS:
        return resolve_ambiguous(lemma, islice(tokens, index + 1, None), capitalized)

    return None
