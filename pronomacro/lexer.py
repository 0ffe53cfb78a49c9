"""
The Lexer (Text -> Tokens).

Splits raw text into an ordered token list. Four kinds of token come out:

- MACRO: an existing ``{{...}}`` placeholder, carried through opaque
- CANDIDATE: the sigil plus a letter run, e.g. ``~Her`` or ``~they're``
- WORD: any other run of letters (apostrophes and hyphens allowed inside)
- OTHER: a single character that starts none of the above

The lexer is total and lossless: joining the token texts gives back the input.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List

from pronomacro.lexicon import MACRO_CLOSE, MACRO_OPEN, SIGIL

CANDIDATE_BODY = re.compile(r"[A-Za-z'-]+")
WORD_RUN = re.compile(r"[A-Za-z][A-Za-z'-]*")


class TokenKind(Enum):
    MACRO = "macro"
    CANDIDATE = "candidate"
    WORD = "word"
    OTHER = "other"


@dataclass
class Token:
    """One slice of the input. ``text`` is replaced once for candidate tokens."""

    text: str
    kind: TokenKind = TokenKind.OTHER

    @property
    def is_macro(self) -> bool:
        return self.kind is TokenKind.MACRO

    @property
    def is_candidate(self) -> bool:
        return self.kind is TokenKind.CANDIDATE

    @property
    def is_word(self) -> bool:
        return self.kind is TokenKind.WORD

    @property
    def body(self) -> str:
        """Candidate text without the sigil; other tokens return their text."""
        if self.is_candidate:
            return self.text[len(SIGIL):]
        return self.text


def _macro_end(text: str, start: int) -> int:
    close = text.find(MACRO_CLOSE, start + len(MACRO_OPEN))
    if close == -1:
        # Unterminated placeholder swallows the rest of the input
        return len(text)
    return close + len(MACRO_CLOSE)


def tokenize(text: str) -> List[Token]:
    """
    Tokenize text, keeping existing macros intact.

    Args:
        text: Raw input, any string.

    Returns:
        Tokens in input order. ``"".join(t.text for t in tokens) == text``.
    """
    if not isinstance(text, str):
        raise TypeError("Input must be a string.")

    tokens: List[Token] = []
    i = 0
    n = len(text)
    while i < n:
        if text.startswith(MACRO_OPEN, i):
            j = _macro_end(text, i)
            tokens.append(Token(text[i:j], TokenKind.MACRO))
            i = j
            continue

        if text.startswith(SIGIL, i):
            m = CANDIDATE_BODY.match(text, i + len(SIGIL))
            if m:
                tokens.append(Token(text[i:m.end()], TokenKind.CANDIDATE))
                i = m.end()
                continue

        m = WORD_RUN.match(text, i)
        if m:
            tokens.append(Token(m.group(), TokenKind.WORD))
            i = m.end()
            continue

        tokens.append(Token(text[i], TokenKind.OTHER))
        i += 1

    return tokens


def merge(tokens: List[Token]) -> str:
    """Join token texts back into a string."""
    return "".join(token.text for token in tokens)
