# This file makes the 'pronomacro' directory a Python package.

from pronomacro.lexicon import MacroReference, PronounCategory
from pronomacro.lexer import Token, TokenKind, tokenize
from pronomacro.nouns import looks_like_noun
from pronomacro.resolver import Resolution, Rule, resolve
from pronomacro.converter import ConversionResult, convert, count_words, run_conversion
from pronomacro.trace import ConversionEvent, ConversionLog, ConversionStats, Severity

__version__ = "0.1.0"

__all__ = [
    'MacroReference',
    'PronounCategory',
    'Token',
    'TokenKind',
    'tokenize',
    'looks_like_noun',
    'Resolution',
    'Rule',
    'resolve',
    'ConversionResult',
    'convert',
    'count_words',
    'run_conversion',
    'ConversionEvent',
    'ConversionLog',
    'ConversionStats',
    'Severity',
]
