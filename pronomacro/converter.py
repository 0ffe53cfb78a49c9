"""
The Converter (Text -> Text with macros).

Walks the token list, swaps every marked pronoun for its macro and joins the
result. Existing macros and unmarked text come out byte-for-byte unchanged.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from pronomacro.lexer import merge, tokenize
from pronomacro.resolver import Rule, is_capitalized, resolve
from pronomacro.trace import (
    ConversionEvent,
    ConversionLog,
    ConversionStats,
    Severity,
    utc_timestamp,
)

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Output text plus the run's events and stats delta."""
    output: str
    events: List[ConversionEvent] = field(default_factory=list)
    stats: ConversionStats = field(default_factory=ConversionStats)


class _EventSink:
    """Collects events for one run and mirrors them to the module logger."""

    def __init__(self):
        self.events: List[ConversionEvent] = []

    def __call__(self, message: str, severity: Severity = Severity.INFO) -> None:
        self.events.append(ConversionEvent(utc_timestamp(), message, severity))
        logger.log(severity.log_level, message)


def run_conversion(text: str) -> ConversionResult:
    """
    Convert marked pronouns and report what happened.

    Args:
        text: Input text; pronouns to convert carry a leading ``~``.

    Returns:
        ConversionResult with the converted text, one event per decision and
        a stats delta (conversions=1 plus pronoun/ambiguous counts).
    """
    tokens = tokenize(text)

    emit = _EventSink()
    stats = ConversionStats(conversions=1, last_time=utc_timestamp())
    emit(f"Starting conversion of {len(text)} characters", Severity.PROCESSING)

    for i, token in enumerate(tokens):
        if token.is_macro:
            emit(f"Skipping existing macro: {token.text}", Severity.INFO)
            continue
        if not token.is_candidate:
            continue

        body = token.body
        emit(f"Processing tilde token: {token.text} (capitalized: {is_capitalized(body)})",
             Severity.PROCESSING)

        resolution = resolve(tokens, i)
        if resolution is None:
            emit(f"No conversion found for: {token.text} → {body}", Severity.WARNING)
            token.text = body
            continue

        if resolution.rule is Rule.CONTRACTION:
            emit(f"Contraction conversion: {token.text} → {resolution.text}", Severity.SUCCESS)
        elif resolution.rule is Rule.DIRECT:
            emit(f"Direct conversion: {token.text} → {resolution.text}", Severity.SUCCESS)
        else:
            emit(f"Ambiguous '{body.lower()}' resolved to: {resolution.text}", Severity.SUCCESS)
            stats.ambiguous += 1

        token.text = resolution.text
        stats.pronouns += 1

    emit(f"Conversion complete: {stats.pronouns} pronouns converted", Severity.SUCCESS)
    return ConversionResult(merge(tokens), emit.events, stats)


def convert(text: str, log: Optional[ConversionLog] = None) -> str:
    """
    Convert marked pronouns in text to template macros.

    >>> convert("~They said ~her kindness helped.")
    '{{pronounSubjectiveCap}} said {{pronounPosDet}} kindness helped.'

    Args:
        text: Input text.
        log: Optional ConversionLog that receives the run's events and stats.

    Returns:
        The converted text.
    """
    result = run_conversion(text)
    if log is not None:
        log.record(result.events, result.stats)
    return result.output


def count_words(text: str) -> int:
    """Whitespace-separated word count; blank text has none."""
    stripped = text.strip()
    return len(stripped.split()) if stripped else 0
