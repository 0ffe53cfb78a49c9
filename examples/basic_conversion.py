#!/usr/bin/env python3
"""
Basic Pronoun Conversion Examples

This script shows how marked pronouns turn into template macros and how to
inspect the decisions through a ConversionLog.
"""
import sys
from pathlib import Path

# Add parent directory to path to import pronomacro
sys.path.insert(0, str(Path(__file__).parent.parent))

from pronomacro import ConversionLog, convert, run_conversion, tokenize


def example_1_simple_sentence():
    """Convert a sentence with unambiguous pronouns."""
    print("=" * 60)
    print("Example 1: Direct Conversion")
    print("=" * 60)

    text = "~They walked to ~their car."
    print(f"\nInput:  {text}")
    print(f"Output: {convert(text)}")

    print("\nExplanation:")
    print("  '~They' is subjective and capitalized -> {{pronounSubjectiveCap}}")
    print("  '~their' is a possessive determiner -> {{pronounPosDet}}")


def example_2_ambiguous():
    """Show how 'her' and 'his' depend on the following word."""
    print("\n" + "=" * 60)
    print("Example 2: Ambiguous 'her' / 'his'")
    print("=" * 60)

    for text in ["~She gave ~her presentation.", "Talk to ~her.", "It was ~his.", "~His friends"]:
        print(f"\n  {text:35s} -> {convert(text)}")

    print("\nExplanation:")
    print("  A noun-looking next word (presentation, friends) makes the pronoun a determiner.")
    print("  Otherwise 'her' falls back to objective and 'his' to possessive pronoun.")


def example_3_macros_and_tokens():
    """Existing macros are carried through untouched."""
    print("\n" + "=" * 60)
    print("Example 3: Existing Macros")
    print("=" * 60)

    text = "{{char}} smiled at ~him; ~he's {{user}}'s friend."
    print(f"\nInput:  {text}")
    print(f"Output: {convert(text)}")

    print("\nTokens:")
    for token in tokenize(text):
        if token.text.strip():
            print(f"  {token.kind.value:10s} {token.text!r}")


def example_4_debug_log():
    """Collect events and stats across several conversions."""
    print("\n" + "=" * 60)
    print("Example 4: Debug Log")
    print("=" * 60)

    log = ConversionLog()
    convert("~He said ~his book was ready.", log=log)
    convert("~banana ~themselves", log=log)

    print()
    print(log.to_text())
    print(f"\nConversions: {log.stats.conversions}")
    print(f"Pronouns:    {log.stats.pronouns}")
    print(f"Ambiguous:   {log.stats.ambiguous}")

    result = run_conversion("~You'll see.")
    print(f"\nSingle run delta: {result.stats}")


if __name__ == '__main__':
    example_1_simple_sentence()
    example_2_ambiguous()
    example_3_macros_and_tokens()
    example_4_debug_log()
