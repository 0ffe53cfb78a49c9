"""
Command-Line Interface for pronomacro.

- convert: turn ~marked pronouns into template macros
- explain: show which rule resolves a single marked word
- info: list the macro names and lexicon sizes
"""
import argparse
import json
import logging
import os
import sys
from dataclasses import asdict

from pronomacro.logging_config import ProgressLogger, log_with_context, setup_logging

logger = logging.getLogger(__name__)

ENV_LOG_FILE = 'PRONOMACRO_LOG_FILE'
ENV_DEBUG = 'PRONOMACRO_DEBUG'
ENV_DEBUG_LOG = 'PRONOMACRO_DEBUG_LOG'


def _env_flag(name):
    return os.environ.get(name, '').strip().lower() in ('1', 'true', 'yes', 'on')


def _read_inputs(args):
    """Return (label, text) pairs from the positional text, --file, or stdin."""
    if args.text is not None:
        return [('<argument>', args.text)]
    if args.file:
        inputs = []
        for path in args.file:
            try:
                with open(path, 'r', encoding='utf-8') as f:
                    inputs.append((path, f.read()))
            except OSError as e:
                print(f"ERROR: {e}", file=sys.stderr)
                sys.exit(1)
        return inputs
    if sys.stdin.isatty():
        print("Enter text (Ctrl-D to finish):", file=sys.stderr)
    return [('<stdin>', sys.stdin.read())]


def cmd_convert(args):
    """Convert marked pronouns in text, files, or stdin."""
    from pronomacro.converter import count_words, run_conversion
    from pronomacro.trace import ConversionLog

    inputs = _read_inputs(args)
    conversion_log = ConversionLog()
    progress = ProgressLogger(total=len(inputs), logger=logger) if len(inputs) > 1 else None

    results = []
    for label, text in inputs:
        result = run_conversion(text)
        conversion_log.record(result.events, result.stats)
        results.append((label, text, result))
        log_with_context(
            f"Converted {label}",
            {
                "characters": len(text),
                "pronouns": result.stats.pronouns,
                "ambiguous": result.stats.ambiguous,
            },
            logger=logger,
        )
        if progress:
            progress.update(label, result.stats.pronouns)

    if args.format == 'json':
        payload = [
            {
                "source": label,
                "output": result.output,
                "events": [event.to_dict() for event in result.events],
                "stats": asdict(result.stats),
            }
            for label, _, result in results
        ]
        print(json.dumps(payload[0] if len(payload) == 1 else payload, indent=2, ensure_ascii=False))
    else:
        for _, _, result in results:
            sys.stdout.write(result.output)
            if not result.output.endswith('\n'):
                sys.stdout.write('\n')

    if args.stats:
        for label, text, result in results:
            print(f"{label}: {count_words(text)} words in, {count_words(result.output)} words out",
                  file=sys.stderr)
        stats = conversion_log.stats
        print(f"Conversions processed: {stats.conversions}", file=sys.stderr)
        print(f"Pronouns converted: {stats.pronouns}", file=sys.stderr)
        print(f"Ambiguous resolutions: {stats.ambiguous}", file=sys.stderr)
        print(f"Last conversion time: {stats.last_time or 'Never'}", file=sys.stderr)

    if args.show_log:
        print(conversion_log.to_text(), file=sys.stderr)

    if args.log_file:
        try:
            conversion_log.save(args.log_file)
        except OSError as e:
            print(f"ERROR writing debug log: {e}", file=sys.stderr)
            sys.exit(1)

    return 0


def cmd_explain(args):
    """Show how a single marked word would be resolved."""
    from pronomacro.lexicon import SIGIL
    from pronomacro.lexer import tokenize
    from pronomacro.resolver import resolve

    word = args.word if args.word.startswith(SIGIL) else SIGIL + args.word
    text = word + (' ' + args.context if args.context else '')
    tokens = tokenize(text)

    if not tokens or not tokens[0].is_candidate:
        print(f"ERROR: '{args.word}' is not a word that can be marked", file=sys.stderr)
        sys.exit(1)

    resolution = resolve(tokens, 0)
    print(f"Word: {tokens[0].text}")
    if args.context:
        print(f"Context: {args.context}")
    if resolution is None:
        print("Rule: none (left unconverted)")
        print(f"Result: {tokens[0].body}")
        return 0
    print(f"Rule: {resolution.rule.value}")
    print(f"Category: {resolution.reference.category.name.lower()}")
    print(f"Result: {resolution.text}")
    return 0


def cmd_info(args):
    """Display the macro table and lexicon sizes."""
    from pronomacro.lexicon import (
        AMBIGUOUS_LEMMAS,
        COMMON_ADJECTIVES,
        DETERMINERS,
        DIRECT_PRONOUNS,
        MAX_LOOKAHEAD_STEPS,
        NOUN_SUFFIXES,
        SIGIL,
        MacroReference,
        PronounCategory,
    )

    print("=== pronomacro ===\n")
    print(f"Python: {sys.version.split()[0]}")
    print(f"Sigil: {SIGIL}")

    print("\nMacros:")
    for category in PronounCategory:
        plain = MacroReference(category).render()
        capped = MacroReference(category, capitalized=True).render()
        print(f"  {category.name.lower():22s} {plain}  {capped}")

    print("\nLexicon:")
    print(f"  Direct pronouns: {len(DIRECT_PRONOUNS)}")
    print(f"  Ambiguous lemmas: {', '.join(sorted(AMBIGUOUS_LEMMAS))}")
    print(f"  Determiners: {len(DETERMINERS)}")
    print(f"  Common adjectives: {len(COMMON_ADJECTIVES)}")
    print(f"  Noun suffixes: {len(NOUN_SUFFIXES)}")
    print(f"  Lookahead steps: {MAX_LOOKAHEAD_STEPS}")
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        prog='pronomacro',
        description='Convert ~marked pronouns into {{pronoun...}} template macros',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pronomacro convert "~They walked to ~their car."
  pronomacro convert --file story.txt --show-log
  cat story.txt | pronomacro convert --format json
  pronomacro explain her --context "kindness"
  pronomacro info

Environment:
  PRONOMACRO_LOG_FILE   default path for --log-file
  PRONOMACRO_DEBUG      set to 1 for verbose logging
  PRONOMACRO_DEBUG_LOG  default path for --debug-log
        """
    )
    parser.add_argument('--debug', action='store_true', default=_env_flag(ENV_DEBUG),
                        help='Verbose logging with file/line context')
    parser.add_argument('--debug-log', metavar='FILE', default=os.environ.get(ENV_DEBUG_LOG),
                        help='Also append application log lines to FILE')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    parser_convert = subparsers.add_parser('convert', help='Convert marked pronouns')
    source = parser_convert.add_mutually_exclusive_group()
    source.add_argument('text', nargs='?', help='Text to convert')
    source.add_argument('-f', '--file', action='append',
                        help='Read input from file (repeatable)')
    parser_convert.add_argument('--format', choices=['text', 'json'], default='text',
                                help='Output format (default: text)')
    parser_convert.add_argument('--show-log', action='store_true',
                                help='Print the conversion debug log to stderr')
    parser_convert.add_argument('--log-file', default=os.environ.get(ENV_LOG_FILE),
                                help='Save the conversion debug log to this file or directory')
    parser_convert.add_argument('--stats', action='store_true',
                                help='Print word counts and conversion statistics to stderr')
    parser_convert.set_defaults(func=cmd_convert)

    parser_explain = subparsers.add_parser('explain', help='Explain how one marked word resolves')
    parser_explain.add_argument('word', help='Pronoun, with or without the leading ~')
    parser_explain.add_argument('--context', help='Text that follows the word')
    parser_explain.set_defaults(func=cmd_explain)

    parser_info = subparsers.add_parser('info', help='Display macro table and lexicon sizes')
    parser_info.set_defaults(func=cmd_info)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        setup_logging(log_file=args.debug_log, level=logging.WARNING, debug=args.debug)
    except OSError as e:
        print(f"ERROR opening debug log: {e}", file=sys.stderr)
        return 1
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
