"""
Command line interface for locit.

Usage:
    locit robots                    # full paradigm as a table
    locit -c genitive robots        # one form
    locit -c dative -p robots       # one plural form
    locit -f robots                 # full paradigm as JSON
    locit --proper Jānis            # proper noun vocatives
    locit -d words.db superkrāsns   # with extra special cases
    locit init-db                   # write built-in special cases to a lexicon
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from locit import __version__, settings
from locit.constants import CASE_NAMES_LV, Case, Gender, GNumber
from locit.exceptions import LatvianError
from locit.lexicon import get_session, init_lexicon, load_lexicon
from locit.models import ParadigmResult
from locit.noun import Noun, NounOptions

CASE_CHOICES = [case.name.lower() for case in Case]
GENDER_CHOICES = ['masculine', 'feminine']


def format_paradigm_text(noun: Noun) -> str:
    """Format a full paradigm as a three-column text table."""
    result = ParadigmResult.from_noun(noun)
    lines = [f"{result.word}  ({result.declension_description}, {result.gender})"]
    width = max(len(name) for name in CASE_NAMES_LV.values())
    for entry in result.forms:
        singular = entry.singular or '-'
        plural = entry.plural or '-'
        lines.append(f"  {entry.case_lv:<{width}}  {singular:<20}  {plural}")
    return '\n'.join(lines)


def main_init_db(args: list) -> int:
    """CLI entry point for init-db subcommand."""
    parser = argparse.ArgumentParser(
        description='Write the built-in special cases to a lexicon database',
        prog='locit init-db',
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        metavar='PATH',
        help=f'Output database path (default: {settings.LEXICON_PATH})',
    )

    parser.add_argument(
        '--force', '-f',
        action='store_true',
        help='Overwrite existing database',
    )

    parsed = parser.parse_args(args)
    db_path = Path(parsed.output) if parsed.output else settings.LEXICON_PATH

    if db_path.exists() and not parsed.force:
        print(f"Database already exists: {db_path}", file=sys.stderr)
        print("Use --force to overwrite.", file=sys.stderr)
        return 1

    count = init_lexicon(db_path, force=parsed.force)
    print(f"Lexicon written: {db_path}")
    print(f"   Special cases: {count:,}")
    return 0


def build_options(parsed: argparse.Namespace) -> NounOptions:
    gender = Gender.UNKNOWN
    if parsed.gender:
        gender = Gender[parsed.gender.upper()]
    return NounOptions(
        override_gender=gender,
        proper_noun=parsed.proper,
        use_ar_with_instrumental=not parsed.no_ar,
        use_palatalized_r=parsed.palatalized_r,
    )


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point."""
    # Check for subcommands
    args_list = args if args is not None else sys.argv[1:]

    if args_list and args_list[0] == 'init-db':
        return main_init_db(args_list[1:])

    parser = argparse.ArgumentParser(
        description='Command line interface for Locit (Latvian Noun Declension)',
        prog='locit',
        epilog='Subcommands:\n  locit init-db    Write built-in special cases to a lexicon database',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        'words',
        nargs='*',
        help='Latvian words in nominative singular',
    )

    parser.add_argument(
        '-c', '--case',
        choices=CASE_CHOICES,
        metavar='NAME',
        help=f'Print a single case ({", ".join(CASE_CHOICES)})',
    )

    parser.add_argument(
        '-p', '--plural',
        action='store_true',
        help='Read the plural form (use with -c)',
    )

    parser.add_argument(
        '-f', '--full',
        action='store_true',
        help='Full paradigm as JSON',
    )

    parser.add_argument(
        '-g', '--gender',
        choices=GENDER_CHOICES,
        help='Override the detected gender',
    )

    parser.add_argument(
        '--proper',
        action='store_true',
        help='Decline as a proper noun',
    )

    parser.add_argument(
        '--no-ar',
        action='store_true',
        help='Do not prefix instrumental forms with "ar"',
    )

    parser.add_argument(
        '--palatalized-r',
        action='store_true',
        help='Use the r -> ŗ mutation',
    )

    parser.add_argument(
        '-d', '--lexicon',
        type=str,
        default=None,
        metavar='PATH',
        help='Path to a lexicon database with extra special cases',
    )

    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version information',
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging',
    )

    parsed = parser.parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if (parsed.debug or settings.DEBUG) else logging.WARNING,
        format='%(levelname)s - %(name)s - %(message)s',
    )

    if parsed.version:
        print(f'locit {__version__}')
        return 0

    if not parsed.words:
        parser.print_help()
        return 1

    # Explicit lexicon must exist; the default one is optional
    if parsed.lexicon is not None:
        lexicon_path = Path(parsed.lexicon)
        if not lexicon_path.exists():
            print(f'Error: lexicon not found: {lexicon_path}', file=sys.stderr)
            return 1
    else:
        lexicon_path = settings.LEXICON_PATH if settings.LEXICON_PATH.exists() else None

    if lexicon_path is not None:
        with get_session(lexicon_path) as session:
            load_lexicon(session)

    options = build_options(parsed)
    number = GNumber.PLURAL if parsed.plural else GNumber.SINGULAR

    try:
        if parsed.full:
            output = [
                ParadigmResult.from_noun(Noun(word, options)).model_dump()
                for word in parsed.words
            ]
            print(json.dumps(output if len(output) > 1 else output[0], ensure_ascii=False))

        elif parsed.case:
            case = Case[parsed.case.upper()]
            for word in parsed.words:
                print(Noun(word, options).declension(case, number))

        else:
            print('\n\n'.join(format_paradigm_text(Noun(word, options)) for word in parsed.words))

        return 0

    except LatvianError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
