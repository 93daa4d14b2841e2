"""Command line access to rhyme lookup and syllable counting."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Sequence

from verse_phonetics.core import DictionaryUnavailableError, PhoneticEngine, build_engine
from verse_phonetics.utils.logging_config import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="verse_phonetics",
        description="Look up perfect rhymes and syllable counts from a pronouncing dictionary.",
    )
    parser.add_argument(
        "--dict",
        dest="dict_path",
        default=None,
        help=(
            "CMU-format dictionary file (defaults to $VERSE_PHONETICS_DICT_PATH "
            "or the bundled CMU dictionary)."
        ),
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit results as JSON instead of plain text.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level for progress messages (default: WARNING).",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    rhymes = commands.add_parser("rhymes", help="List perfect rhymes for a word.")
    rhymes.add_argument("word", help="Word to rhyme.")
    rhymes.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of rhymes to print.",
    )

    syllables = commands.add_parser("syllables", help="Count syllables for words.")
    syllables.add_argument("words", nargs="+", metavar="WORD", help="Words to count.")
    return parser


def _run_rhymes(engine: PhoneticEngine, args: argparse.Namespace) -> None:
    results = engine.lookup_rhymes(args.word, limit=args.limit)
    if args.json:
        json.dump({"word": args.word, "rhymes": results}, sys.stdout, ensure_ascii=False)
        sys.stdout.write("\n")
        return
    for word in results:
        print(word)


def _run_syllables(engine: PhoneticEngine, args: argparse.Namespace) -> None:
    counts = {word: engine.syllable_count(word) for word in args.words}
    if args.json:
        json.dump(counts, sys.stdout, ensure_ascii=False)
        sys.stdout.write("\n")
        return
    for word, count in counts.items():
        print(f"{word}\t{count}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    try:
        engine = build_engine(args.dict_path)
    except DictionaryUnavailableError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.command == "rhymes":
        _run_rhymes(engine, args)
    else:
        _run_syllables(engine, args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
