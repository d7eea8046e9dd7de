"""
Main entry point for the jp-prefecture command-line interface.

Subcommands:
    lookup  resolve a single value to a prefecture
    list    print all 47 prefectures
    map     map a CSV column of prefecture values to canonical codes
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from jp_prefecture import prefectures
from jp_prefecture.config import LOG_LEVELS, MappingConfig
from jp_prefecture.data import ALL_FIELDS
from jp_prefecture.exceptions import (
    DataLoadError,
    FileAccessError,
    InvalidPrefectureCode,
    OutputGenerationError,
    PrefectureError,
)
from jp_prefecture.logging_config import setup_logging
from jp_prefecture.mapping_engine import MappingEngine


LOOKUP_FUNCTIONS = {
    'kanji': prefectures.find_by_kanji,
    'kanji_short': prefectures.find_by_kanji_short,
    'hiragana': prefectures.find_by_hiragana,
    'hiragana_short': prefectures.find_by_hiragana_short,
    'katakana': prefectures.find_by_katakana,
    'katakana_short': prefectures.find_by_katakana_short,
    'english': prefectures.find_by_english,
}


def build_parser() -> argparse.ArgumentParser:
    """Build the command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="jp-prefecture",
        description="Japanese prefecture lookup and mapping tool"
    )
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True

    lookup_parser = subparsers.add_parser("lookup", help="Resolve a single value to a prefecture")
    lookup_parser.add_argument("value", help="Prefecture name or code")
    lookup_parser.add_argument(
        "--by",
        choices=["auto"] + list(ALL_FIELDS),
        default="auto",
        help="Field to match against (default: auto, any name or a numeric code)"
    )
    lookup_parser.add_argument("--json", action="store_true", help="Print the result as JSON")

    list_parser = subparsers.add_parser("list", help="Print all prefectures")
    list_parser.add_argument("--json", action="store_true", help="Print the table as JSON")

    map_parser = subparsers.add_parser("map", help="Map a CSV column to prefecture codes")
    map_parser.add_argument("--input", required=True, help="Path to input CSV file")
    map_parser.add_argument("--column", required=True, help="Column holding prefecture values")
    map_parser.add_argument("--output", required=True, help="Output directory for results")
    map_parser.add_argument(
        "--fuzzy-threshold",
        type=int,
        default=85,
        help="Fuzzy matching threshold (0-100, default: 85)"
    )
    map_parser.add_argument(
        "--disable-fuzzy",
        action="store_true",
        help="Only accept exact matches"
    )
    map_parser.add_argument(
        "--fields",
        nargs="+",
        choices=list(ALL_FIELDS),
        default=["code", "kanji", "english"],
        help="Prefecture fields to append (default: code kanji english)"
    )
    map_parser.add_argument("--encoding", default="utf-8", help="Input file encoding (default: utf-8)")
    map_parser.add_argument("--progress", action="store_true", help="Show a progress bar")
    map_parser.add_argument(
        "--log-level",
        choices=list(LOG_LEVELS),
        default="INFO",
        help="Logging level (default: INFO)"
    )
    map_parser.add_argument("--log-file", help="Path to log file (default: inside output directory)")

    return parser


def resolve(value: str, by: str = "auto") -> prefectures.Prefecture:
    """Resolve a command line value using the requested field."""
    if by == "code" or (by == "auto" and value.strip().isdigit()):
        try:
            code = int(value)
        except ValueError:
            raise InvalidPrefectureCode(value)
        return prefectures.find_by_code(code)

    if by == "auto":
        return prefectures.find(value)
    return LOOKUP_FUNCTIONS[by](value)


def format_prefecture(prefecture: prefectures.Prefecture) -> str:
    return (
        f"{prefecture.code():>2}  {prefecture.kanji()}  "
        f"{prefecture.hiragana()}  {prefecture.katakana()}  {prefecture.english()}"
    )


def run_lookup(args) -> int:
    try:
        prefecture = resolve(args.value, args.by)
    except PrefectureError as e:
        if args.json:
            print(json.dumps(e.to_dict(), ensure_ascii=False))
        else:
            print(f"Error: {e}", file=sys.stderr)
            suggestions = prefectures.suggest(args.value)
            if suggestions:
                print("Did you mean:", file=sys.stderr)
                for candidate, score in suggestions:
                    print(f"  {candidate.kanji()} ({candidate.english()}, {score:.0f}%)", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(prefecture.to_dict(), ensure_ascii=False))
    else:
        print(format_prefecture(prefecture))
    return 0


def run_list(args) -> int:
    if args.json:
        print(json.dumps([p.to_dict() for p in prefectures.Prefecture], ensure_ascii=False, indent=2))
    else:
        for prefecture in prefectures.Prefecture:
            print(format_prefecture(prefecture))
    return 0


def run_map(args) -> int:
    config = MappingConfig(
        input_file=args.input,
        output_directory=args.output,
        column=args.column,
        fuzzy_threshold=args.fuzzy_threshold,
        enable_fuzzy_matching=not args.disable_fuzzy,
        output_fields=args.fields,
        encoding=args.encoding,
        show_progress=args.progress,
        log_level=args.log_level,
        log_file=args.log_file
    )

    logger = setup_logging(config)
    try:
        logger.info(f"Configuration: {config.to_dict()}")

        mapping_engine = MappingEngine(config, logger)
        _, processing_stats, generated_files = mapping_engine.run()

        print(f"\nMatch rate: {processing_stats.get_match_rate():.2f}% "
              f"({processing_stats.exact_matches:,} exact, {processing_stats.fuzzy_matches:,} fuzzy, "
              f"{processing_stats.unmatched:,} unmatched)")
        print("Generated Output Files:")
        for file_type, file_path in generated_files.items():
            print(f"  {file_type}: {Path(file_path).name}")
    except PrefectureError as e:
        logger.error(f"Mapping failed [{e.error_code}]: {e}")
        raise
    finally:
        logger.close()

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)

    commands = {
        "lookup": run_lookup,
        "list": run_list,
        "map": run_map,
    }

    try:
        return commands[args.command](args)

    except FileNotFoundError as e:
        print(f"\nFile Error: {e}", file=sys.stderr)
        print("Please check that the input file exists and is accessible.", file=sys.stderr)
        return 4

    except (DataLoadError, FileAccessError, OutputGenerationError) as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 3

    except ValueError as e:
        print(f"\nConfiguration Error: {e}", file=sys.stderr)
        return 2

    except KeyboardInterrupt:
        print("\nProcess interrupted by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
