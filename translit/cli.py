#!/usr/bin/env python3
"""
translit CLI

Command-line interface for rule-based transliteration.

Usage:
    translit <language> [sources...] [options]
    translit tamil "மனநலப் பரிசோதனை"
    translit buckwalter -r "Allh"
    translit russian --swedish names.txt
    translit tamil scan.png --ocr-lang tam
    cat lines.txt | translit greek

Sources are files (text, gzip, PDF, Office, images) or URLs; any other
argument is converted as a literal string. With no sources, lines are read
from standard input.
"""

import argparse
import dataclasses
import inspect
import logging
import sys

from .batch import BatchProcessor
from .config import TranslitConfig
from .errors import ConfigurationError, ReaderError
from .languages import LANGUAGES, available_languages, get_language
from .languages.buckwalter import character_table
from .readers import is_source, read_source, supported_formats
from .unicode_info import unicode_info

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="translit",
        description=(
            "Rule-based transliteration between scripts\n\n"
            "Converts text line by line with a fixed symbol table per language.\n"
            "Unknown symbols are replaced by a placeholder and reported; the\n"
            "reversible languages can verify every line by converting it back."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  translit tamil \"கேள்வி\"\n"
            "  translit buckwalter -r \"Hum~u S\"\n"
            "  translit russian --swedish names.txt       # Swedish style output\n"
            "  translit tamil page.pdf -e                  # input<TAB>output\n"
            "  translit tamil scan.png --ocr-lang tam      # OCR an image\n"
            "  cat words.txt | translit greek --workers 4\n"
            "  translit --list                             # available languages\n"
            "  translit --describe \"ஶ்ரீ\"                   # Unicode names of the characters\n"
        ),
    )

    parser.add_argument(
        "language",
        nargs="?",
        help="Language pair to convert with (see --list)",
    )
    parser.add_argument(
        "sources",
        nargs="*",
        help="Files, URLs, or literal strings to convert (default: stdin)",
    )
    parser.add_argument(
        "-r", "--reverse",
        action="store_true",
        help="Convert from the transliteration back to the native script",
    )
    parser.add_argument(
        "-e", "--echo",
        action="store_true",
        help="Echo input: print input<TAB>output",
    )
    parser.add_argument(
        "-f", "--fail-on-error",
        action="store_true",
        help="Stop with exit status 1 at the first line that fails",
    )
    parser.add_argument(
        "--no-verify",
        action="store_true",
        help="Skip the round-trip check on reversible languages",
    )
    parser.add_argument(
        "--accept-ascii",
        action="store_true",
        help="Pass unmapped ASCII characters through unchanged",
    )
    parser.add_argument(
        "--swedish",
        action="store_true",
        help="Swedish style output (russian only)",
    )
    parser.add_argument(
        "--placeholder",
        default=None,
        help="Character substituted for unknown symbols (default: ?)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of worker threads (default: 1)",
    )
    parser.add_argument(
        "--ocr-lang",
        default=None,
        help="Tesseract language for image sources, e.g. tam or ara",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Show available languages and exit",
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="Show the Buckwalter character table and exit",
    )
    parser.add_argument(
        "--formats",
        action="store_true",
        help="Show all supported input formats and exit",
    )
    parser.add_argument(
        "--describe",
        action="append",
        metavar="TEXT",
        help="Show the Unicode code point, category and name of every character in TEXT and exit",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Log progress (-v) or debug details (-vv) to stderr",
    )
    return parser


def _load_config(args) -> TranslitConfig:
    """Environment configuration with command-line overrides applied."""
    config = TranslitConfig.from_env()
    overrides = {}
    if args.no_verify:
        overrides["verify"] = False
    if args.accept_ascii:
        overrides["accept_all_ascii"] = True
    if args.placeholder is not None:
        overrides["placeholder"] = args.placeholder
    if args.workers is not None:
        overrides["workers"] = args.workers
    if args.ocr_lang is not None:
        overrides["ocr_lang"] = args.ocr_lang
    if args.verbose == 1:
        overrides["log_level"] = "INFO"
    elif args.verbose > 1:
        overrides["log_level"] = "DEBUG"
    return dataclasses.replace(config, **overrides)


def _language_options(name: str, config: TranslitConfig, args) -> dict:
    """The subset of settings the language factory accepts."""
    factory = LANGUAGES.get(name.lower())
    if factory is None:
        return {}
    params = inspect.signature(factory).parameters
    candidates = {
        "verify": config.verify,
        "accept_all_ascii": config.accept_all_ascii,
        "placeholder": config.placeholder,
        "swedish": args.swedish,
    }
    if args.swedish and "swedish" not in params:
        logger.warning("--swedish has no effect for %s", name)
    if config.accept_all_ascii and "accept_all_ascii" not in params:
        logger.warning("ASCII passthrough is not configurable for %s", name)
    return {key: value for key, value in candidates.items() if key in params}


def _emit(processor: BatchProcessor, lines, args) -> bool:
    """Convert and print lines; False when --fail-on-error stopped the run."""
    for result in processor.process(lines):
        if not result.ok:
            print(f"ERROR {result.input}\t{'; '.join(result.messages)}", file=sys.stderr)
            if args.fail_on_error:
                return False
            continue
        if args.echo:
            print(f"{result.input}\t{result.output}")
        else:
            print(result.output)
    return True


def main(argv=None) -> int:
    parser = _build_parser()
    args = parser.parse_intermixed_args(argv)

    if args.list:
        _show_languages()
        return 0
    if args.table:
        _show_table()
        return 0
    if args.formats:
        _show_formats()
        return 0
    if args.describe:
        _describe(args.describe)
        return 0

    if not args.language:
        parser.print_help(sys.stderr)
        print("\nError: No language given. Use --list to see the available languages.", file=sys.stderr)
        return 2

    try:
        config = _load_config(args)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.debug("Configuration: %s", config.to_dict())

    try:
        pair = get_language(args.language, **_language_options(args.language, config, args))
        processor = BatchProcessor(pair, workers=config.workers, reverse=args.reverse)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    status = 0
    if args.sources:
        for source in args.sources:
            if is_source(source):
                try:
                    lines = read_source(source, ocr_lang=config.ocr_lang)
                except (ReaderError, OSError, RuntimeError) as e:
                    print(f"[ERROR] {source}: {e}", file=sys.stderr)
                    status = 1
                    continue
            else:
                lines = [source]
            if not _emit(processor, lines, args):
                status = 1
                break
    else:
        lines = (line.rstrip("\r\n") for line in sys.stdin)
        if not _emit(processor, lines, args):
            status = 1

    print(processor.report.summary(), file=sys.stderr)
    return status


def _show_languages():
    """Display the registered language pairs."""
    print("\nAvailable Languages:")
    print("-" * 40)
    for name in available_languages():
        pair = get_language(name)
        direction = "reversible" if pair.reversible else "one-way"
        print(f"  {name:<12} {pair.description} ({direction})")
    print()


def _show_table():
    """Display the Buckwalter character table."""
    for entry in character_table():
        print(f"{entry.buckwalter}\t{entry.arabic}\t{entry.description}")


def _describe(texts):
    """Display Unicode information for each character of texts."""
    for text in texts:
        for info in unicode_info(text):
            print(f"{info.code}\t{info.char}\t{info.category}\t{info.name}")


def _show_formats():
    """Display all supported formats."""
    print("\nSupported Input Formats:")
    print("-" * 40)
    for category, extensions in supported_formats().items():
        print(f"\n  {category}:")
        for ext in extensions:
            print(f"    {ext}")
    print()


if __name__ == "__main__":
    sys.exit(main())
