#!/usr/bin/env python3
"""
ainuwikt - Render Ainu dictionary entries as Wiktionary wikitext.

Reads entries from a .json, .jsonl or .yaml file and writes one rendered
language section per entry.

Usage:
    ainuwikt INPUT [--output PATH] [--locale en|ja] [--format text|jsonl]

Example:
    ainuwikt data/entries.jsonl --locale en --output build/en.txt
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

import orjson

from ainuwikt.config import OUTPUT_FORMATS, ConfigError, RenderSettings, load_settings
from ainuwikt.loader import EntryFormatError, entry_from_dict, iter_entry_dicts
from ainuwikt.models import Entry
from ainuwikt.progress_display import RenderProgress
from ainuwikt.render import render_wikitext
from ainuwikt.style import resolve_locale

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s [%(levelname)s] %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)


def render_records(
    records: Iterable[Dict[str, Any]],
    locale: str,
    skip_invalid: bool = False,
    progress: Optional[RenderProgress] = None,
) -> Tuple[List[Tuple[Entry, str]], int]:
    """
    Validate and render raw records.

    Returns:
        ([(entry, wikitext), ...], skipped_count)

    Raises:
        EntryFormatError: On the first invalid record, unless skip_invalid
    """
    results = []
    skipped = 0
    for i, record in enumerate(records, 1):
        try:
            entry = entry_from_dict(record)
        except EntryFormatError as e:
            if not skip_invalid:
                raise EntryFormatError(f"record {i}: {e}") from e
            logger.warning(f"Skipping record {i}: {e}")
            skipped += 1
            if progress:
                progress.skipped()
            continue

        results.append((entry, render_wikitext(entry, locale)))
        if progress:
            progress.rendered(entry.lemma)

    return results, skipped


def render_file(
    path: Path,
    locale: str,
    skip_invalid: bool = False,
    progress: Optional[RenderProgress] = None,
) -> Tuple[List[Tuple[Entry, str]], int]:
    """
    Render every record of an entry file.

    With skip_invalid, undecodable JSONL lines are logged and counted as
    skipped along with records that fail validation.
    """
    bad_lines = 0

    def skip_line(error: EntryFormatError) -> None:
        nonlocal bad_lines
        logger.warning(f"Skipping line: {error}")
        bad_lines += 1
        if progress:
            progress.skipped()

    records = iter_entry_dicts(path, on_error=skip_line if skip_invalid else None)
    results, skipped = render_records(records, locale, skip_invalid, progress)
    return results, skipped + bad_lines


def format_output(results: List[Tuple[Entry, str]], locale: str, output_format: str) -> bytes:
    if output_format == 'jsonl':
        locale_code = resolve_locale(locale).value
        return b''.join(
            orjson.dumps({'lemma': entry.lemma, 'locale': locale_code, 'wikitext': text}) + b'\n'
            for entry, text in results
        )
    if not results:
        return b''
    return ('\n\n'.join(text for _, text in results) + '\n').encode('utf-8')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Render Ainu dictionary entries as Wiktionary wikitext',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    ainuwikt entries.jsonl --locale en
    ainuwikt entries.yaml --format jsonl --output build/ja.jsonl
        """
    )
    parser.add_argument('input', type=Path,
                        help='Entry file (.json, .jsonl, .yaml)')
    parser.add_argument('--output', '-o', type=Path,
                        help='Output file (default: stdout)')
    parser.add_argument('--locale', '-l',
                        help='Wiktionary edition: en or ja (default: ja)')
    parser.add_argument('--format', choices=OUTPUT_FORMATS, dest='output_format',
                        help='Output format (default: text)')
    parser.add_argument('--config', type=Path,
                        help='YAML settings file')
    parser.add_argument('--skip-invalid', action='store_true', default=None,
                        help='Skip invalid entries instead of aborting')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for ainuwikt CLI."""
    args = build_parser().parse_args(argv)

    try:
        settings: RenderSettings = load_settings(args.config)
    except ConfigError as e:
        logger.error(str(e))
        return 1

    settings = settings.merged(
        locale=args.locale,
        output_format=args.output_format,
        skip_invalid=args.skip_invalid,
    )

    logger.info(f"Rendering {args.input} (locale: {resolve_locale(settings.locale).value})")

    try:
        if args.output:
            with RenderProgress(f"Rendering {args.input.name}") as progress:
                results, skipped = render_file(
                    args.input, settings.locale, settings.skip_invalid, progress
                )
        else:
            results, skipped = render_file(args.input, settings.locale, settings.skip_invalid)
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1
    except EntryFormatError as e:
        logger.error(f"Invalid entry: {e}")
        return 1

    payload = format_output(results, settings.locale, settings.output_format)

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_bytes(payload)
        logger.info(f"  -> {args.output}")
    else:
        sys.stdout.write(payload.decode('utf-8'))
        sys.stdout.flush()

    logger.info(f"Rendered {len(results):,} entries ({skipped:,} skipped)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
