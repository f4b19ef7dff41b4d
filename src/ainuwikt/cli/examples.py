#!/usr/bin/env python3
"""
ainuwikt-examples - Look up corpus example sentences for a term.

Prints {"examples": [...]} as JSON, or with --wikitext one rendered
example line per sentence, quoted from its source document.

Usage:
    ainuwikt-examples TERM --db PATH [--limit N] [--wikitext] [--locale en|ja]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import orjson

from ainuwikt.citation import example_line
from ainuwikt.config import ConfigError, load_settings
from ainuwikt.examples_store import DatabaseUnavailableError, ExampleStore, record_to_example

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s [%(levelname)s] %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Look up example sentences for a term in the corpus database',
    )
    parser.add_argument('term', help='Surface token or lemma to look up')
    parser.add_argument('--db', type=Path,
                        help='Corpus SQLite database (default: examples_db setting)')
    parser.add_argument('--limit', type=int,
                        help='Maximum number of examples')
    parser.add_argument('--wikitext', action='store_true',
                        help='Print rendered example lines instead of JSON')
    parser.add_argument('--locale', '-l',
                        help='Wiktionary edition for --wikitext: en or ja')
    parser.add_argument('--config', type=Path,
                        help='YAML settings file')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for ainuwikt-examples CLI."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.config)
    except ConfigError as e:
        logger.error(str(e))
        return 1
    settings = settings.merged(examples_db=args.db, examples_limit=args.limit, locale=args.locale)

    if settings.examples_db is None:
        logger.error("No database given (use --db or the examples_db setting)")
        return 1

    store = ExampleStore(settings.examples_db)
    try:
        records = store.find_examples(args.term, limit=settings.examples_limit)
    except DatabaseUnavailableError as e:
        logger.error(str(e))
        return 1

    logger.info(f"Found {len(records):,} examples for '{args.term}'")

    if args.wikitext:
        for record in records:
            sys.stdout.write(example_line(record_to_example(record), settings.locale) + '\n')
    else:
        sys.stdout.write(orjson.dumps({'examples': records}).decode('utf-8') + '\n')
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
