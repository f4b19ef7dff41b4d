"""
Example-sentence lookup in the Ainu corpus database.

The corpus is a SQLite database with three tables:

    tokens(sentence_id, token, lemma)
    sentences(id, ain, jpn, dialect, document_id)
    documents(id, title, book, author, year, url, dialect)

A term matches a sentence when it equals either a surface token or a
lemma of that sentence.
"""

import logging
import sqlite3
from pathlib import Path
from typing import Any, Dict, List, Optional

from ainuwikt.models import Example, NoAttribution, Source, SourceAttribution

logger = logging.getLogger(__name__)

RECORD_FIELDS = (
    'ain', 'jpn', 'sentence_dialect',
    'title', 'book', 'author', 'year', 'url', 'doc_dialect',
)


class DatabaseUnavailableError(RuntimeError):
    """Raised when the corpus database cannot be opened."""

    pass


class ExampleStore:
    """Read-only access to example sentences and their source documents."""

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)

    def _connect(self) -> sqlite3.Connection:
        if not self.db_path.exists():
            raise DatabaseUnavailableError(f"Database not available: {self.db_path}")
        uri = f"{self.db_path.resolve().as_uri()}?mode=ro"
        try:
            return sqlite3.connect(uri, uri=True)
        except sqlite3.Error as e:
            raise DatabaseUnavailableError(f"Database not available: {e}") from e

    def find_sentence_ids(self, conn: sqlite3.Connection, term: str) -> List[int]:
        rows = conn.execute(
            "SELECT sentence_id FROM tokens WHERE token = ? OR lemma = ?",
            (term, term),
        ).fetchall()
        # A sentence can match on several tokens
        return list(dict.fromkeys(row[0] for row in rows))

    def find_examples(self, term: str, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """
        Look up example sentences containing a term.

        Returns:
            One dict per sentence with keys from RECORD_FIELDS, ordered by
            sentence id; an empty list when nothing matches
        """
        conn = self._connect()
        try:
            sentence_ids = self.find_sentence_ids(conn, term)
            if not sentence_ids:
                logger.debug(f"No sentences found for '{term}'")
                return []

            placeholders = ','.join('?' for _ in sentence_ids)
            query = f"""
                SELECT s.ain, s.jpn, s.dialect AS sentence_dialect,
                       d.title, d.book, d.author, d.year, d.url, d.dialect AS doc_dialect
                FROM sentences s
                JOIN documents d ON s.document_id = d.id
                WHERE s.id IN ({placeholders})
                ORDER BY s.id
            """
            params: List[Any] = list(sentence_ids)
            if limit is not None:
                query += " LIMIT ?"
                params.append(limit)

            rows = conn.execute(query, params).fetchall()
        finally:
            conn.close()

        logger.debug(f"Found {len(rows)} examples for '{term}'")
        return [dict(zip(RECORD_FIELDS, row)) for row in rows]


def record_to_example(record: Dict[str, Any]) -> Example:
    """Turn one lookup record into an Example quoted from its document."""

    def text(key: str) -> Optional[str]:
        value = record.get(key)
        if value is None or value == '':
            return None
        return str(value)

    source = Source(
        author=text('author'),
        title=text('title'),
        book=text('book'),
        year=text('year'),
        url=text('url'),
    )
    if source == Source():
        attribution = NoAttribution()
    else:
        attribution = SourceAttribution(source)

    return Example(
        text=text('ain') or '',
        translation=text('jpn') or '',
        attribution=attribution,
    )
