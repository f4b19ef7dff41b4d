"""
Render an Entry as a Wiktionary language section.

Sections are emitted in a fixed order; a section without data is skipped
entirely:

    language heading (+ script line on ja)
    pronunciation
    etymology
    POS heading + headword line
    definitions and examples
    usage
    derived / related / synonyms / antonyms
    references (only when an example is attributed)
    ---- separator
"""

from typing import Iterable, Sequence

from ainuwikt.citation import example_line
from ainuwikt.models import Entry, LinkMeta
from ainuwikt.selectors import (
    etymology_template,
    headword_line,
    link_line,
    pos_heading_title,
)
from ainuwikt.style import Locale, LocaleTable, locale_table, resolve_locale, STYLES
from ainuwikt.wikitext import PageBuilder

SEPARATOR = "----"
REFLIST = "{{reflist}}"


def _related_groups(entry: Entry, table: LocaleTable) -> list[tuple[str, Sequence[LinkMeta]]]:
    return [
        (table.derived, entry.derived),
        (table.related, entry.related),
        (table.synonyms, entry.synonyms),
        (table.antonyms, entry.antonyms),
    ]


def render_wikitext(entry: Entry, locale: Locale | str | None = Locale.JA) -> str:
    """Render one entry for the given Wiktionary edition ("en" or "ja")."""
    locale = resolve_locale(locale)
    table = locale_table(locale)
    page = PageBuilder(STYLES[locale])

    # Language header and script
    page.heading(2, table.language)
    if table.script_line:
        page.line(table.script_line)

    # Pronunciation
    if entry.pronunciation is None or entry.pronunciation.ipa:
        page.heading(3, table.pronunciation)
        page.line(table.ipa_line)

    # Etymology
    if entry.etymology:
        page.heading(3, table.etymology)
        page.line(etymology_template(entry.etymology).render())

    # Part of speech and headword
    page.heading(3, pos_heading_title(entry.pos, locale))
    page.line(headword_line(entry))

    # Definitions and examples
    for definition in entry.definitions:
        page.line(f"# {definition.gloss}")
        for example in definition.examples:
            page.line(example_line(example, locale))

    if entry.usage:
        page.heading(4, table.usage)
        page.line(entry.usage)

    for title, items in _related_groups(entry, table):
        if items:
            page.heading(4, title)
            page.lines([link_line(item) for item in items])

    if entry.has_attributed_examples:
        page.heading(3, table.references)
        page.line(REFLIST)

    if entry.add_separator:
        page.line(SEPARATOR)

    return page.text()


def render_entries(entries: Iterable[Entry], locale: Locale | str | None = Locale.JA) -> list[str]:
    """Render several entries independently, preserving order."""
    return [render_wikitext(entry, locale) for entry in entries]
