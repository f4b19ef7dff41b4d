"""
ainuwikt - Render Ainu dictionary entries as Wiktionary wikitext.

The renderer is pure: it takes a fully built Entry and returns text for
English ("en") or Japanese ("ja") Wiktionary.

    from ainuwikt import render_wikitext
    from ainuwikt.loader import entry_from_dict

    text = render_wikitext(entry_from_dict(record), "en")
"""

from ainuwikt.models import (
    Definition,
    Entry,
    Example,
    LinkMeta,
    NoAttribution,
    PartOfSpeech,
    PosArgs,
    Pronunciation,
    RefAttribution,
    Source,
    SourceAttribution,
    Transitivity,
)
from ainuwikt.render import render_entries, render_wikitext
from ainuwikt.style import Locale, Style, resolve_style

__all__ = [
    "Definition",
    "Entry",
    "Example",
    "LinkMeta",
    "Locale",
    "NoAttribution",
    "PartOfSpeech",
    "PosArgs",
    "Pronunciation",
    "RefAttribution",
    "Source",
    "SourceAttribution",
    "Style",
    "Transitivity",
    "render_entries",
    "render_wikitext",
    "resolve_style",
]
